"""
Test doubles for the collaborator ports.
"""

from io import BytesIO
from typing import Optional, Dict, Any, List, Set
import threading

from PIL import Image

from medilingo.domain.entities.drug_record import ConfirmedMedicine, FdaRecord
from medilingo.domain.entities.image_analysis import VisionAnnotation
from medilingo.domain.exceptions import (
    DrugRecordLookupError,
    MedicineNotFoundError,
    TextGenerationError,
    VisionAnalysisError,
)
from medilingo.domain.ports import DrugRecordLookupPort, TextGeneratorPort, VisionAnalyzerPort
from medilingo.infrastructure.drug_records import sample_label


def make_image_bytes(fmt: str = "PNG", size=(8, 8)) -> bytes:
    buffer = BytesIO()
    Image.new("RGB", size, color=(200, 30, 30)).save(buffer, format=fmt)
    return buffer.getvalue()


LABELS = {
    "tylenol": sample_label("Tylenol", "ACETAMINOPHEN"),
    "advil": sample_label("Advil", "IBUPROFEN"),
}


class FakeVision(VisionAnalyzerPort):
    """Returns a fixed annotation, or raises when ``fail`` is set."""

    def __init__(self, text_blocks: Optional[List[str]] = None, fail: bool = False):
        self.text_blocks = ["500", "mg", "Tylenol", "Extra Strength"] if text_blocks is None else text_blocks
        self.fail = fail
        self.calls = 0

    def annotate(self, image) -> VisionAnnotation:
        self.calls += 1
        if self.fail:
            raise VisionAnalysisError("Vision API error: quota exceeded")
        return VisionAnnotation(
            full_text="\n".join(self.text_blocks),
            text_blocks=list(self.text_blocks),
            objects=["Packaged goods"],
            logos=["Tylenol"],
            labels=["Medicine"],
        )

    @property
    def name(self) -> str:
        return "FakeVision"


class FakeDrugRecords(DrugRecordLookupPort):
    """
    In-memory labels keyed by lower-cased brand name.

    Names in ``gated`` block inside the worker thread until ``gate`` is set.
    """

    def __init__(
        self,
        labels: Optional[Dict[str, Dict[str, Any]]] = None,
        fail_confirm: bool = False,
        fail_label: bool = False,
        gated: Optional[Set[str]] = None
    ):
        self.labels = LABELS if labels is None else labels
        self.fail_confirm = fail_confirm
        self.fail_label = fail_label
        self.gated = gated or set()
        self.gate = threading.Event()
        self.confirm_calls: List[str] = []
        self.label_calls: List[str] = []

    def _wait(self, name: str) -> None:
        if name.lower() in self.gated:
            self.gate.wait(timeout=5)

    def confirm(self, name: str) -> ConfirmedMedicine:
        self.confirm_calls.append(name)
        self._wait(name)
        if self.fail_confirm:
            raise DrugRecordLookupError("openFDA returned HTTP 500")
        raw = self.labels.get(name.lower())
        if raw is None:
            raise MedicineNotFoundError(name)
        record = FdaRecord(raw)
        return ConfirmedMedicine(brand_name=record.brand_name, generic_name=record.generic_name)

    def fetch_label(self, brand_name: str) -> FdaRecord:
        self.label_calls.append(brand_name)
        if self.fail_label:
            raise DrugRecordLookupError("openFDA returned HTTP 503")
        raw = self.labels.get(brand_name.lower())
        if raw is None:
            raise MedicineNotFoundError(brand_name)
        return FdaRecord(raw)

    @property
    def name(self) -> str:
        return "FakeDrugRecords"


class FakeGenerator(TextGeneratorPort):
    """Echoes a fixed text; optionally fails or waits for ``gate``."""

    def __init__(self, text: str = "Tylenol relieves pain.", fail: bool = False, gated: bool = False):
        self.text = text
        self.fail = fail
        self.gated = gated
        self.gate = threading.Event()
        self.prompts: List[str] = []
        self.options: List[Dict[str, Any]] = []

    def generate(self, prompt: str, options: Optional[Dict[str, Any]] = None) -> str:
        self.prompts.append(prompt)
        self.options.append(dict(options or {}))
        if self.gated:
            self.gate.wait(timeout=5)
        if self.fail:
            raise TextGenerationError("watsonx.ai generation failed: 503")
        return self.text

    @property
    def model_name(self) -> str:
        return "FakeLLM"
