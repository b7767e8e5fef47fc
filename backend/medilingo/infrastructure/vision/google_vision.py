"""
Google Cloud Vision Analyzer

Reads a medicine package photo with Google Cloud Vision: one
``annotate_image`` call requesting text detection, object localization,
logo detection and label detection.
"""

from typing import Optional, Dict, Any, List
import json
import logging
import time

from ...domain.ports.vision_analyzer import VisionAnalyzerPort
from ...domain.value_objects.image_data import ImageData
from ...domain.entities.image_analysis import VisionAnnotation
from ...domain.exceptions import (
    VisionAnalysisError,
    VisionConfigurationError,
)


logger = logging.getLogger(__name__)


class GoogleVisionAnalyzer(VisionAnalyzerPort):
    """
    Vision analyzer backed by the Google Cloud Vision API.

    Credentials are a service-account JSON document passed as a string
    (``GOOGLE_CLOUD_STORAGE_KEY_FILE``). Without one the client falls back to
    Application Default Credentials.

    Attributes:
        max_labels: Maximum number of image labels requested
    """

    def __init__(
        self,
        credentials_json: Optional[str] = None,
        max_labels: int = 5,
        client: Optional[Any] = None
    ):
        """
        Initialize Google Vision analyzer.

        Args:
            credentials_json: Service account key as a JSON string
            max_labels: Maximum labels for LABEL_DETECTION
            client: Pre-built ImageAnnotatorClient (optional)
        """
        self._credentials_json = credentials_json
        self._max_labels = max_labels
        self._client = client

        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def _init_client(self) -> None:
        """Create the ImageAnnotatorClient on first use."""
        from google.cloud import vision
        from google.oauth2 import service_account

        if not self._credentials_json:
            self.logger.info("No service account key configured, using default credentials")
            try:
                self._client = vision.ImageAnnotatorClient()
            except Exception as e:
                raise VisionConfigurationError(f"Vision client could not be created: {e}")
            return

        try:
            info = json.loads(self._credentials_json)
            credentials = service_account.Credentials.from_service_account_info(info)
        except (json.JSONDecodeError, ValueError, KeyError) as e:
            raise VisionConfigurationError(f"Invalid Google Cloud credentials: {e}")

        self._client = vision.ImageAnnotatorClient(credentials=credentials)
        self.logger.info(f"Google Vision client ready (project: {info.get('project_id', 'unknown')})")

    def _build_request(self, image: ImageData) -> Dict[str, Any]:
        from google.cloud import vision

        feature_type = vision.Feature.Type
        return {
            "image": {"content": image.bytes},
            "features": [
                {"type_": feature_type.TEXT_DETECTION},
                {"type_": feature_type.OBJECT_LOCALIZATION},
                {"type_": feature_type.LOGO_DETECTION},
                {"type_": feature_type.LABEL_DETECTION, "max_results": self._max_labels},
            ],
        }

    def annotate(self, image: ImageData) -> VisionAnnotation:
        """
        Annotate a medicine package image.

        Args:
            image: Image to analyze

        Returns:
            VisionAnnotation; ``text_blocks`` excludes the first text
            annotation, which holds the whole recognized text.
        """
        start_time = time.time()

        if self._client is None:
            self._init_client()

        try:
            response = self._client.annotate_image(self._build_request(image))
        except Exception as e:
            raise VisionAnalysisError(
                f"Vision request failed: {e}",
                details={"image": str(image)}
            )

        error_message = getattr(getattr(response, "error", None), "message", "")
        if error_message:
            raise VisionAnalysisError(f"Vision API error: {error_message}")

        annotation = self._to_annotation(response)

        processing_time = (time.time() - start_time) * 1000
        self.logger.info(
            f"Annotated image in {processing_time:.0f}ms: "
            f"{len(annotation.text_blocks)} text blocks, {len(annotation.labels)} labels"
        )
        return annotation

    @staticmethod
    def _to_annotation(response: Any) -> VisionAnnotation:
        texts: List[str] = [t.description for t in response.text_annotations]
        return VisionAnnotation(
            full_text=texts[0] if texts else "",
            text_blocks=texts[1:],
            objects=[o.name for o in response.localized_object_annotations],
            logos=[logo.description for logo in response.logo_annotations],
            labels=[label.description for label in response.label_annotations],
        )

    @property
    def name(self) -> str:
        return "GoogleCloudVision"


class DummyVisionAnalyzer(VisionAnalyzerPort):
    """
    Dummy vision analyzer for testing and offline runs.
    """

    def __init__(self, annotation: Optional[VisionAnnotation] = None):
        self._annotation = annotation or VisionAnnotation(
            full_text="TYLENOL\nExtra Strength\n500 mg",
            text_blocks=["TYLENOL", "Extra Strength", "500", "mg"],
            objects=["Packaged goods"],
            logos=["Tylenol"],
            labels=["Medicine", "Pharmaceutical drug"],
        )
        self.calls: List[ImageData] = []

    def annotate(self, image: ImageData) -> VisionAnnotation:
        self.calls.append(image)
        return self._annotation

    @property
    def name(self) -> str:
        return "DummyVision"
