"""
Medicine name extraction from package text.

Run with: pytest backend/tests/test_name_extractor.py -v
"""

from dataclasses import dataclass
from typing import List

import pytest

from medilingo.application.services.medicine_name_extractor import (
    MEDICINE_INDICATORS,
    build_analysis_result,
    extract_candidates,
    is_candidate,
)
from medilingo.domain.entities.image_analysis import VisionAnnotation


@dataclass
class Case:
    id: str
    blocks: List[str]
    name: str
    alternatives: List[str]


CASES: List[Case] = [
    Case("E01", ["500", "mg", "Acetaminophen", "Extra Strength"], "Acetaminophen", ["Extra Strength"]),
    Case("E02", ["TABLETS", "Ibuprofen", "200", "Advil", "Pain Reliever", "Fever"], "Ibuprofen", ["Advil", "Pain Reliever"]),
    Case("E03", ["mg", "10", "Rx", "dose"], "", []),
    Case("E04", [], "", []),
    Case("E05", ["Active Ingredient", "Loratadine"], "Loratadine", []),
    Case("E06", ["20mg", "Omeprazole"], "20mg", ["Omeprazole"]),
]


@pytest.mark.parametrize("case", CASES, ids=lambda c: c.id)
def test_analysis_result_from_text_blocks(case):
    result = build_analysis_result(VisionAnnotation(text_blocks=case.blocks))

    assert result.medicine_name == case.name
    assert result.alternative_names == case.alternatives


class TestCandidateFilter:
    """Denylist, digit and length rules."""

    def test_denylist_is_case_insensitive(self):
        for term in MEDICINE_INDICATORS:
            assert not is_candidate(term.upper())

    def test_pure_digits_rejected(self):
        assert not is_candidate("1000")

    def test_short_tokens_rejected(self):
        assert not is_candidate("Rx")
        assert is_candidate("Rxa")

    def test_at_most_three_candidates_in_order(self):
        blocks = ["Alpha", "Beta", "Gamma", "Delta"]
        assert extract_candidates(blocks) == ["Alpha", "Beta", "Gamma"]


def test_annotation_fields_are_carried_over():
    annotation = VisionAnnotation(
        full_text="TYLENOL\n500 mg",
        text_blocks=["TYLENOL", "500", "mg"],
        objects=["Box"],
        logos=["Tylenol"],
        labels=["Medicine", "Pill"],
    )

    result = build_analysis_result(annotation).to_dict()

    assert result == {
        "medicineName": "TYLENOL",
        "alternativeNames": [],
        "fullText": "TYLENOL\n500 mg",
        "objects": ["Box"],
        "logos": ["Tylenol"],
        "labels": ["Medicine", "Pill"],
    }
