"""
Medicine Name Extractor

Picks a best-guess medicine name from the text blocks the vision
collaborator read off a package.

The heuristic is a fixed English denylist of packaging terms plus a
digit/length filter. It is kept exactly as is; it is known to be
unreliable for non-English labels.
"""

from typing import List, Iterable
import re

from ...domain.entities.image_analysis import VisionAnnotation, ImageAnalysisResult


# Common packaging terms that are never the medicine name
MEDICINE_INDICATORS = [
    "mg",
    "tablet",
    "capsule",
    "tablets",
    "capsules",
    "prescription",
    "drug",
    "medicine",
    "pharmaceutical",
    "dose",
    "dosage",
    "active ingredient",
]

MAX_CANDIDATES = 3

_PURE_DIGITS = re.compile(r"^\d+$")


def is_candidate(text: str) -> bool:
    """True if a text block may be a medicine name."""
    lowered = (text or "").lower()
    return (
        lowered not in MEDICINE_INDICATORS
        and not _PURE_DIGITS.match(lowered)
        and len(lowered) > 2
    )


def extract_candidates(text_blocks: Iterable[str], limit: int = MAX_CANDIDATES) -> List[str]:
    """
    Filter text blocks down to candidate names, preserving order.

    Example:
        >>> extract_candidates(["500", "mg", "Acetaminophen", "Extra Strength"])
        ['Acetaminophen', 'Extra Strength']
    """
    candidates = [block for block in text_blocks if is_candidate(block)]
    return candidates[:limit]


def build_analysis_result(annotation: VisionAnnotation) -> ImageAnalysisResult:
    """Turn a raw vision annotation into the analysis shown to the user."""
    candidates = extract_candidates(annotation.text_blocks)
    return ImageAnalysisResult(
        medicine_name=candidates[0] if candidates else "",
        alternative_names=candidates[1:],
        full_text=annotation.full_text,
        objects=list(annotation.objects),
        logos=list(annotation.logos),
        labels=list(annotation.labels),
    )
