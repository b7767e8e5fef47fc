"""
Application Services

Services coordinating domain operations around the lookup flow.
"""

from .image_analysis_service import ImageAnalysisService
from .medicine_name_extractor import (
    MEDICINE_INDICATORS,
    build_analysis_result,
    extract_candidates,
)
from .preference_store import PreferenceStore
from .prompt_builder import PromptBuilder

__all__ = [
    "ImageAnalysisService",
    "MEDICINE_INDICATORS",
    "build_analysis_result",
    "extract_candidates",
    "PreferenceStore",
    "PromptBuilder",
]
