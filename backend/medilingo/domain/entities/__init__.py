"""
Domain Entities

Core business objects of the medicine lookup domain.
"""

from .image_analysis import VisionAnnotation, ImageAnalysisResult
from .drug_record import ConfirmedMedicine, FdaRecord
from .user_settings import (
    UserSettings,
    MedicalCondition,
    AgeRange,
    Language,
    ClarityLevel,
    MEDICAL_CONDITIONS,
    AGE_RANGES,
    LANGUAGES,
    CLARITY_LEVELS,
    default_settings,
)

__all__ = [
    "VisionAnnotation",
    "ImageAnalysisResult",
    "ConfirmedMedicine",
    "FdaRecord",
    "UserSettings",
    "MedicalCondition",
    "AgeRange",
    "Language",
    "ClarityLevel",
    "MEDICAL_CONDITIONS",
    "AGE_RANGES",
    "LANGUAGES",
    "CLARITY_LEVELS",
    "default_settings",
]
