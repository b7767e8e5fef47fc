"""
Ports (Interfaces)

Abstract interfaces defining the contracts for infrastructure adapters.
Following Hexagonal Architecture / Ports & Adapters pattern.
"""

from .vision_analyzer import VisionAnalyzerPort
from .drug_record_lookup import DrugRecordLookupPort
from .text_generator import TextGeneratorPort
from .key_value_storage import KeyValueStoragePort

__all__ = [
    "VisionAnalyzerPort",
    "DrugRecordLookupPort",
    "TextGeneratorPort",
    "KeyValueStoragePort",
]
