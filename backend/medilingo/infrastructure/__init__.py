"""
Infrastructure Layer

Concrete implementations of domain ports (adapters).
Contains integrations with external services and libraries.
"""

from .vision import GoogleVisionAnalyzer, VisionAnalyzerFactory
from .drug_records import OpenFDADrugRecordLookup, DrugRecordLookupFactory
from .llm import WatsonxTextGenerator, GroqTextGenerator, LLMFactory
from .translation import TranslatingTextGenerator
from .storage import JsonFileStorage, InMemoryStorage

__all__ = [
    # Vision
    "GoogleVisionAnalyzer",
    "VisionAnalyzerFactory",
    # Drug records
    "OpenFDADrugRecordLookup",
    "DrugRecordLookupFactory",
    # LLM
    "WatsonxTextGenerator",
    "GroqTextGenerator",
    "LLMFactory",
    "TranslatingTextGenerator",
    # Storage
    "JsonFileStorage",
    "InMemoryStorage",
]
