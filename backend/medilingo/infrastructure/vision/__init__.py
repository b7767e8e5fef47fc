"""
Vision Analysis Adapters

Implementations of VisionAnalyzerPort.
"""

from .google_vision import GoogleVisionAnalyzer, DummyVisionAnalyzer
from .factory import VisionAnalyzerFactory, VisionAnalyzerType

__all__ = [
    "GoogleVisionAnalyzer",
    "DummyVisionAnalyzer",
    "VisionAnalyzerFactory",
    "VisionAnalyzerType",
]
