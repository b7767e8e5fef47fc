"""
Vision Analyzer Factory

Factory for creating vision analyzer instances.
"""

from typing import Dict, Any
from enum import Enum

from ...domain.ports.vision_analyzer import VisionAnalyzerPort
from .google_vision import GoogleVisionAnalyzer, DummyVisionAnalyzer


class VisionAnalyzerType(Enum):
    """Available vision analyzer implementations."""

    GOOGLE = "google"
    DUMMY = "dummy"


class VisionAnalyzerFactory:
    """
    Factory for creating vision analyzer instances.

    Usage:
        analyzer = VisionAnalyzerFactory.create(
            VisionAnalyzerType.GOOGLE,
            credentials_json=os.getenv("GOOGLE_CLOUD_STORAGE_KEY_FILE")
        )
    """

    @staticmethod
    def create(
        analyzer_type: VisionAnalyzerType,
        **kwargs
    ) -> VisionAnalyzerPort:
        """
        Create a vision analyzer instance.

        Args:
            analyzer_type: Type of analyzer to create
            **kwargs: Additional configuration options
                For Google:
                - credentials_json: Service account key (JSON string)
                - max_labels: Labels requested from LABEL_DETECTION

        Returns:
            VisionAnalyzerPort implementation
        """
        if analyzer_type == VisionAnalyzerType.GOOGLE:
            return GoogleVisionAnalyzer(
                credentials_json=kwargs.get("credentials_json"),
                max_labels=kwargs.get("max_labels", 5)
            )

        elif analyzer_type == VisionAnalyzerType.DUMMY:
            return DummyVisionAnalyzer()

        else:
            raise ValueError(f"Unknown analyzer type: {analyzer_type}")

    @staticmethod
    def create_from_config(config: Dict[str, Any]) -> VisionAnalyzerPort:
        """Create analyzer from configuration dictionary."""
        analyzer_type = VisionAnalyzerType(config.get("type", "google"))
        return VisionAnalyzerFactory.create(analyzer_type, **config)
