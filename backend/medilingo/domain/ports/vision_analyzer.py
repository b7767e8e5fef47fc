"""
Vision Analyzer Port

Abstract interface for the vision (OCR / object detection) collaborator.
"""

from abc import ABC, abstractmethod

from ..value_objects.image_data import ImageData
from ..entities.image_analysis import VisionAnnotation


class VisionAnalyzerPort(ABC):
    """
    Port (interface) for vision collaborator implementations.

    Responsible for reading a medicine package photo:
    - Recognized text (full text and individual text blocks)
    - Localized objects
    - Logos
    - Generic image labels
    """

    @abstractmethod
    def annotate(self, image: ImageData) -> VisionAnnotation:
        """
        Annotate an image.

        Args:
            image: Image data to analyze

        Returns:
            VisionAnnotation with text blocks, objects, logos and labels

        Raises:
            VisionAnalysisError: If the collaborator call fails
            MalformedUpstreamResponseError: If the response has an unexpected shape
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the name of the underlying service."""
        pass
