"""
Image Analysis Service

Vision lookup for a submitted image payload.
"""

import logging

from .medicine_name_extractor import build_analysis_result
from ...domain.entities.image_analysis import ImageAnalysisResult
from ...domain.exceptions import InvalidImageError
from ...domain.ports.vision_analyzer import VisionAnalyzerPort
from ...domain.value_objects.image_data import ImageData


class ImageAnalysisService:
    """
    Application service for reading a medicine package photo.

    Usage:
        service = ImageAnalysisService(vision_analyzer)
        result = service.analyze("data:image/png;base64,....")
        result.medicine_name
    """

    def __init__(self, analyzer: VisionAnalyzerPort):
        self.analyzer = analyzer
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def analyze(self, image_url: str) -> ImageAnalysisResult:
        """
        Analyze an image given as a data URL.

        Raises:
            InvalidImageError: If no usable image data is supplied
            VisionAnalysisError: If the vision collaborator fails
        """
        if not image_url:
            raise InvalidImageError("Image URL is required")

        try:
            image = ImageData.from_data_url(image_url)
        except ValueError as e:
            raise InvalidImageError(str(e))

        return self.analyze_image(image)

    def analyze_image(self, image: ImageData) -> ImageAnalysisResult:
        self.logger.info(f"Analyzing {image} with {self.analyzer.name}")
        annotation = self.analyzer.annotate(image)
        result = build_analysis_result(annotation)

        self.logger.info(
            f"Vision result: name={result.medicine_name!r}, "
            f"alternatives={result.alternative_names}, labels={result.labels}"
        )
        return result
