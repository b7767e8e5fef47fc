"""
Image Analysis Entities

Vision collaborator output and the medicine-name guess derived from it.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Any


@dataclass(frozen=True)
class VisionAnnotation:
    """
    Raw annotation returned by the vision collaborator.

    Attributes:
        full_text: Complete recognized text of the image
        text_blocks: Individual text annotations, in detection order
            (the aggregated full-text annotation is not included)
        objects: Names of localized objects
        logos: Descriptions of detected logos
        labels: Descriptions of image labels
    """

    full_text: str = ""
    text_blocks: List[str] = field(default_factory=list)
    objects: List[str] = field(default_factory=list)
    logos: List[str] = field(default_factory=list)
    labels: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ImageAnalysisResult:
    """
    Result of analyzing one submitted image.

    Produced once per image submission and never mutated afterwards.
    """

    medicine_name: str = ""
    alternative_names: List[str] = field(default_factory=list)
    full_text: str = ""
    objects: List[str] = field(default_factory=list)
    logos: List[str] = field(default_factory=list)
    labels: List[str] = field(default_factory=list)

    @property
    def has_medicine_name(self) -> bool:
        return bool(self.medicine_name)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the JSON field names used by the web client."""
        return {
            "medicineName": self.medicine_name,
            "alternativeNames": list(self.alternative_names),
            "fullText": self.full_text,
            "objects": list(self.objects),
            "logos": list(self.logos),
            "labels": list(self.labels),
        }
