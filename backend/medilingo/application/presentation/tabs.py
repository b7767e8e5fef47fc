"""
Medicine Information Tabs

Pure rendering of the dashboard session into the four information tabs.
No network access happens here; missing label sections fall back to fixed
placeholder text, one tab at a time.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any

from ...domain.entities.drug_record import FdaRecord
from ...domain.entities.image_analysis import ImageAnalysisResult


LOADING_TEXT = "Loading..."

NO_OVERVIEW_TEXT = "No overview information available"
NO_INGREDIENTS_TEXT = "No ingredients information available"
NO_SIDE_EFFECTS_TEXT = "No side effects information available"

HERBAL_ALTERNATIVES_LINES = [
    "No herbal alternatives information available at this time.",
    "Please consult with a healthcare provider before considering any alternatives.",
]


@dataclass(frozen=True)
class TabPanel:
    """
    One information tab.

    Attributes:
        name: Tab caption
        title: Heading shown inside the panel
        lines: Paragraphs of the panel
        loading: Whether the panel shows the loading placeholder
    """

    name: str
    title: str
    lines: List[str] = field(default_factory=list)
    loading: bool = False

    @property
    def speech_text(self) -> str:
        """Text read aloud by the speak button."""
        return " ".join(self.lines)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "title": self.title,
            "lines": list(self.lines),
            "loading": self.loading,
            "speechText": self.speech_text,
        }


def _overview(selected_medicine: str, image_analysis: Optional[ImageAnalysisResult],
              record: Optional[FdaRecord]) -> List[str]:
    if record is None or not record.purpose:
        return [NO_OVERVIEW_TEXT]

    lines = [selected_medicine]
    if image_analysis is not None and image_analysis.has_medicine_name:
        lines.append(f"Identified from image: {image_analysis.medicine_name}")
    lines.append(record.purpose)
    return lines


def _ingredients(record: Optional[FdaRecord]) -> List[str]:
    if record is None:
        return [NO_INGREDIENTS_TEXT]

    lines = []
    if record.active_ingredient:
        lines.append(record.active_ingredient)
    if record.inactive_ingredient:
        lines.append(record.inactive_ingredient)
    return lines or [NO_INGREDIENTS_TEXT]


def _side_effects(record: Optional[FdaRecord]) -> List[str]:
    if record is None or not record.adverse_reactions:
        return [NO_SIDE_EFFECTS_TEXT]
    return [record.adverse_reactions]


def render_tabs(
    selected_medicine: str,
    image_analysis: Optional[ImageAnalysisResult],
    fda_record: Optional[FdaRecord],
    is_loading: bool
) -> List[TabPanel]:
    """
    Render Overview, Ingredients, Side Effects and Herbal Alternatives.

    While a lookup is loading the three label tabs show the loading
    placeholder; the herbal tab never depends on the record. Without a
    selected medicine a leftover record is not shown.
    """
    if not selected_medicine:
        fda_record = None
        image_analysis = None

    if is_loading:
        overview = ingredients = side_effects = [LOADING_TEXT]
    else:
        overview = _overview(selected_medicine, image_analysis, fda_record)
        ingredients = _ingredients(fda_record)
        side_effects = _side_effects(fda_record)

    return [
        TabPanel("Overview", "Overview", overview, loading=is_loading),
        TabPanel("Ingredients", "Ingredients", ingredients, loading=is_loading),
        TabPanel("Side Effects", "Possible Side Effects", side_effects, loading=is_loading),
        TabPanel("Herbal Alternatives", "Herbal Alternatives", list(HERBAL_ALTERNATIVES_LINES)),
    ]
