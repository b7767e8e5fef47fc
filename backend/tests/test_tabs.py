"""
Information tab rendering.
"""

from medilingo.application.presentation.tabs import (
    HERBAL_ALTERNATIVES_LINES,
    LOADING_TEXT,
    NO_INGREDIENTS_TEXT,
    NO_OVERVIEW_TEXT,
    NO_SIDE_EFFECTS_TEXT,
    render_tabs,
)
from medilingo.domain.entities.drug_record import FdaRecord
from medilingo.domain.entities.image_analysis import ImageAnalysisResult
from medilingo.infrastructure.drug_records import sample_label


def by_name(tabs):
    return {tab.name: tab for tab in tabs}


class TestRenderTabs:

    def test_four_tabs_in_order(self):
        tabs = render_tabs("", None, None, False)
        assert [t.name for t in tabs] == ["Overview", "Ingredients", "Side Effects", "Herbal Alternatives"]

    def test_placeholders_without_record(self):
        tabs = by_name(render_tabs("", None, None, False))

        assert tabs["Overview"].lines == [NO_OVERVIEW_TEXT]
        assert tabs["Ingredients"].lines == [NO_INGREDIENTS_TEXT]
        assert tabs["Side Effects"].lines == [NO_SIDE_EFFECTS_TEXT]
        assert tabs["Side Effects"].lines == ["No side effects information available"]
        assert tabs["Herbal Alternatives"].lines == HERBAL_ALTERNATIVES_LINES

    def test_record_sections(self):
        record = FdaRecord(sample_label())
        image = ImageAnalysisResult(medicine_name="TYLENOL")

        tabs = by_name(render_tabs("Tylenol", image, record, False))

        assert tabs["Overview"].lines == [
            "Tylenol",
            "Identified from image: TYLENOL",
            "Pain reliever/fever reducer",
        ]
        assert tabs["Ingredients"].lines[0].startswith("Acetaminophen 500 mg")
        assert tabs["Side Effects"].lines == ["Rarely, allergic skin reactions may occur."]

    def test_each_tab_falls_back_independently(self):
        raw = sample_label()
        del raw["results"][0]["adverse_reactions"]

        tabs = by_name(render_tabs("Tylenol", None, FdaRecord(raw), False))

        assert tabs["Side Effects"].lines == [NO_SIDE_EFFECTS_TEXT]
        assert tabs["Overview"].lines[-1] == "Pain reliever/fever reducer"

    def test_overview_falls_back_to_indications(self):
        raw = sample_label()
        label = raw["results"][0]
        del label["purpose"]
        label["indications_and_usage"] = ["For the temporary relief of minor aches."]

        tabs = by_name(render_tabs("Tylenol", None, FdaRecord(raw), False))

        assert tabs["Overview"].lines[-1] == "For the temporary relief of minor aches."

    def test_loading_hides_record_tabs_only(self):
        tabs = by_name(render_tabs("Tylenol", None, FdaRecord(sample_label()), True))

        for name in ("Overview", "Ingredients", "Side Effects"):
            assert tabs[name].lines == [LOADING_TEXT]
            assert tabs[name].loading is True
        assert tabs["Herbal Alternatives"].lines == HERBAL_ALTERNATIVES_LINES

    def test_speech_text_joins_lines(self):
        tab = by_name(render_tabs("", None, None, False))["Herbal Alternatives"]
        assert tab.speech_text == " ".join(HERBAL_ALTERNATIVES_LINES)
        assert tab.to_dict()["speechText"] == tab.speech_text

    def test_leftover_record_hidden_without_selection(self):
        record = FdaRecord(sample_label())
        image = ImageAnalysisResult(medicine_name="TYLENOL")

        tabs = by_name(render_tabs("", image, record, False))

        assert tabs["Overview"].lines == [NO_OVERVIEW_TEXT]
        assert tabs["Ingredients"].lines == [NO_INGREDIENTS_TEXT]
        assert tabs["Side Effects"].lines == [NO_SIDE_EFFECTS_TEXT]
