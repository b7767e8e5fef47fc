"""
Prompt Builder

Builds the structured prompt sent to the text-generation collaborator from
a label record and the user's settings.
"""

from typing import Any, Dict, Optional, Union
import json

from ...domain.entities.drug_record import FdaRecord
from ...domain.entities.user_settings import UserSettings


SYSTEM_PROMPT = (
    "You are a medicine information assistant. Using only the label data "
    "provided, explain what the medicine is used for, its manufacturer, its "
    "ingredients and its side effects. Adjust the explanation to the user "
    "profile. Do not diagnose and do not prescribe doses; remind the user to "
    "consult a doctor or pharmacist."
)

CLARITY_INSTRUCTIONS = {
    "simple": "Use everyday words and short sentences a child could follow.",
    "standard": "Use plain language and briefly explain any medical term.",
    "detailed": "Use precise medical terminology and include all relevant detail.",
}

# Label sections longer than this are cut to keep the prompt small
MAX_SECTION_LENGTH = 1500


def _truncate(text: str, max_length: int = MAX_SECTION_LENGTH) -> str:
    if len(text) <= max_length:
        return text
    return text[:max_length].rstrip() + "..."


class PromptBuilder:
    """
    Builds generation prompts.

    Usage:
        builder = PromptBuilder()
        prompt = builder.build(fda_record, settings)    # dict
        text = builder.render(prompt)                    # str for the model
    """

    def __init__(self, system_prompt: str = SYSTEM_PROMPT):
        self.system_prompt = system_prompt

    def build(
        self,
        record: FdaRecord,
        settings: UserSettings,
        medicine_name: Optional[str] = None
    ) -> Dict[str, Any]:
        """Structured prompt: label facts, user profile and output style."""
        return {
            "medicine": medicine_name or record.brand_name,
            "generic_name": record.generic_name,
            "manufacturer": ", ".join(record.openfda_field("manufacturer_name")),
            "purpose": _truncate(record.purpose),
            "active_ingredients": _truncate(record.active_ingredient),
            "inactive_ingredients": _truncate(record.inactive_ingredient),
            "warnings": _truncate(record.warnings),
            "side_effects": _truncate(record.adverse_reactions),
            "user_profile": {
                "sex": settings.sex,
                "age_range": settings.age.range,
                "conditions": list(settings.conditions),
            },
            "language": settings.language.name,
            "clarity": CLARITY_INSTRUCTIONS.get(
                settings.clarity.id, CLARITY_INSTRUCTIONS["standard"]
            ),
        }

    @staticmethod
    def render(prompt: Union[Dict[str, Any], str]) -> str:
        """Render an object-or-string prompt as model input text."""
        if isinstance(prompt, str):
            return prompt
        return json.dumps(prompt, ensure_ascii=False, indent=2)

