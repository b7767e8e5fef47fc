"""
User Settings

Persisted user preference record and the static option catalogues the
settings screen offers.
"""

from typing import List, Literal

from pydantic import BaseModel, Field


class MedicalCondition(BaseModel):
    id: str
    label: str


class AgeRange(BaseModel):
    id: str
    range: str


class Language(BaseModel):
    code: str
    name: str


class ClarityLevel(BaseModel):
    id: str
    name: str
    description: str = ""


# =============================================================================
# Option catalogues
# =============================================================================

MEDICAL_CONDITIONS = {
    "shared": [
        MedicalCondition(id="diabetes", label="Diabetes"),
        MedicalCondition(id="hypertension", label="High Blood Pressure"),
        MedicalCondition(id="heart_disease", label="Heart Disease"),
        MedicalCondition(id="asthma", label="Asthma"),
        MedicalCondition(id="kidney_disease", label="Kidney Disease"),
        MedicalCondition(id="liver_disease", label="Liver Disease"),
        MedicalCondition(id="allergies", label="Drug Allergies"),
    ],
    "female": [
        MedicalCondition(id="pregnancy", label="Pregnancy"),
        MedicalCondition(id="breastfeeding", label="Breastfeeding"),
        MedicalCondition(id="menopause", label="Menopause"),
    ],
    "male": [
        MedicalCondition(id="prostate", label="Prostate Conditions"),
    ],
}

AGE_RANGES = [
    AgeRange(id="18-30", range="18-30 years"),
    AgeRange(id="0-12", range="0-12 years"),
    AgeRange(id="13-17", range="13-17 years"),
    AgeRange(id="31-50", range="31-50 years"),
    AgeRange(id="51-65", range="51-65 years"),
    AgeRange(id="65+", range="65+ years"),
]

LANGUAGES = [
    Language(code="en", name="English"),
    Language(code="es", name="Spanish"),
    Language(code="fr", name="French"),
    Language(code="de", name="German"),
    Language(code="it", name="Italian"),
    Language(code="pt", name="Portuguese"),
    Language(code="ar", name="Arabic"),
    Language(code="hi", name="Hindi"),
    Language(code="zh-CN", name="Chinese (Simplified)"),
    Language(code="ja", name="Japanese"),
    Language(code="tr", name="Turkish"),
]

CLARITY_LEVELS = [
    ClarityLevel(id="simple", name="Simple", description="Everyday words, short sentences"),
    ClarityLevel(id="standard", name="Standard", description="Plain language with key medical terms"),
    ClarityLevel(id="detailed", name="Detailed", description="Full medical terminology"),
]


def shared_condition_ids() -> List[str]:
    return [c.id for c in MEDICAL_CONDITIONS["shared"]]


# =============================================================================
# Settings record
# =============================================================================

class UserSettings(BaseModel):
    """
    User preference record.

    Written wholesale on every change; helpers return new copies so callers
    never mutate a record that is already persisted.
    """

    sex: Literal["male", "female"] = "female"
    conditions: List[str] = Field(default_factory=list)
    age: AgeRange = Field(default_factory=lambda: AGE_RANGES[0])
    language: Language = Field(default_factory=lambda: LANGUAGES[0])
    clarity: ClarityLevel = Field(default_factory=lambda: CLARITY_LEVELS[0])

    def available_conditions(self) -> List[MedicalCondition]:
        """Shared conditions plus those specific to the selected sex."""
        return MEDICAL_CONDITIONS["shared"] + MEDICAL_CONDITIONS[self.sex]

    def with_sex(self, sex: str) -> "UserSettings":
        """Change sex, keeping only conditions from the shared catalogue."""
        if sex not in ("male", "female"):
            raise ValueError(f"Unknown sex: {sex}")
        shared = shared_condition_ids()
        return self.model_copy(update={
            "sex": sex,
            "conditions": [c for c in self.conditions if c in shared],
        })

    def toggle_condition(self, condition_id: str) -> "UserSettings":
        if condition_id in self.conditions:
            conditions = [c for c in self.conditions if c != condition_id]
        else:
            conditions = self.conditions + [condition_id]
        return self.model_copy(update={"conditions": conditions})


def default_settings() -> UserSettings:
    return UserSettings()
