from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

from src.domain.models import PatientProfile, ScoredCondition


SYMPTOMS_MAX_LENGTH = 500
ADDITIONAL_INFO_MAX_LENGTH = 500
OTHER_INFO_MAX_LENGTH = 1000

# Accept both the transport's camelCase keys and our own field names
PROFILE_ALIASES = {
    "age": "age",
    "sex": "sex",
    "weight_kg": "weight_kg",
    "weightKg": "weight_kg",
    "height_cm": "height_cm",
    "heightCm": "height_cm",
}


def sanitize_text(value: Any, max_length: int) -> str:
    if not isinstance(value, str):
        return ""
    return value[:max_length].strip()


class AnalyzeRequest(BaseModel):
    symptoms: str
    additional_info: str = ""
    other_relevant_info: str = ""
    patient_profile: Optional[PatientProfile] = None

    @field_validator("symptoms", mode="before")
    @classmethod
    def validate_symptoms(cls, v: Any) -> str:
        v = sanitize_text(v, SYMPTOMS_MAX_LENGTH)
        if not v:
            raise ValueError("Symptoms are required and must be non-empty")
        return v

    @field_validator("additional_info", mode="before")
    @classmethod
    def validate_additional_info(cls, v: Any) -> str:
        return sanitize_text(v, ADDITIONAL_INFO_MAX_LENGTH)

    @field_validator("other_relevant_info", mode="before")
    @classmethod
    def validate_other_info(cls, v: Any) -> str:
        return sanitize_text(v, OTHER_INFO_MAX_LENGTH)

    @field_validator("patient_profile", mode="before")
    @classmethod
    def validate_profile(cls, v: Any) -> Optional[PatientProfile]:
        if isinstance(v, PatientProfile):
            profile = v
        elif isinstance(v, dict):
            fields = {PROFILE_ALIASES[k]: val for k, val in v.items() if k in PROFILE_ALIASES}
            profile = PatientProfile(**fields)
        else:
            return None
        return None if profile.is_empty() else profile


class ConditionSummary(BaseModel):
    condition: str
    percentage: int = Field(..., ge=0, le=100)
    transmission: Optional[str] = None
    precautions: List[str] = []
    recovery_time: Optional[str] = None
    emergency_warnings: List[str] = []

    @classmethod
    def from_scored(cls, scored: ScoredCondition) -> "ConditionSummary":
        return cls(
            condition=scored.condition,
            percentage=scored.percentage,
            transmission=scored.transmission,
            precautions=list(scored.precautions),
            recovery_time=scored.recovery_time,
            emergency_warnings=list(scored.emergency_warnings),
        )


class AnalyzeResponse(BaseModel):
    analysis: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    conditions: List[ConditionSummary]
