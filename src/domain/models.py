import math
from enum import Enum
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ConditionRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    keywords: Tuple[str, ...]
    base_score: float = Field(..., ge=0.0, le=1.0)
    transmission_note: Optional[str] = None
    recovery_time_note: Optional[str] = None
    precautions: Tuple[str, ...] = ()
    emergency_warnings: Tuple[str, ...] = ()
    chronic_leaning: bool = False

    @field_validator("keywords")
    @classmethod
    def lowercase_keywords(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        seen: List[str] = []
        for kw in v:
            kw = kw.strip().lower()
            if kw and kw not in seen:
                seen.append(kw)
        return tuple(seen)


SEXES = {"male", "female", "other"}


def _as_number(v: Any) -> Optional[float]:
    # bool is an int subclass but never a valid measurement; NaN compares False to any bound
    if isinstance(v, bool) or not isinstance(v, (int, float)) or not math.isfinite(v):
        return None
    return v


class PatientProfile(BaseModel):
    """Optional per-request patient attributes.

    Out-of-range or wrongly typed values are dropped to ``None`` instead of
    failing validation, so a partially filled form never blocks an analysis.
    """

    model_config = ConfigDict(frozen=True)

    age: Optional[float] = None
    sex: Optional[str] = None
    weight_kg: Optional[float] = None
    height_cm: Optional[float] = None

    @field_validator("age", mode="before")
    @classmethod
    def validate_age(cls, v: Any) -> Optional[float]:
        v = _as_number(v)
        if v is None or v < 0 or v > 150:
            return None
        return v

    @field_validator("sex", mode="before")
    @classmethod
    def validate_sex(cls, v: Any) -> Optional[str]:
        if not isinstance(v, str):
            return None
        v = v.strip().lower()
        return v if v in SEXES else None

    @field_validator("weight_kg", mode="before")
    @classmethod
    def validate_weight(cls, v: Any) -> Optional[float]:
        v = _as_number(v)
        if v is None or v <= 0 or v > 500:
            return None
        return v

    @field_validator("height_cm", mode="before")
    @classmethod
    def validate_height(cls, v: Any) -> Optional[float]:
        v = _as_number(v)
        if v is None or v < 50 or v > 250:
            return None
        return v

    def is_empty(self) -> bool:
        return all(getattr(self, f) is None for f in ("age", "sex", "weight_kg", "height_cm"))


class ScoredCondition(BaseModel):
    condition: str
    raw_score: float = Field(..., ge=0.0, le=0.95)
    percentage: int = Field(..., ge=0, le=100)
    transmission: Optional[str] = None
    precautions: List[str] = []
    recovery_time: Optional[str] = None
    emergency_warnings: List[str] = []


class SafetyTag(str, Enum):
    NOT_SAFE = "Not safe to self-manage — seek pediatric/urgent medical advice."
    ELDERLY_CAUTION = "Use caution — consider contacting a healthcare professional before self-managing."
    PREGNANCY_CHECK = (
        "Check with a healthcare professional before taking medications or specific treatments "
        "(possible pregnancy)."
    )
    BMI_CAUTION = (
        "Use caution — certain conditions (BMI extremes) may increase risk; "
        "contact your provider if concerned."
    )
    GENERAL_CAUTION = "Use caution — follow self-care and contact a provider if symptoms worsen."
    LIKELY_SAFE = "Likely safe to follow general self-care advice."


class SafetyAssessment(BaseModel):
    notes: List[str] = []
    tag: SafetyTag = SafetyTag.LIKELY_SAFE
    bmi: Optional[float] = None
    bmi_category: Optional[str] = None


class AnalysisResult(BaseModel):
    text: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    conditions: List[ScoredCondition]
