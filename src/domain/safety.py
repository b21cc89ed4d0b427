import math
from typing import List, Optional

from .models import PatientProfile, SafetyAssessment, SafetyTag


INFANT_NOTE = (
    "Age under 2 years: many OTC medicines are NOT recommended for infants; "
    "seek pediatric advice before giving medication."
)
CHILD_NOTE = "Age under 12 years: avoid aspirin; check pediatric dosing for any medication."
ELDERLY_NOTE = (
    "Age 65 or older: higher risk for complications; avoid dehydration and "
    "check with provider before new medications."
)
PREGNANCY_NOTE = "If there is any chance of pregnancy, avoid certain medications and seek pregnancy-safe advice."


def compute_bmi(weight_kg: Optional[float], height_cm: Optional[float]) -> Optional[float]:
    """BMI rounded half-up to one decimal, or None if either input is missing."""
    if not weight_kg or not height_cm or weight_kg <= 0 or height_cm <= 0:
        return None
    height_m = height_cm / 100
    return math.floor(weight_kg / (height_m * height_m) * 10 + 0.5) / 10


def bmi_category(bmi: float) -> str:
    if bmi < 18.5:
        return "underweight"
    if bmi >= 30:
        return "obese"
    if bmi >= 25:
        return "overweight"
    return "normal weight"


def evaluate_patient_safety(profile: Optional[PatientProfile]) -> SafetyAssessment:
    if profile is None:
        return SafetyAssessment()

    notes: List[str] = []
    age = profile.age
    if age is not None:
        if age < 2:
            notes.append(INFANT_NOTE)
        elif age < 12:
            notes.append(CHILD_NOTE)
        elif age >= 65:
            notes.append(ELDERLY_NOTE)

    bmi = compute_bmi(profile.weight_kg, profile.height_cm)
    category = bmi_category(bmi) if bmi is not None else None
    bmi_extreme = False
    if bmi is not None and bmi < 18.5:
        notes.append(f"BMI {bmi:g} (underweight): be cautious with dehydration and reduced reserves.")
        bmi_extreme = True
    elif bmi is not None and bmi >= 30:
        notes.append(
            f"BMI {bmi:g} (obese): higher risk of respiratory complications; "
            "seek provider advice if breathing issues arise."
        )
        bmi_extreme = True

    pregnancy_possible = profile.sex == "female" and age is not None and 15 <= age <= 50
    if pregnancy_possible:
        notes.append(PREGNANCY_NOTE)

    if age is not None and age < 2:
        tag = SafetyTag.NOT_SAFE
    elif age is not None and age >= 65:
        tag = SafetyTag.ELDERLY_CAUTION
    elif pregnancy_possible:
        tag = SafetyTag.PREGNANCY_CHECK
    elif bmi_extreme:
        tag = SafetyTag.BMI_CAUTION
    elif notes:
        tag = SafetyTag.GENERAL_CAUTION
    else:
        tag = SafetyTag.LIKELY_SAFE

    return SafetyAssessment(notes=notes, tag=tag, bmi=bmi, bmi_category=category)
