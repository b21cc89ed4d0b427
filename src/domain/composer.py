"""Builds the six-section advisory text shown to the user.

Output must be byte-stable for a given input, so every list here is
ordered and nothing depends on set iteration order.
"""
from typing import List, Sequence, Tuple

from .models import SafetyAssessment, ScoredCondition


# (trigger keywords, cause statement), checked in order against matched keywords
SYMPTOM_CAUSES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("fever",), "Could be due to a viral or bacterial infection causing fever"),
    (("cough", "breathlessness", "wheezing"),
     "Could be due to a respiratory infection (cold, flu, COVID-19) or reactive airway disease"),
    (("nausea", "vomiting", "diarrhea", "abdominal pain"), "Could be due to gastroenteritis or foodborne illness"),
    (("headache",), "Could be related to dehydration, migraine, tension-type headache, or infection"),
    (("sore throat",), "Could be due to throat infection such as viral pharyngitis or strep throat"),
    (("dizziness", "fatigue"), "Could be related to dehydration, low blood pressure, low energy, or systemic causes"),
    (("chest pain",), "Could be cardiac or respiratory; treat as potentially serious and seek urgent care"),
    (("itchy eyes", "sneezing", "runny nose"), "Could be due to allergies or environmental triggers"),
)

# (condition name fragments, cause statement), checked against the top-3 names
CONDITION_CAUSES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("flu", "influenza", "covid", "common cold", "bronchitis", "gastroenteritis", "food poisoning"),
     "Could be due to a viral or bacterial infection"),
    (("dehydration",), "Could be due to dehydration or electrolyte imbalance"),
    (("allerg",), "Could be due to an allergic reaction"),
    (("asthma", "bronchitis", "covid", "flu", "pneumonia"),
     "Could be related to a respiratory infection or irritant exposure"),
    (("migraine", "tension"),
     "Could be related to primary headache disorders (stress, tension, migraine triggers)"),
    (("food poisoning", "gastroenteritis"), "Could be due to contaminated food or a gastrointestinal infection"),
    (("anxiety",), "Could be related to anxiety or stress"),
)

GENERIC_CAUSE = "Could be due to a common viral infection or non-specific causes"

SELF_CARE_BASE = (
    "Drink plenty of fluids (water, oral rehydration solutions if nausea/vomiting/diarrhea)",
    "Rest and avoid strenuous activity",
    "Monitor your temperature and symptoms regularly",
)

SELF_CARE_TIPS: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("fever",),
     "For fever: stay hydrated, use cooling measures, and consider paracetamol/acetaminophen "
     "if appropriate for your profile."),
    (("cough", "sore throat"),
     "For cough/sore throat: rest voice, use humidified air, throat lozenges, and saline gargles; avoid smoke."),
    (("nausea", "vomiting", "diarrhea"),
     "For nausea/vomiting/diarrhea: take small sips of oral rehydration solution, avoid solid food briefly, "
     "and seek care if unable to keep fluids down."),
    (("headache",),
     "For headache: rest in a quiet, dark room, stay hydrated, and consider simple analgesics only if safe for you."),
    (("breathlessness", "wheezing"),
     "For breathlessness: stop exertion, sit upright, use prescribed inhaler if available, "
     "and seek urgent care if severe."),
    (("runny nose", "sneezing", "itchy eyes"),
     "For allergies: identify and avoid triggers, use saline rinses, and consider antihistamines if suitable."),
)

SELF_CARE_CLOSING = (
    "Consider over-the-counter symptomatic relief only if suitable for you and not contraindicated; "
    "check with a pharmacist/doctor if unsure"
)

PREVENTION_TIPS = (
    "Maintain good hand hygiene (wash with soap and water regularly)",
    "Avoid close contact with sick people and stay home when unwell",
    "Keep up to date with recommended vaccinations (e.g., influenza, COVID-19 where applicable)",
    "Maintain a balanced diet, regular exercise, and adequate sleep",
    "Practice safe food handling and clean surfaces regularly",
)

FOLLOW_UP_QUESTIONS = (
    "Since when did the symptoms start?",
    "Have you noticed fever, difficulty breathing, or vomiting/diarrhea?",
    "Do you have any known chronic conditions (e.g., asthma, diabetes, heart disease)?",
    "Are you taking any medications or have any allergies?",
)

DISCLAIMER = (
    "⚕️ IMPORTANT: This information is for educational purposes only and is not a medical diagnosis. "
    "If you are concerned or if emergency warning signs appear, seek immediate medical attention."
)


def _triggered(table, haystack: str) -> List[str]:
    return [text for triggers, text in table if any(t in haystack for t in triggers)]


def build_summary(symptoms: str, additional_info: str, other_relevant_info: str, safety: SafetyAssessment) -> str:
    summary = f"Based on your message, you reported: {symptoms.strip() or 'no symptoms provided'}"
    if additional_info:
        summary += f"; additional info: {additional_info.strip()}"
    if other_relevant_info:
        summary += f"; other relevant info: {other_relevant_info.strip()}"
    summary += "."
    if safety.bmi is not None:
        summary += f" BMI: {safety.bmi:g} ({safety.bmi_category})."
    return summary


def possible_causes(matched_keywords: Sequence[str], ranked: Sequence[ScoredCondition]) -> List[str]:
    causes = _triggered(SYMPTOM_CAUSES, " | ".join(matched_keywords)) if matched_keywords else []
    if not causes:
        for scored in ranked[:3]:
            for cause in _triggered(CONDITION_CAUSES, scored.condition.lower()):
                if cause not in causes:
                    causes.append(cause)
    return causes or [GENERIC_CAUSE]


def self_care_advice(matched_keywords: Sequence[str]) -> List[str]:
    tips = _triggered(SELF_CARE_TIPS, " ".join(matched_keywords))
    return [*SELF_CARE_BASE, *tips, SELF_CARE_CLOSING]


def compose_response(
    symptoms: str,
    additional_info: str,
    other_relevant_info: str,
    matched_keywords: Sequence[str],
    ranked: Sequence[ScoredCondition],
    warnings: Sequence[str],
    safety: SafetyAssessment,
) -> str:
    out = ""
    out += f"1. Problem Summary\n\n{build_summary(symptoms, additional_info, other_relevant_info, safety)}\n\n"
    out += f"Safe to follow: {safety.tag.value}\n\n"

    out += "2. Possible Causes (General Information Only)\n\n"
    for cause in possible_causes(matched_keywords, ranked):
        out += f"- {cause}\n\n"

    out += "3. Immediate Self-Care Advice\n\n"
    for advice in self_care_advice(matched_keywords):
        out += f"- {advice}\n"
    if safety.notes:
        out += "\nImportant Safety Notes based on provided profile:\n"
        for note in safety.notes:
            out += f"- {note}\n"
    out += "\n"

    out += "4. Warning Signs (When to seek medical help)\n\nSeek medical help if you notice any of the following:\n"
    for warning in warnings:
        out += f"- {warning}\n"
    out += "\n"

    out += "5. Lifestyle / Prevention Tips\n\n"
    for tip in PREVENTION_TIPS:
        out += f"- {tip}\n"
    out += "\n"

    out += "6. Follow-Up Questions (to improve accuracy)\n\n"
    for question in FOLLOW_UP_QUESTIONS:
        out += f"- {question}\n"

    out += f"\n{DISCLAIMER}"
    return out
