import logging
from typing import Optional

from .composer import compose_response
from .knowledge_base import DEFAULT_KNOWLEDGE_BASE, KnowledgeBase
from .matching import matched_symptom_keywords, score_conditions
from .models import AnalysisResult, PatientProfile
from .normalizer import normalize
from .safety import evaluate_patient_safety
from .warning_signs import prioritize_warnings


logger = logging.getLogger(__name__)


def auxiliary_text(additional_info: str, other_relevant_info: str) -> str:
    return f"{additional_info or ''} {other_relevant_info or ''}".lower()


def analyze_symptoms(
    symptoms: str,
    additional_info: str = "",
    other_relevant_info: str = "",
    profile: Optional[PatientProfile] = None,
    knowledge_base: KnowledgeBase = DEFAULT_KNOWLEDGE_BASE,
) -> AnalysisResult:
    """Score every known condition against the free-text input and build the advisory.

    Pure and deterministic: no I/O, no shared mutable state. Callers must
    reject empty ``symptoms`` before calling.
    """
    additional_info = additional_info or ""
    other_relevant_info = other_relevant_info or ""
    aux = auxiliary_text(additional_info, other_relevant_info)

    matches = score_conditions(knowledge_base, symptoms, aux)
    keywords = matched_symptom_keywords(matches)
    ranked, confidence = normalize(matches, aux)

    warnings = prioritize_warnings(ranked)
    safety = evaluate_patient_safety(profile)

    text = compose_response(
        symptoms,
        additional_info,
        other_relevant_info,
        keywords,
        ranked,
        warnings,
        safety,
    )

    if ranked:
        logger.debug(
            "Top condition %s (%d%%), confidence %.2f, %d keyword(s) matched",
            ranked[0].condition, ranked[0].percentage, confidence, len(keywords),
        )

    return AnalysisResult(text=text, confidence=confidence, conditions=ranked)
