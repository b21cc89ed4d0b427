"""Keyword matching and raw scoring of knowledge-base conditions.

Matching is a plain case-insensitive substring test: "fever" matches both
"high fever" and "feverish". Each keyword counts at most once per condition,
however often it appears in the text.
"""
from typing import List, NamedTuple

from .knowledge_base import KnowledgeBase
from .models import ConditionRecord


KEYWORD_BONUS = 0.12
MULTI_SYMPTOM_BONUS = 0.08
EXTRA_SYMPTOM_BONUS = 0.05
FEVER_CONTEXT_BONUS = 0.10
CHRONICITY_BONUS = 0.10
SCORE_CAP = 0.95

TEMPERATURE_MARKERS = ("temperature", "°c", "°f")
CHRONICITY_MARKERS = ("week", "month")


class ConditionMatch(NamedTuple):
    record: ConditionRecord
    matched_keywords: List[str]
    raw_score: float


def match_keywords(text: str, record: ConditionRecord) -> List[str]:
    text = text.lower()
    return [kw for kw in record.keywords if kw in text]


def score_condition(
    record: ConditionRecord,
    matched_keywords: List[str],
    symptoms_text: str,
    auxiliary_text: str,
) -> float:
    symptoms_text = symptoms_text.lower()
    auxiliary_text = auxiliary_text.lower()
    m = len(matched_keywords)

    score = record.base_score
    score += KEYWORD_BONUS * m
    if m >= 2:
        score += MULTI_SYMPTOM_BONUS
    if m >= 3:
        score += EXTRA_SYMPTOM_BONUS

    fever_related = "fever" in record.keywords or "fever" in symptoms_text
    if fever_related and any(marker in auxiliary_text for marker in TEMPERATURE_MARKERS):
        score += FEVER_CONTEXT_BONUS

    if record.chronic_leaning and any(marker in auxiliary_text for marker in CHRONICITY_MARKERS):
        score += CHRONICITY_BONUS

    return min(score, SCORE_CAP)


def score_conditions(knowledge_base: KnowledgeBase, symptoms_text: str, auxiliary_text: str) -> List[ConditionMatch]:
    """Score every condition, in knowledge-base order.

    Keywords are searched in the symptom text joined with the auxiliary
    context, so context such as "also wheezing at night" counts as evidence.
    """
    search_text = f"{symptoms_text} {auxiliary_text}".lower()
    results: List[ConditionMatch] = []
    for record in knowledge_base:
        matched = match_keywords(search_text, record)
        results.append(ConditionMatch(record, matched, score_condition(record, matched, symptoms_text, auxiliary_text)))
    return results


def matched_symptom_keywords(matches: List[ConditionMatch]) -> List[str]:
    """Distinct matched keywords across all conditions, first-seen order."""
    seen: List[str] = []
    for match in matches:
        for kw in match.matched_keywords:
            if kw not in seen:
                seen.append(kw)
    return seen
