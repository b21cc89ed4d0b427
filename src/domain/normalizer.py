import math
from typing import List, Tuple

from .matching import ConditionMatch
from .models import ScoredCondition


CONFIDENCE_FLOOR = 0.35
CONFIDENCE_CEILING = 0.95
DETAIL_BONUS = 0.05
DETAIL_CEILING = 0.97
DETAIL_MIN_LENGTH = 30


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def rank_conditions(matches: List[ConditionMatch]) -> List[ScoredCondition]:
    """Convert raw scores to percentages and sort them, best first.

    Percentages are rounded independently, so they may not add up to
    exactly 100.
    """
    total = sum(m.raw_score for m in matches) or 1
    # sorted() is stable: ties keep knowledge-base order
    ordered = sorted(matches, key=lambda m: m.raw_score, reverse=True)
    return [
        ScoredCondition(
            condition=m.record.name,
            raw_score=m.raw_score,
            percentage=_round_half_up(100 * m.raw_score / total),
            transmission=m.record.transmission_note,
            precautions=list(m.record.precautions),
            recovery_time=m.record.recovery_time_note,
            emergency_warnings=list(m.record.emergency_warnings),
        )
        for m in ordered
    ]


def overall_confidence(ranked: List[ScoredCondition], auxiliary_text: str) -> float:
    top_score = ranked[0].raw_score if ranked else 0.0
    confidence = max(CONFIDENCE_FLOOR, min(top_score, CONFIDENCE_CEILING))
    if len(auxiliary_text) > DETAIL_MIN_LENGTH:
        confidence = min(confidence + DETAIL_BONUS, DETAIL_CEILING)
    return confidence


def normalize(matches: List[ConditionMatch], auxiliary_text: str) -> Tuple[List[ScoredCondition], float]:
    ranked = rank_conditions(matches)
    return ranked, overall_confidence(ranked, auxiliary_text)
