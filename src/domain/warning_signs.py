import re
from dataclasses import dataclass
from typing import Iterable, List, Sequence

from .models import ScoredCondition


CONSIDERED_CONDITIONS = 5
MAX_WARNINGS = 5
RAW_FALLBACK_COUNT = 4


@dataclass(frozen=True)
class WarningRule:
    pattern: re.Pattern
    message: str

    def matches(self, warning: str) -> bool:
        return bool(self.pattern.search(warning))


def _rule(pattern: str, message: str) -> WarningRule:
    return WarningRule(re.compile(pattern, re.IGNORECASE), message)


# Highest priority first.
PRIORITY_RULES = (
    _rule(r"difficulty breathing|shortness of breath", "Difficulty breathing or severe shortness of breath"),
    _rule(r"chest pain|chest pressure", "Chest pain or pressure"),
    _rule(r"confusion|unable to rouse|altered mental state", "New confusion, severe drowsiness, or difficulty waking"),
    _rule(r"blue lips|blue face|cyanosis", "Blue lips or face (signs of poor oxygenation)"),
    _rule(r"severe dehydration|no urination|extreme thirst", "Signs of severe dehydration (very little/no urination, extreme dizziness)"),
    _rule(r"blood in stool|vomit blood|coughing up blood", "Vomiting blood or blood in stool"),
    _rule(r"high fever|>39", "Very high or persistent fever (>39°C)"),
    _rule(r"loss of consciousness|unconscious|unable to rouse", "Loss of consciousness or unresponsiveness"),
    _rule(r"severe abdominal pain", "Severe or worsening abdominal pain"),
    _rule(r"difficulty swallowing|drooling", "Unable to swallow or drooling (possible airway risk)"),
)

GENERIC_WARNINGS = (
    "Difficulty breathing or shortness of breath",
    "Chest pain or pressure",
    "Very high or persistent fever (>39°C)",
    "Severe weakness or fainting",
)


def collect_warnings(ranked: Sequence[ScoredCondition]) -> List[str]:
    """Emergency phrases of the top-ranked conditions, whitespace-normalized
    and de-duplicated in first-seen order."""
    collected: List[str] = []
    for scored in ranked[:CONSIDERED_CONDITIONS]:
        for warning in scored.emergency_warnings:
            norm = " ".join(warning.split())
            if norm and norm not in collected:
                collected.append(norm)
    return collected


def prioritize_warnings(ranked: Sequence[ScoredCondition], rules: Iterable[WarningRule] = PRIORITY_RULES) -> List[str]:
    collected = collect_warnings(ranked)

    selected: List[str] = []
    for rule in rules:
        if rule.message not in selected and any(rule.matches(w) for w in collected):
            selected.append(rule.message)
        if len(selected) >= MAX_WARNINGS:
            break

    if not selected:
        if collected:
            selected = collected[:RAW_FALLBACK_COUNT]
        else:
            selected = list(GENERIC_WARNINGS)

    return selected
