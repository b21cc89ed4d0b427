"""Unit tests for percentage normalization and confidence."""
import pytest

from src.domain.knowledge_base import DEFAULT_KNOWLEDGE_BASE, KnowledgeBase
from src.domain.matching import ConditionMatch, score_conditions
from src.domain.models import ConditionRecord
from src.domain.normalizer import normalize, overall_confidence, rank_conditions


def _match(name, score):
    return ConditionMatch(ConditionRecord(name=name, keywords=("x",), base_score=0.0), [], score)


class TestRankConditions:

    def test_sorted_descending(self):
        ranked = rank_conditions([_match("A", 0.2), _match("B", 0.6), _match("C", 0.2)])
        assert [c.condition for c in ranked] == ["B", "A", "C"]
        assert [c.percentage for c in ranked] == [60, 20, 20]

    def test_ties_keep_declaration_order(self):
        ranked = rank_conditions(score_conditions(DEFAULT_KNOWLEDGE_BASE, "xyz", " "))
        assert [c.condition for c in ranked] == [
            "Flu (Influenza)",
            "Gastroenteritis",
            "Common Cold",
            "Tension Headache",
            "Allergies",
            "Food Poisoning",
            "Strep Throat",
            "COVID-19",
            "Migraine",
            "Bronchitis",
            "Dehydration",
            "Asthma",
            "Anxiety",
        ]

    def test_rounds_half_up(self):
        ranked = rank_conditions([_match("A", 0.125), _match("B", 0.875)])
        # 12.5 -> 13, 87.5 -> 88: sum exceeds 100, left as is
        assert [c.percentage for c in ranked] == [88, 13]

    def test_all_zero_scores(self):
        ranked = rank_conditions([_match("A", 0.0), _match("B", 0.0)])
        assert [c.percentage for c in ranked] == [0, 0]

    def test_carries_record_details(self):
        ranked = rank_conditions(score_conditions(DEFAULT_KNOWLEDGE_BASE, "wheezing", " "))
        asthma = next(c for c in ranked if c.condition == "Asthma")
        assert asthma.transmission.startswith("Not contagious")
        assert "Use rescue inhaler as prescribed" in asthma.precautions
        assert asthma.recovery_time
        assert asthma.emergency_warnings


class TestConfidence:

    def test_floor(self):
        ranked = rank_conditions([_match("A", 0.2)])
        assert overall_confidence(ranked, " ") == 0.35

    def test_top_score_used(self):
        ranked = rank_conditions([_match("A", 0.6), _match("B", 0.3)])
        assert overall_confidence(ranked, " ") == pytest.approx(0.6)

    def test_detail_bonus(self):
        ranked = rank_conditions([_match("A", 0.6)])
        assert overall_confidence(ranked, "x" * 31) == pytest.approx(0.65)

    def test_detail_bonus_needs_more_than_30_chars(self):
        ranked = rank_conditions([_match("A", 0.6)])
        assert overall_confidence(ranked, "x" * 30) == pytest.approx(0.6)

    def test_detail_bonus_ceiling(self):
        ranked = rank_conditions([_match("A", 0.95)])
        assert overall_confidence(ranked, "x" * 40) == pytest.approx(0.97)

    def test_normalize_custom_knowledge_base(self):
        kb = KnowledgeBase([
            ConditionRecord(name="Rash", keywords=("rash",), base_score=0.1),
            ConditionRecord(name="Burn", keywords=("burn",), base_score=0.1),
        ])
        ranked, confidence = normalize(score_conditions(kb, "burn", " "), " ")
        assert [c.condition for c in ranked] == ["Burn", "Rash"]
        assert [c.percentage for c in ranked] == [69, 31]
        assert confidence == 0.35
