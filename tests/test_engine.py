"""End-to-end tests for the symptom analysis engine."""
import pytest

from src.domain.engine import analyze_symptoms
from src.domain.knowledge_base import DEFAULT_KNOWLEDGE_BASE
from src.domain.models import AnalysisResult, PatientProfile, SafetyTag


INPUTS = [
    ("fever, cough, body ache, fatigue, chills", "", "", None),
    ("headache", "", "", None),
    ("runny nose, sneezing, itchy eyes", "ongoing for 2 months", "", None),
    ("nausea vomiting diarrhea abdominal pain fever", "temperature 39°c", "for a week", PatientProfile(age=70)),
    ("something vague", "", "", PatientProfile(age=1)),
    ("chest pain and breathlessness", "started after running, lasted for several hours", "", None),
]


def _ranks(result: AnalysisResult):
    return [c.condition for c in result.conditions]


@pytest.mark.parametrize("symptoms,additional,other,profile", INPUTS)
def test_deterministic(symptoms, additional, other, profile):
    first = analyze_symptoms(symptoms, additional, other, profile)
    second = analyze_symptoms(symptoms, additional, other, profile)
    assert first.text == second.text
    assert first.confidence == second.confidence
    assert [(c.condition, c.raw_score, c.percentage) for c in first.conditions] == \
        [(c.condition, c.raw_score, c.percentage) for c in second.conditions]


@pytest.mark.parametrize("symptoms,additional,other,profile", INPUTS)
def test_result_invariants(symptoms, additional, other, profile):
    result = analyze_symptoms(symptoms, additional, other, profile)

    assert 0.35 <= result.confidence <= 0.97
    assert sorted(_ranks(result)) == sorted(r.name for r in DEFAULT_KNOWLEDGE_BASE)

    percentages = [c.percentage for c in result.conditions]
    assert percentages == sorted(percentages, reverse=True)

    for c in result.conditions:
        base = DEFAULT_KNOWLEDGE_BASE.get(c.condition).base_score
        assert base <= c.raw_score <= 0.95


def test_classic_flu():
    result = analyze_symptoms("fever, cough, body ache, fatigue, chills", "", "")
    assert _ranks(result)[:2] == ["Flu (Influenza)", "COVID-19"]
    assert result.confidence == 0.95
    assert "- Difficulty breathing or severe shortness of breath\n" in result.text


def test_empty_context():
    result = analyze_symptoms("headache", "", "")
    assert len(result.conditions) == len(DEFAULT_KNOWLEDGE_BASE)
    assert _ranks(result)[0] == "Tension Headache"
    # top score 0.37, no context bonus
    assert result.confidence == pytest.approx(0.37)


def test_no_keyword_match_uses_base_scores():
    result = analyze_symptoms("xyz", "", "")
    assert result.confidence == 0.35
    for c in result.conditions:
        assert c.raw_score == pytest.approx(DEFAULT_KNOWLEDGE_BASE.get(c.condition).base_score)


def test_allergy_chronicity_bonus():
    acute = analyze_symptoms("runny nose, sneezing, itchy eyes", "", "")
    chronic = analyze_symptoms("runny nose, sneezing, itchy eyes", "ongoing for 2 months", "")

    def score(result, name):
        return next(c.raw_score for c in result.conditions if c.condition == name)

    assert score(chronic, "Allergies") == pytest.approx(score(acute, "Allergies") + 0.10)
    assert score(chronic, "Asthma") == pytest.approx(score(acute, "Asthma") + 0.10)
    assert score(chronic, "Common Cold") == pytest.approx(score(acute, "Common Cold"))
    assert _ranks(chronic).index("Asthma") < _ranks(acute).index("Asthma")
    assert _ranks(chronic)[0] == "Allergies"


def test_long_context_confidence_bonus():
    short = analyze_symptoms("headache", "", "")
    detailed = analyze_symptoms("headache", "started yesterday after a long flight", "")
    assert detailed.confidence == pytest.approx(short.confidence + 0.05)


def test_bmi_in_summary():
    result = analyze_symptoms("cough", "", "", PatientProfile(weight_kg=70, height_cm=175))
    assert "BMI: 22.9 (normal weight)." in result.text


def test_infant_not_safe_regardless_of_symptoms():
    for symptoms in ("headache", "sneezing", "xyz"):
        result = analyze_symptoms(symptoms, "", "", PatientProfile(age=1))
        assert f"Safe to follow: {SafetyTag.NOT_SAFE.value}\n" in result.text


def test_none_context_treated_as_empty():
    assert analyze_symptoms("headache", None, None).text == analyze_symptoms("headache", "", "").text
