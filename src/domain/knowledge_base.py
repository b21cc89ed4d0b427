from typing import Iterable, Iterator, Optional, Tuple

from .models import ConditionRecord


class KnowledgeBase:
    """Read-only, ordered table of condition records.

    Declaration order is significant: it breaks score ties when ranking.
    """

    def __init__(self, records: Iterable[ConditionRecord]):
        records = tuple(records)
        names = set()
        for record in records:
            if record.name in names:
                raise ValueError(f"Duplicate condition name: {record.name}")
            names.add(record.name)
        self._records: Tuple[ConditionRecord, ...] = records

    @property
    def records(self) -> Tuple[ConditionRecord, ...]:
        return self._records

    def get(self, name: str) -> Optional[ConditionRecord]:
        for record in self._records:
            if record.name == name:
                return record
        return None

    def __iter__(self) -> Iterator[ConditionRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)


DEFAULT_CONDITIONS = (
    ConditionRecord(
        name="Common Cold",
        keywords=("cold", "runny nose", "sneezing", "sore throat"),
        base_score=0.25,
        transmission_note="Airborne droplets from coughing/sneezing, direct contact with infected nasal secretions, or contaminated surfaces",
        precautions=("Wash hands frequently", "Avoid touching face", "Cover cough/sneeze with tissue", "Stay home when sick", "Clean frequently touched surfaces"),
        recovery_time_note="7-14 days with self-care",
        emergency_warnings=("Severe difficulty breathing", "Persistent high fever (>39°C)", "Severe chest pain", "Confusion or severe lethargy"),
    ),
    ConditionRecord(
        name="Flu (Influenza)",
        keywords=("fever", "cough", "body ache", "fatigue", "chills"),
        base_score=0.30,
        transmission_note="Respiratory droplets from coughing/sneezing, highly contagious 1 day before to 5 days after symptom onset",
        precautions=("Get vaccinated annually", "Wash hands regularly", "Avoid close contact with infected people", "Wear mask when sick", "Stay home for 5+ days after fever onset"),
        recovery_time_note="1-2 weeks with rest and fluids, up to 3 weeks for full recovery",
        emergency_warnings=("Difficulty breathing or shortness of breath", "Chest pain or pressure", "Severe confusion or altered mental state", "Blue lips or face", "Persistent high fever >39.5°C"),
    ),
    ConditionRecord(
        name="COVID-19",
        keywords=("fever", "cough", "breathlessness", "loss of appetite", "fatigue"),
        base_score=0.20,
        transmission_note="Airborne transmission, respiratory droplets up to 2 meters, surfaces (less common), most contagious first 5-7 days",
        precautions=("Get vaccinated/boosted", "Improve ventilation", "Wear N95 mask in crowded settings", "Test if symptomatic", "Isolate 5+ days if positive", "Hand hygiene essential"),
        recovery_time_note="2-4 weeks mild, 4-6 weeks moderate, 6-12 weeks severe cases",
        emergency_warnings=("Severe difficulty breathing", "Persistent chest pain", "New confusion", "Inability to rouse", "Blue lips/face", "Severe persistent dizziness"),
    ),
    ConditionRecord(
        name="Bronchitis",
        keywords=("cough", "breathlessness", "chest pain", "phlegm"),
        base_score=0.18,
        transmission_note="Viral: airborne droplets; Bacterial: similar respiratory routes",
        precautions=("Avoid air pollutants and smoke", "Use humidifier", "Stay hydrated", "Get flu/pneumonia vaccines", "Avoid respiratory irritants"),
        recovery_time_note="2-3 weeks acute, chronic cases may last 6-8 weeks",
        emergency_warnings=("Severe difficulty breathing or shortness of breath", "Coughing up blood", "Chest pain with breathing", "High fever >39°C persistent", "Signs of pneumonia"),
    ),
    ConditionRecord(
        name="Asthma",
        keywords=("breathlessness", "cough", "chest pain", "wheezing"),
        base_score=0.15,
        transmission_note="Not contagious; triggered by allergens, exercise, cold air, stress",
        precautions=("Use rescue inhaler as prescribed", "Avoid known triggers", "Keep inhalers accessible", "Exercise in appropriate conditions", "Monitor air quality", "Keep doctor updated"),
        recovery_time_note="Chronic condition, acute attacks resolve in hours to days with treatment",
        emergency_warnings=("Severe difficulty breathing/gasping", "Inability to speak full sentences", "Extreme anxiety about breathing", "Peak flow <50% normal", "No improvement with inhaler after 15-20 min"),
        chronic_leaning=True,
    ),
    ConditionRecord(
        name="Allergies",
        keywords=("runny nose", "sneezing", "itchy eyes", "sore throat"),
        base_score=0.22,
        transmission_note="Not contagious; triggered by allergens (pollen, dust, pets, food)",
        precautions=("Identify and avoid allergen triggers", "Use antihistamines as needed", "Keep windows closed during high pollen", "Shower after outdoor activities", "Clean bedding weekly"),
        recovery_time_note="Seasonal (2-3 months), perennial management ongoing",
        emergency_warnings=("Anaphylaxis signs (swelling face/throat, difficulty breathing)", "Severe throat swelling affecting breathing", "Loss of consciousness", "Severe reaction to new allergen"),
        chronic_leaning=True,
    ),
    ConditionRecord(
        name="Migraine",
        keywords=("headache", "nausea", "vomiting", "sensitivity to light"),
        base_score=0.20,
        transmission_note="Not contagious; triggered by stress, hormones, foods, light, sleep changes",
        precautions=("Identify personal triggers", "Manage stress", "Regular sleep schedule", "Stay hydrated", "Reduce caffeine gradually", "Avoid bright screens before bed"),
        recovery_time_note="4-72 hours acute episode, recovery time depends on treatment",
        emergency_warnings=("Sudden worst headache of life", "Headache with fever and stiff neck", "Headache with confusion or vision loss", "New pattern of headache", "Weakness/numbness with headache"),
    ),
    ConditionRecord(
        name="Tension Headache",
        keywords=("headache", "stress", "neck pain"),
        base_score=0.25,
        transmission_note="Not contagious; triggered by stress, poor posture, muscle tension",
        precautions=("Manage stress (yoga, meditation)", "Correct posture regularly", "Take frequent breaks from screens", "Neck stretches and exercises", "Adequate sleep", "Regular exercise"),
        recovery_time_note="30 minutes to several hours with rest/medication",
        emergency_warnings=("Sudden severe headache", "Headache with fever", "Headache with stiff neck", "Persistent headache with vision changes", "Headache following head injury"),
    ),
    ConditionRecord(
        name="Gastroenteritis",
        keywords=("nausea", "vomiting", "diarrhea", "abdominal pain", "fever"),
        base_score=0.28,
        transmission_note="Viral/Bacterial: fecal-oral route, contaminated food/water, person-to-person contact",
        precautions=("Wash hands thoroughly after toilet", "Food safety practices", "Clean kitchen/bathroom surfaces", "Separate personal items", "Stay home 48 hours after last symptom", "Boil water if contaminated"),
        recovery_time_note="1-7 days viral, 5-7 days bacterial, 1-3 weeks parasitic",
        emergency_warnings=("Severe dehydration signs (extreme thirst, dark urine, dizziness)", "Blood in stool/vomit", "Severe abdominal pain", "High fever >39°C", "Symptoms lasting >7 days"),
    ),
    ConditionRecord(
        name="Food Poisoning",
        keywords=("nausea", "vomiting", "diarrhea", "abdominal pain"),
        base_score=0.22,
        transmission_note="Contaminated food/water, bacteria (Salmonella, E.coli), toxins",
        precautions=("Proper food storage (refrigerate <4°C)", "Cook meat thoroughly", "Wash produce", "Avoid unpasteurized dairy", "Check expiration dates", "Avoid cross-contamination"),
        recovery_time_note="1-3 days mild, up to 1 week severe cases",
        emergency_warnings=("Severe dehydration", "Blood in vomit/stool", "Signs of organ failure", "Symptoms >3 days", "Severe abdominal pain"),
    ),
    ConditionRecord(
        name="Dehydration",
        keywords=("headache", "fatigue", "dizziness", "dry mouth"),
        base_score=0.18,
        transmission_note="Not contagious; caused by inadequate fluid intake or excessive loss",
        precautions=("Drink water regularly (8-10 cups daily)", "Monitor urine color", "Increase fluids during exercise/illness", "Electrolyte drinks for severe loss", "Limit caffeine/alcohol"),
        recovery_time_note="30 minutes to 2 hours with fluid replacement",
        emergency_warnings=("Severe dizziness/fainting", "Extreme thirst with confusion", "No urination for 8+ hours", "Dark urine", "Rapid/weak pulse", "Low blood pressure"),
    ),
    ConditionRecord(
        name="Anxiety",
        keywords=("headache", "nausea", "fatigue", "chest pain", "dizziness"),
        base_score=0.15,
        transmission_note="Not contagious; mental health condition triggered by stress",
        precautions=("Practice relaxation techniques (deep breathing, meditation)", "Regular exercise", "Adequate sleep", "Limit caffeine", "Social support", "Professional counseling if severe"),
        recovery_time_note="Variable, acute episodes 15-30 minutes with coping, chronic requires therapy",
        emergency_warnings=("Severe panic attack feeling", "Suicidal thoughts", "Severe chest pain (rule out cardiac)", "Loss of consciousness", "Inability to function"),
    ),
    ConditionRecord(
        name="Strep Throat",
        keywords=("sore throat", "fever", "headache", "body ache"),
        base_score=0.22,
        transmission_note="Respiratory droplets, highly contagious 24 hours before to 3 days after antibiotic treatment",
        precautions=("Take full antibiotic course", "Gargle with salt water", "Use throat lozenges", "Wash hands frequently", "Don't share personal items", "Stay home during contagious period", "Avoid smoking/secondhand smoke"),
        recovery_time_note="5-7 days with antibiotics, 1-2 weeks without",
        emergency_warnings=("Severe difficulty swallowing", "Drooling/unable to swallow saliva", "Difficulty breathing", "High fever >39°C with confusion", "Severe rash with fever"),
    ),
)


DEFAULT_KNOWLEDGE_BASE = KnowledgeBase(DEFAULT_CONDITIONS)
