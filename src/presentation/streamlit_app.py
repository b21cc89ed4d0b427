import logging
import uuid

import streamlit as st
from pydantic import ValidationError

from src.application.schemas import AnalyzeRequest, AnalyzeResponse
from src.application.use_cases import AnalysisRequestError, SymptomAnalysisUseCase
from src.infrastructure.config import Settings
from src.infrastructure.rate_limit.in_memory import InMemoryRateLimiter
from src.infrastructure.translation.libretranslate import LibreTranslateAdapter


logger = logging.getLogger(__name__)


DISCLAIMER = (
    "⚕️ **DISCLAIMER:** This is NOT medical advice and NOT a diagnosis. "
    "This assistant is for educational purposes only. "
    "If you experience emergency symptoms, seek immediate care (call local emergency number)."
)

LANGUAGES = {"English": "en", "हिन्दी": "hi", "मराठी": "mr"}
SEX_OPTIONS = ["", "female", "male", "other", "prefer not to say"]
CONDITIONS_PREVIEW = 3


def confidence_label(confidence: float) -> str:
    if confidence > 0.75:
        return "High"
    if confidence < 0.5:
        return "Low"
    return "Medium"


@st.cache_resource
def _build_use_case(_settings: Settings) -> SymptomAnalysisUseCase:
    # Cached so the rate limiter's counters survive reruns
    return SymptomAnalysisUseCase(
        rate_limiter=InMemoryRateLimiter(settings=_settings),
        translator=LibreTranslateAdapter(settings=_settings),
    )


def _init_session_state():
    if "user_id" not in st.session_state:
        st.session_state.user_id = uuid.uuid4().hex
    if "analysis" not in st.session_state:
        st.session_state.analysis = None
    if "show_all_conditions" not in st.session_state:
        st.session_state.show_all_conditions = False


def _render_sidebar() -> tuple:
    st.sidebar.title("⚙️ Settings")
    language = st.sidebar.selectbox("Language", list(LANGUAGES.keys()))

    st.sidebar.markdown("### Patient details (optional)")
    age = st.sidebar.number_input("Age (years)", min_value=0, max_value=150, value=None, step=1)
    sex = st.sidebar.selectbox("Sex", SEX_OPTIONS)
    height = st.sidebar.number_input("Height (cm)", min_value=50.0, max_value=250.0, value=None)
    weight = st.sidebar.number_input("Weight (kg)", min_value=2.0, max_value=500.0, value=None)

    if st.sidebar.button("🔄 New Analysis", use_container_width=True):
        st.session_state.analysis = None
        st.session_state.show_all_conditions = False
        st.rerun()

    profile = {"age": age, "sex": sex or None, "weight_kg": weight, "height_cm": height}
    return LANGUAGES[language], profile


def _render_analysis(response: AnalyzeResponse):
    pct = round(response.confidence * 100)
    st.caption(f"Confidence: {confidence_label(response.confidence)} · {pct}%")
    st.markdown(response.analysis)

    st.markdown("## 🏥 Possible Conditions (NOT a diagnosis)")
    shown = response.conditions
    if not st.session_state.show_all_conditions:
        shown = shown[:CONDITIONS_PREVIEW]

    for c in shown:
        with st.expander(f"{c.condition} ({c.percentage}%)"):
            if c.transmission:
                st.markdown(f"**Transmission:** {c.transmission}")
            if c.recovery_time:
                st.markdown(f"**Recovery time:** {c.recovery_time}")
            if c.precautions:
                st.markdown("**Precautions:**\n" + "\n".join(f"- {p}" for p in c.precautions))
            if c.emergency_warnings:
                st.markdown("**Emergency warnings:**\n" + "\n".join(f"- ⚠️ {w}" for w in c.emergency_warnings))

    hidden = len(response.conditions) - len(shown)
    if hidden > 0 and st.button(f"Show {hidden} more"):
        st.session_state.show_all_conditions = True
        st.rerun()


def main():
    settings = Settings()
    logging.basicConfig(level=settings.log_level)

    st.set_page_config(
        page_title="Symptom Advisor",
        page_icon="⚕️",
        layout="centered",
        initial_sidebar_state="expanded",
    )

    _init_session_state()
    target_lang, profile = _render_sidebar()
    usecase = _build_use_case(settings)

    st.markdown("# 🏥 Symptom Advisor")
    st.info(DISCLAIMER)

    with st.form("symptom_form"):
        symptoms = st.text_area("Symptoms", placeholder="e.g., fever, cough, body ache")
        additional_info = st.text_input("Additional info", placeholder="e.g., temperature 38.5°C, for 3 days")
        other_info = st.text_area("Other relevant info", placeholder="e.g., asthma, current medications")
        submit = st.form_submit_button("Analyze", use_container_width=True)

    if submit:
        try:
            request = AnalyzeRequest(
                symptoms=symptoms,
                additional_info=additional_info,
                other_relevant_info=other_info,
                patient_profile=profile,
            )
        except ValidationError:
            st.error("❌ Please describe your symptoms.")
            return

        with st.spinner("🔬 Analyzing your symptoms..."):
            try:
                st.session_state.analysis = usecase.analyze(request, st.session_state.user_id, target_lang)
                st.session_state.show_all_conditions = False
            except AnalysisRequestError as e:
                st.error(f"❌ {e}")
                return
            except Exception as e:
                logger.exception("Analysis failed: %s", e)
                st.error("❌ Internal error. Please try again later.")
                return

    if st.session_state.analysis is not None:
        _render_analysis(st.session_state.analysis)


if __name__ == "__main__":
    main()
