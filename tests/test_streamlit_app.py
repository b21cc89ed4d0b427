"""Tests for the Streamlit presentation helpers."""
import pytest
from unittest.mock import patch

from src.application.schemas import AnalyzeRequest
from src.application.use_cases import SymptomAnalysisUseCase
from src.presentation.streamlit_app import CONDITIONS_PREVIEW, _render_analysis, _render_sidebar, confidence_label


class MockSessionState(dict):
    """Mock Streamlit session state."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.__dict__ = self


@pytest.fixture
def mock_streamlit():
    with patch("src.presentation.streamlit_app.st") as mock_st:
        mock_st.session_state = MockSessionState(show_all_conditions=False)
        mock_st.button.return_value = False
        yield mock_st


@pytest.mark.parametrize("confidence,label", [(0.35, "Low"), (0.5, "Medium"), (0.75, "Medium"), (0.95, "High")])
def test_confidence_label(confidence, label):
    assert confidence_label(confidence) == label


def test_render_analysis_previews_top_conditions(mock_streamlit):
    response = SymptomAnalysisUseCase().analyze(AnalyzeRequest(symptoms="fever, cough"), user_id="u")
    _render_analysis(response)

    assert mock_streamlit.expander.call_count == CONDITIONS_PREVIEW
    first_title = mock_streamlit.expander.call_args_list[0].args[0]
    top = response.conditions[0]
    assert first_title == f"{top.condition} ({top.percentage}%)"
    mock_streamlit.button.assert_called_once_with(f"Show {len(response.conditions) - CONDITIONS_PREVIEW} more")


def test_render_analysis_shows_all_when_expanded(mock_streamlit):
    mock_streamlit.session_state.show_all_conditions = True
    response = SymptomAnalysisUseCase().analyze(AnalyzeRequest(symptoms="headache"), user_id="u")
    _render_analysis(response)

    assert mock_streamlit.expander.call_count == len(response.conditions)
    mock_streamlit.button.assert_not_called()


def test_sidebar_weight_range_matches_profile(mock_streamlit):
    mock_streamlit.sidebar.selectbox.side_effect = ["English", ""]
    mock_streamlit.sidebar.button.return_value = False
    _render_sidebar()

    weight_call = next(
        c for c in mock_streamlit.sidebar.number_input.call_args_list if c.args[0] == "Weight (kg)"
    )
    assert weight_call.kwargs["max_value"] == 500.0
