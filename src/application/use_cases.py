import logging
from typing import Optional

from src.application.ports import RateLimiterPort, TranslatorPort
from src.application.schemas import AnalyzeRequest, AnalyzeResponse, ConditionSummary
from src.domain.engine import analyze_symptoms
from src.domain.knowledge_base import DEFAULT_KNOWLEDGE_BASE, KnowledgeBase


logger = logging.getLogger(__name__)


USER_ID_MAX_LENGTH = 100
DEFAULT_LANG = "en"


class AnalysisRequestError(Exception):
    """Request refused before it reached the engine."""


class UnauthorizedError(AnalysisRequestError):
    pass


class RateLimitExceededError(AnalysisRequestError):
    pass


def _is_english(lang: Optional[str]) -> bool:
    return not lang or lang.lower().startswith("en")


class SymptomAnalysisUseCase:
    def __init__(
        self,
        rate_limiter: Optional[RateLimiterPort] = None,
        translator: Optional[TranslatorPort] = None,
        knowledge_base: KnowledgeBase = DEFAULT_KNOWLEDGE_BASE,
    ):
        self.rate_limiter = rate_limiter
        self.translator = translator
        self.knowledge_base = knowledge_base

    def analyze(self, request: AnalyzeRequest, user_id: str, target_lang: str = DEFAULT_LANG) -> AnalyzeResponse:
        if not isinstance(user_id, str) or not user_id or len(user_id) > USER_ID_MAX_LENGTH:
            raise UnauthorizedError("Unauthorized: invalid user id")

        if self.rate_limiter is not None and not self.rate_limiter.allow(user_id):
            logger.warning("Rate limit exceeded for user %s", user_id)
            raise RateLimitExceededError("Too many requests. Please try again later.")

        result = analyze_symptoms(
            request.symptoms,
            request.additional_info,
            request.other_relevant_info,
            request.patient_profile,
            knowledge_base=self.knowledge_base,
        )

        response = AnalyzeResponse(
            analysis=result.text,
            confidence=result.confidence,
            conditions=[ConditionSummary.from_scored(c) for c in result.conditions],
        )

        if self.translator is not None and not _is_english(target_lang):
            response = self._translate(response, target_lang)

        return response

    def _translate(self, response: AnalyzeResponse, target_lang: str) -> AnalyzeResponse:
        """Translate display text only; scores and ordering are left untouched."""
        def tr(text: Optional[str]) -> Optional[str]:
            return self.translator.translate(text, target_lang) if text else text

        conditions = [
            c.model_copy(update={
                "condition": tr(c.condition),
                "transmission": tr(c.transmission),
                "precautions": [tr(p) for p in c.precautions],
                "recovery_time": tr(c.recovery_time),
                "emergency_warnings": [tr(w) for w in c.emergency_warnings],
            })
            for c in response.conditions
        ]
        return response.model_copy(update={"analysis": tr(response.analysis), "conditions": conditions})
