from typing import Protocol


class RateLimiterPort(Protocol):
    def allow(self, user_id: str) -> bool:
        """Record one request for ``user_id`` and return whether it may proceed."""
        ...


class TranslatorPort(Protocol):
    def translate(self, text: str, target_lang: str) -> str:
        """
        Translate English text into ``target_lang``; returns ``text`` unchanged on failure.
        """
        ...
