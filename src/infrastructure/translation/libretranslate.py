import logging

import requests

from src.application.ports import TranslatorPort
from src.infrastructure.config import Settings


logger = logging.getLogger(__name__)


class LibreTranslateAdapter(TranslatorPort):
    def __init__(self, settings: Settings | None = None, timeout: float = 15):
        self.settings = settings or Settings()
        self.url = self.settings.libretranslate_url
        self.api_key = self.settings.libretranslate_api_key
        self.timeout = timeout

    def translate(self, text: str, target_lang: str) -> str:
        if not text or not target_lang or target_lang.lower().startswith("en"):
            return text

        payload = {
            "q": text,
            "source": "en",
            "target": target_lang[:2].lower(),
            "format": "text",
        }
        if self.api_key:
            payload["api_key"] = self.api_key

        try:
            resp = requests.post(self.url, json=payload, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning("Translation to %s failed: %s", target_lang, e)
            return text

        if not isinstance(data, dict):
            return text
        return data.get("translatedText") or data.get("result") or text
