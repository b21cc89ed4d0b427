import os
import logging

try:
    import streamlit as st  # type: ignore
    _HAS_STREAMLIT = True
except Exception:
    _HAS_STREAMLIT = False

logger = logging.getLogger(__name__)


DEFAULT_LIBRETRANSLATE_URL = "https://libretranslate.de/translate"
DEFAULT_RATE_LIMIT_PER_MINUTE = 10


def get_secret(name: str, default: str | None = None) -> str | None:
    # Prefer Streamlit secrets if available
    if _HAS_STREAMLIT:
        try:
            if name in st.secrets:
                return str(st.secrets.get(name))
        except Exception:
            # no secrets.toml outside a Streamlit run
            pass
    return os.environ.get(name, default)


class Settings:
    @property
    def rate_limit_per_minute(self) -> int:
        raw = get_secret("RATE_LIMIT_PER_MINUTE")
        if raw is None:
            return DEFAULT_RATE_LIMIT_PER_MINUTE
        try:
            value = int(raw)
        except ValueError:
            logger.warning("Invalid RATE_LIMIT_PER_MINUTE %r; using %d", raw, DEFAULT_RATE_LIMIT_PER_MINUTE)
            return DEFAULT_RATE_LIMIT_PER_MINUTE
        return value if value > 0 else DEFAULT_RATE_LIMIT_PER_MINUTE

    @property
    def libretranslate_url(self) -> str:
        return get_secret("LIBRETRANSLATE_URL", DEFAULT_LIBRETRANSLATE_URL) or DEFAULT_LIBRETRANSLATE_URL

    @property
    def libretranslate_api_key(self) -> str | None:
        return get_secret("LIBRETRANSLATE_API_KEY")

    @property
    def log_level(self) -> str:
        return (get_secret("LOG_LEVEL", "INFO") or "INFO").upper()
