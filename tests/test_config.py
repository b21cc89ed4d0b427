"""Unit tests for settings lookup."""
from src.infrastructure.config import (
    DEFAULT_LIBRETRANSLATE_URL,
    DEFAULT_RATE_LIMIT_PER_MINUTE,
    Settings,
)


def test_defaults(monkeypatch):
    for name in ("RATE_LIMIT_PER_MINUTE", "LIBRETRANSLATE_URL", "LIBRETRANSLATE_API_KEY", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings()
    assert settings.rate_limit_per_minute == DEFAULT_RATE_LIMIT_PER_MINUTE
    assert settings.libretranslate_url == DEFAULT_LIBRETRANSLATE_URL
    assert settings.libretranslate_api_key is None
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("RATE_LIMIT_PER_MINUTE", "25")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = Settings()
    assert settings.rate_limit_per_minute == 25
    assert settings.log_level == "DEBUG"


def test_invalid_rate_limit_falls_back(monkeypatch):
    monkeypatch.setenv("RATE_LIMIT_PER_MINUTE", "lots")
    assert Settings().rate_limit_per_minute == DEFAULT_RATE_LIMIT_PER_MINUTE
    monkeypatch.setenv("RATE_LIMIT_PER_MINUTE", "0")
    assert Settings().rate_limit_per_minute == DEFAULT_RATE_LIMIT_PER_MINUTE
