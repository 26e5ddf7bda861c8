"""Configuration — tests for environment-driven settings.

Tests cover:
    - Defaults match the engine defaults
    - FIELDGUARD_* variables override defaults
    - engine_config() builds an immutable EngineConfig
    - get_settings() is cached
"""

from fieldguard.config import Settings, get_settings
from fieldguard.core.engine_config import EngineConfig


def test_defaults():
    settings = Settings()
    assert settings.explicit is False
    assert settings.autofields is True
    assert settings.exclude == []
    assert settings.engine_config() == EngineConfig()


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("FIELDGUARD_EXPLICIT", "true")
    monkeypatch.setenv("FIELDGUARD_AUTOFIELDS", "false")
    monkeypatch.setenv("FIELDGUARD_EXCLUDE", '["csrftoken", ""]')
    config = Settings().engine_config()
    assert config.explicit is True
    assert config.autofields is False
    assert config.exclude == frozenset({"csrftoken"})


def test_get_settings_cached():
    assert get_settings() is get_settings()
