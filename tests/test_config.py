"""Tests for settings and logging setup."""

import logging

import pytest
from pydantic import ValidationError

from workflow_engine.config import Settings, get_settings
from workflow_engine.logging import LOGGER_NAME, setup_logging

KEY_VARS = [
    "GEMINI_API_KEY",
    "GOOGLE_API_KEY",
    "OPENAI_API_KEY",
    "ANTHROPIC_API_KEY",
    "TOGETHER_API_KEY",
]


@pytest.fixture
def clean_env(monkeypatch):
    for var in KEY_VARS:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings(_env_file=None)
    assert settings.step_timeout == 120.0
    assert settings.default_debate_rounds == 5
    assert settings.integrator_agent_id == "integrator-finalizer"
    assert settings.max_sessions == 100
    assert settings.session_ttl is None
    assert settings.get_api_key_for_provider("openai") is None


def test_environment_overrides(clean_env):
    clean_env.setenv("WORKFLOW_STEP_TIMEOUT", "30")
    clean_env.setenv("WORKFLOW_DEBATE_ROUNDS", "3")
    clean_env.setenv("WORKFLOW_SESSION_TTL", "600")
    clean_env.setenv("OPENAI_API_KEY", "sk-env")

    settings = Settings(_env_file=None)
    assert settings.step_timeout == 30.0
    assert settings.default_debate_rounds == 3
    assert settings.session_ttl == 600
    assert settings.get_api_key_for_provider("openai") == "sk-env"


def test_google_key_is_gemini_alias(clean_env):
    clean_env.setenv("GOOGLE_API_KEY", "g-key")
    settings = Settings(_env_file=None)
    assert settings.get_gemini_api_key() == "g-key"
    assert settings.get_api_key_for_provider("gemini") == "g-key"


def test_env_file(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("ANTHROPIC_API_KEY=sk-ant-file\nWORKFLOW_MAX_SESSIONS=7\n")
    settings = Settings(_env_file=env_file)
    assert settings.anthropic_api_key == "sk-ant-file"
    assert settings.max_sessions == 7


def test_invalid_timeout_rejected(clean_env):
    clean_env.setenv("WORKFLOW_STEP_TIMEOUT", "0")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_get_settings_is_cached(clean_env):
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()


def test_setup_logging_levels(clean_env):
    logger = setup_logging("debug")
    assert logger.name == LOGGER_NAME
    assert logger.level == logging.DEBUG

    clean_env.setenv("WORKFLOW_ENGINE_LOG_LEVEL", "ERROR")
    assert setup_logging().level == logging.ERROR

    assert setup_logging("NOPE").level == logging.WARNING
