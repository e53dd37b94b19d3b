"""centralized configuration management using pydantic settings.

this module provides type-safe, validated configuration for the workflow
engine. configuration is loaded from environment variables and optional
.env files.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """main settings class for the workflow engine.

    attributes:
        gemini_api_key: api key for google gemini
        google_api_key: alias for the gemini key
        openai_api_key: api key for openai
        anthropic_api_key: api key for anthropic (claude)
        together_api_key: api key for together ai
        log_level: logging level (DEBUG, INFO, WARNING, ERROR)
        step_timeout: per-step provider call deadline in seconds
        max_sessions: maximum number of sessions kept in memory
        session_ttl: age in seconds after which finished sessions are evicted
        default_debate_rounds: rounds used when a debate is started without a count
        integrator_agent_id: agent that finalizes a debate
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # api keys for llm providers
    gemini_api_key: str | None = None
    google_api_key: str | None = None  # alias for gemini
    openai_api_key: str | None = None
    anthropic_api_key: str | None = None
    together_api_key: str | None = None

    log_level: str = Field(default="WARNING", alias="WORKFLOW_ENGINE_LOG_LEVEL")

    # workflow execution
    step_timeout: float | None = Field(default=120.0, gt=0, alias="WORKFLOW_STEP_TIMEOUT")
    default_debate_rounds: int = Field(default=5, alias="WORKFLOW_DEBATE_ROUNDS")
    integrator_agent_id: str = Field(
        default="integrator-finalizer", alias="WORKFLOW_INTEGRATOR_AGENT"
    )

    # session retention (None disables the limit)
    max_sessions: int | None = Field(default=100, ge=1, alias="WORKFLOW_MAX_SESSIONS")
    session_ttl: int | None = Field(default=None, ge=1, alias="WORKFLOW_SESSION_TTL")

    def get_gemini_api_key(self) -> str | None:
        """get gemini api key, checking both GEMINI_API_KEY and GOOGLE_API_KEY."""
        return self.gemini_api_key or self.google_api_key

    def get_api_key_for_provider(self, provider: str) -> str | None:
        """get the api key for a specific provider.

        args:
            provider: provider name (gemini, openai, anthropic, together)

        returns:
            api key or None if not set
        """
        key_map = {
            "gemini": self.get_gemini_api_key(),
            "openai": self.openai_api_key,
            "anthropic": self.anthropic_api_key,
            "together": self.together_api_key,
        }
        return key_map.get(provider)


@lru_cache
def get_settings() -> Settings:
    """get the singleton settings instance.

    uses lru_cache to ensure only one instance is created.
    call get_settings.cache_clear() to reload settings if needed.

    returns:
        the settings instance
    """
    return Settings()
