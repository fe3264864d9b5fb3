"""Pydantic Settings — typed configuration with .env auto-loading."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from config.llm_config import LLMConfig


class Settings(BaseSettings):
    """Application configuration loaded from environment / .env file."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ── Service ──────────────────────────────────────────────
    service_port: int = 5000
    cors_origins: list[str] = ["*"]
    debug: bool = False
    log_level: str = "INFO"

    # ── LLM ──────────────────────────────────────────────────
    default_model: str = "openai/gpt-4o-mini"
    # Per-task overrides; empty string = use default_model
    solution_model: str = ""
    code_model: str = ""
    learning_model: str = ""
    quiz_model: str = ""
    max_tokens: int = 4096
    llm_timeout: float = 60.0  # seconds, applied by the provider HTTP client

    # ── LLM Generation Defaults (all optional, None = model default) ──
    temperature: float | None = None
    top_p: float | None = None
    seed: int | None = None

    # Provider API keys
    openai_api_key: str = ""
    anthropic_api_key: str = ""
    gemini_api_key: str = ""
    dashscope_api_key: str = ""
    zai_api_key: str = ""

    # ── Workspace sessions ───────────────────────────────────
    session_ttl: int = 3600  # seconds idle before a workspace is evicted
    session_cleanup_interval: int = 300
    chat_title_max_chars: int = 30

    # ── Helpers ───────────────────────────────────────────────

    def get_default_llm_config(self) -> LLMConfig:
        """Build an :class:`LLMConfig` from global .env defaults."""
        return LLMConfig(
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            top_p=self.top_p,
            seed=self.seed,
            timeout=self.llm_timeout,
        )

    def model_for_task(self, task: str) -> str:
        """Return the configured model name for a generation task."""
        override = {
            "contextual_solution": self.solution_model,
            "code_snippet": self.code_model,
            "stepwise_guidance": self.code_model,
            "topic_list": self.learning_model,
            "topic_information": self.learning_model,
            "quiz": self.quiz_model,
        }.get(task, "")
        return override or self.default_model


@lru_cache
def get_settings() -> Settings:
    """Singleton accessor for application settings."""
    return Settings()
