from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

GROQ_OPENAI_BASE_URL = "https://api.groq.com/openai/v1"


class Settings(BaseSettings):
    """Application settings for the quiz service.

    Loads from env with support for repo ".env" files. Avoids manual load_dotenv().
    """

    _app_env = (os.getenv("APP_ENV") or "").strip().lower()
    _env_files = (
        []
        if _app_env in {"test", "ci"}
        else [
            str((Path(__file__).resolve().parents[1] / ".env")),  # apps/quizsmith/.env
            str((Path(__file__).resolve().parents[3] / ".env")),  # repo root .env
        ]
    )

    # Load env vars from apps/quizsmith/.env first, then repo root .env
    model_config = SettingsConfigDict(
        env_file=_env_files,
        case_sensitive=False,
        extra="ignore",
    )

    # --- App / Core ---
    app_env: str = Field(default="dev", alias="APP_ENV")
    app_name: str = Field(default="quizsmith", alias="APP_NAME")
    # Logging
    log_level: str | None = Field(default=None, alias="QUIZSMITH_LOG_LEVEL")
    log_level_fallback: str | None = Field(default=None, alias="LOG_LEVEL")

    cors_allow_origins: list[str] = Field(default=["*"], alias="CORS_ALLOW_ORIGINS")

    # Server
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8000, alias="PORT", ge=1, le=65535)

    # --- Groq (OpenAI-compatible endpoint) ---
    groq_api_key: SecretStr | None = Field(default=None, alias="GROQ_API_KEY")
    groq_base_url: str = Field(default=GROQ_OPENAI_BASE_URL, alias="GROQ_BASE_URL")

    # --- Quiz generation ---
    quiz_model: str = Field(default="openai/gpt-oss-20b", alias="QUIZ_MODEL")
    quiz_temperature: Optional[float] = Field(
        default=None, alias="QUIZ_TEMPERATURE", ge=0.0, le=2.0
    )  # None -> provider default
    quiz_language: str = Field(default="Indonesia", alias="QUIZ_LANGUAGE")
    quiz_provider_timeout: float = Field(
        default=60.0, alias="QUIZ_PROVIDER_TIMEOUT", gt=0.0, le=600.0
    )

    @property
    def resolved_log_level(self) -> str | None:
        return self.log_level or self.log_level_fallback


@lru_cache()
def get_settings() -> Settings:
    return Settings()

