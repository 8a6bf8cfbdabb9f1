"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - PORT defaults to 3000 and must be a valid TCP port (1-65535)
    - LOG_LEVEL and LOG_FORMAT are case-insensitive; unknown values fail here,
      never at server startup
    - APP_ENV=test switches start_server() into test mode (no socket bound)
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Settings passed explicitly to create_app()/start_server(); globals only at the entry point
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

TEST_ENV = "test"

# stdlib spellings uvicorn does not know
_LEVEL_ALIASES = {"warn": "warning", "fatal": "critical"}


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)

    # Environment — "test" means the caller drives the app in-process
    app_env: str = "development"

    @field_validator("app_env", mode="before")
    @classmethod
    def normalize_app_env(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    # Observability — log_level must be a level uvicorn accepts
    log_level: Literal["critical", "error", "warning", "info", "debug"] = "info"
    log_format: Literal["text", "json"] = "text"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        if isinstance(v, str):
            v = v.strip().lower()
            return _LEVEL_ALIASES.get(v, v)
        return v

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_log_format(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @property
    def is_test_mode(self) -> bool:
        return self.app_env == TEST_ENV


@lru_cache
def get_settings() -> Settings:
    return Settings()
