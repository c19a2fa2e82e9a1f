"""
Runtime settings for the classroom tutor client.
Loads from environment variables (prefix CLASSROOM_TUTOR_) and an optional .env file.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from classroom_tutor.constants.api_constants import (
    DEFAULT_API_BASE_URL,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    LOCAL_BACKEND_HOST,
    LOCAL_BACKEND_PORT,
)


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    model_config = SettingsConfigDict(
        env_prefix="CLASSROOM_TUTOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Backend
    api_url: str = Field(default=DEFAULT_API_BASE_URL)
    request_timeout: float = Field(default=DEFAULT_REQUEST_TIMEOUT_SECONDS, gt=0)

    # Credentials
    auth_token: str | None = None
    token_file: Path | None = None

    # Offline behaviour
    offline_fallback: bool = False
    start_local_backend: bool = False
    local_backend_host: str = LOCAL_BACKEND_HOST
    local_backend_port: int = Field(default=LOCAL_BACKEND_PORT, ge=1, le=65535)

    # Student identity
    student_id: str = "student_1"
    class_id: str | None = None

    log_level: str = "INFO"

    @field_validator("api_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @property
    def local_backend_url(self) -> str:
        return f"http://{self.local_backend_host}:{self.local_backend_port}"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
