"""Application settings and configuration management."""
from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables or defaults."""

    API_BASE: str = Field(default="http://localhost:3000")
    JWT: str = ""
    USERNAME: str = ""
    HTTP_TIMEOUT_S: float = Field(default=10.0, gt=0)

    SUMMARY_API_BASE: str = Field(default="http://localhost:8000")

    GENAI_API_KEY: Optional[str] = None
    GENAI_BASE_URL: str = "https://api.openai.com"
    GENAI_ENDPOINT: str = "/v1/chat/completions"
    GENAI_MODEL: str = "gpt-4o-mini"
    GENAI_TIMEOUT_S: float = Field(default=30.0, gt=0)

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", validate_assignment=True)


settings = Settings()
