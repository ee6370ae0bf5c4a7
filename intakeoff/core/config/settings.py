from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["ApplicationSettings"]


class ApplicationSettings(BaseSettings):
    """Top-level application settings loaded from environment variables."""

    debug_mode: bool = Field(False)

    # HTTP API
    port: int = Field(3001)
    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"]
    )

    # API client
    api_base_url: str = Field("http://localhost:3001")
    api_key: Optional[str] = Field(None)
    request_timeout: float = Field(30.0)

    # Extra prompt templates layered over the built-in registry
    prompt_store: Optional[Path] = Field(None)

    @field_validator("api_base_url", mode="before")
    def _validate_base_url(cls, v: str) -> str:  # noqa: D401
        if not str(v).startswith(("http://", "https://")):
            raise ValueError("API base URL must start with http:// or https://")
        return str(v).rstrip("/")

    @field_validator("prompt_store", mode="before")
    def _empty_prompt_store(cls, v):  # noqa: D401
        return v or None

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")
