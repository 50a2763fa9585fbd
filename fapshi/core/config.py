"""
Client settings using pydantic-settings v2.

Environment variables use the ``FAPSHI_`` prefix, e.g. ``FAPSHI_API_USER``,
``FAPSHI_API_KEY``, ``FAPSHI_SANDBOX``. A ``.env`` file is read when present.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FapshiSettings(BaseSettings):
    api_user: Optional[str] = Field(default=None, description="apiuser from the Fapshi dashboard")
    api_key: Optional[str] = Field(default=None, description="apikey from the Fapshi dashboard")
    sandbox: bool = True

    # Logging
    debug: bool = False  # log every request/response at debug level
    log_json: bool = False
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="FAPSHI_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return (v or "INFO").upper()


@lru_cache
def get_settings() -> FapshiSettings:
    return FapshiSettings()
