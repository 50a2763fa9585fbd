"""
Service-level DTOs: webhook registration and balance.
"""
from __future__ import annotations

from typing import Optional
from urllib.parse import urlsplit

from pydantic import field_validator

from fapshi.dtos.base import WireModel


class WebhookConfig(WireModel):
    url: str
    service_id: str

    @field_validator("url")
    @classmethod
    def _require_absolute_http_url(cls, v: str) -> str:
        parts = urlsplit((v or "").strip())
        if parts.scheme.lower() not in {"http", "https"} or not parts.netloc:
            raise ValueError("url must be an absolute http(s) URL")
        return v.strip()


class ServiceBalance(WireModel):
    balance: float
    currency: str
    service: Optional[str] = None
