"""
Fapshi client exceptions.

The set is closed: every failure surfaced by this library is one of the
four subclasses of ``FapshiError`` below.
"""
from __future__ import annotations

from typing import Optional

from fapshi.shared.codes import FapshiCode


class FapshiError(Exception):
    """Base class for every error raised by the client."""

    def __init__(
        self,
        code: int,
        message: str,
        error_type: str = "FapshiError",
        details: Optional[dict] = None,
    ) -> None:
        self.code = code
        self.message = message
        self.error_type = error_type
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        parts = [self.message]
        status_code = (self.details or {}).get("status_code")
        if status_code:
            parts.append(f"Status: {status_code}")
        return " | ".join(parts)


class FapshiHttpError(FapshiError):
    """Network failure or non-2xx response."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
        url: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        self.url = url
        super().__init__(
            code=FapshiCode.HTTP_ERROR,
            message=message,
            error_type="HttpError",
            details={"status_code": status_code, "url": url},
        )

    @property
    def is_transport_failure(self) -> bool:
        """True when no HTTP response was received at all."""
        return self.status_code is None


class HeaderValidationError(FapshiError):
    """A credential cannot be sent as an HTTP header value."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        super().__init__(
            code=FapshiCode.HEADER_INVALID,
            message=f"Invalid value for header '{field}': {reason}",
            error_type="HeaderValidationError",
            details={"field": field},
        )


class FapshiApiError(FapshiError):
    """Provider-reported failure with structured detail.

    Reserved: the provider's error bodies are currently surfaced through
    ``FapshiHttpError``.
    """

    def __init__(self, message: str, *, details: Optional[dict] = None) -> None:
        super().__init__(
            code=FapshiCode.API_ERROR,
            message=message,
            error_type="ApiError",
            details=details,
        )


class SerializationError(FapshiError):
    """JSON encoding of a request or decoding of a response failed."""

    def __init__(self, message: str, *, model: Optional[str] = None, body: Optional[str] = None) -> None:
        self.model = model
        self.body = body
        super().__init__(
            code=FapshiCode.SERIALIZATION_ERROR,
            message=message,
            error_type="SerializationError",
            details={"model": model},
        )
