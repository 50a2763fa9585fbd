"""
Error codes for the Fapshi client and provider status normalization.
"""
from __future__ import annotations

from enum import IntEnum


class FapshiCode(IntEnum):
    # Generic success
    SUCCESS = 0

    # Transport/provider errors (6xxxx)
    HTTP_ERROR = 60000
    HEADER_INVALID = 60001
    API_ERROR = 60002
    SERIALIZATION_ERROR = 60003


# Provider status spellings seen on the wire → canonical status name
PROVIDER_STATUS_ALIASES = {
    "created": "CREATED",
    "pending": "PENDING",
    "successful": "SUCCESSFUL",
    "success": "SUCCESSFUL",
    "failed": "FAILED",
    "expired": "EXPIRED",
}
