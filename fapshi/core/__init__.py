"""
Core: settings, logging and the error taxonomy.
"""
from .config import FapshiSettings, get_settings
from .exceptions import (
    FapshiError,
    FapshiHttpError,
    HeaderValidationError,
    FapshiApiError,
    SerializationError,
)

__all__ = [
    "FapshiSettings",
    "get_settings",
    "FapshiError",
    "FapshiHttpError",
    "HeaderValidationError",
    "FapshiApiError",
    "SerializationError",
]
