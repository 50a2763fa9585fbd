"""
Shared codes used across the client layers.
"""
from .codes import FapshiCode, PROVIDER_STATUS_ALIASES

__all__ = ["FapshiCode", "PROVIDER_STATUS_ALIASES"]
