"""
Transport port exposing the two primitives the API functions need.

``FapshiClient`` implements it over httpx; tests and alternative stacks can
supply their own implementation.
"""
from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class Transport(Protocol):
    """One GET or POST per call, returning the raw response text.

    Implementations raise ``FapshiHttpError`` on network failure or a
    non-2xx status.
    """

    async def get(self, path: str, params: Optional[dict[str, Any]] = None) -> str: ...

    async def post(self, path: str, body: str) -> str: ...
