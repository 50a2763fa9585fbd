"""Pytest bootstrap configuration.

Shared fakes: an httpx ``MockTransport`` factory for exercising the real
client, and a stub ``Transport`` for the API functions.
"""
import json
from typing import Any, Callable, List, Optional

import httpx
import pytest

from fapshi import FapshiClient


TEST_API_USER = "cf58da14-1daa-4d48-a5c6-9033d479fcc1"
TEST_API_KEY = "FAK_TEST_74f26535e703330ebd13"


class RecordingHandler:
    """httpx MockTransport handler that records requests and replays a response."""

    def __init__(self, status_code: int = 200, payload: Any = None, text: Optional[str] = None):
        self.status_code = status_code
        self.payload = payload
        self.text = text
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.payload if self.payload is not None else {})

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


class StubTransport:
    """In-memory Transport: records calls and returns a canned body."""

    def __init__(self, body: Any = "{}", error: Optional[Exception] = None):
        self.body = body if isinstance(body, str) else json.dumps(body)
        self.error = error
        self.calls: List[tuple] = []

    async def get(self, path: str, params: Optional[dict] = None) -> str:
        self.calls.append(("GET", path, params))
        if self.error:
            raise self.error
        return self.body

    async def post(self, path: str, body: str) -> str:
        self.calls.append(("POST", path, body))
        if self.error:
            raise self.error
        return self.body


@pytest.fixture
def make_client() -> Callable[..., FapshiClient]:
    def _make(handler: Callable[[httpx.Request], httpx.Response], sandbox: bool = True) -> FapshiClient:
        return FapshiClient(
            TEST_API_USER,
            TEST_API_KEY,
            sandbox=sandbox,
            transport=httpx.MockTransport(handler),
        )
    return _make


@pytest.fixture
def transaction_payload() -> dict:
    return {
        "transId": "trans123",
        "status": "SUCCESSFUL",
        "medium": "mobile money",
        "serviceName": "Test Service",
        "amount": 500,
        "revenue": 490,
        "payerName": "Test Payer",
        "email": "payer@example.com",
        "redirectUrl": "https://example.com/thanks",
        "externalId": "order123",
        "userId": "user123",
        "webhook": "https://example.com/hook",
        "financialTransId": "FT123456",
        "dateInitiated": "2025-01-10T10:00:00.000Z",
        "dateConfirmed": "2025-01-10T10:01:00.000Z",
    }
