"""
HTTP transport for the Fapshi API.

Holds the environment's base URL and the authentication headers, and exposes
the two primitives every API call is built on: ``get`` and ``post``. Each call
is exactly one round trip; failures surface immediately as ``FapshiHttpError``.
"""
from __future__ import annotations

import asyncio
import re
import time
from typing import Any, Dict, Optional
from urllib.parse import urlsplit

import httpx

from fapshi.core.config import FapshiSettings, get_settings
from fapshi.core.exceptions import FapshiHttpError, HeaderValidationError
from fapshi.core.logging_config import get_logger


logger = get_logger(__name__)

SANDBOX_BASE_URL = "https://sandbox.fapshi.com"
LIVE_BASE_URL = "https://live.fapshi.com"

API_USER_HEADER = "apiuser"
API_KEY_HEADER = "apikey"

# Printable ASCII and horizontal tab
_HEADER_VALUE_RE = re.compile(r"[\t\x20-\x7e]*")
_ABSOLUTE_URL_RE = re.compile(r"^https?://", re.IGNORECASE)


def validate_header_value(field: str, value: str) -> str:
    """Reject anything that cannot travel as an HTTP header value."""
    if not isinstance(value, str):
        raise HeaderValidationError(field, f"expected str, got {type(value).__name__}")
    if not _HEADER_VALUE_RE.fullmatch(value):
        raise HeaderValidationError(field, "contains control or non-ASCII characters")
    if value != value.strip(" \t"):
        raise HeaderValidationError(field, "has leading or trailing whitespace")
    return value


class FapshiClient:
    """
    Authenticated client for the Fapshi API.

    Build one per process and share it; nothing is mutated after construction
    except the lazily created connection pool.

    Example:
        async with FapshiClient(api_user, api_key, sandbox=True) as client:
            response = await create_payment(client, PaymentRequest(amount=100, message="Order 42"))
    """

    def __init__(
        self,
        api_user: str,
        api_key: str,
        sandbox: bool = True,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        debug: bool = False,
    ):
        """
        Args:
            api_user: apiuser from the Fapshi dashboard
            api_key: apikey from the Fapshi dashboard
            sandbox: sandbox environment when True, live otherwise
            transport: custom httpx transport (e.g. ``httpx.MockTransport``)
            debug: log every request and response

        Raises:
            HeaderValidationError: a credential is not a valid header value
        """
        self._headers: Dict[str, str] = {
            API_USER_HEADER: validate_header_value(API_USER_HEADER, api_user),
            API_KEY_HEADER: validate_header_value(API_KEY_HEADER, api_key),
            "Content-Type": "application/json",
        }
        self._sandbox = bool(sandbox)
        self._base_url = SANDBOX_BASE_URL if self._sandbox else LIVE_BASE_URL
        self._transport = transport
        self.debug = debug

        self._client: Optional[httpx.AsyncClient] = None
        self._client_loop: Optional[asyncio.AbstractEventLoop] = None

    @classmethod
    def from_settings(
        cls,
        settings: Optional[FapshiSettings] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "FapshiClient":
        """Build a client from ``FAPSHI_*`` environment settings."""
        settings = settings or get_settings()
        if not settings.api_user or not settings.api_key:
            raise ValueError("FAPSHI_API_USER and FAPSHI_API_KEY must be configured")
        return cls(
            settings.api_user,
            settings.api_key,
            sandbox=settings.sandbox,
            transport=transport,
            debug=settings.debug,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def sandbox(self) -> bool:
        return self._sandbox

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self._headers)

    def __repr__(self) -> str:
        return (
            f"FapshiClient(base_url={self._base_url!r}, "
            f"api_user={self._headers[API_USER_HEADER]!r}, api_key='***')"
        )

    def _http(self) -> httpx.AsyncClient:
        """Get or create the httpx client bound to the running event loop.

        Pooled connections belong to the loop that opened them, so a client
        reused across ``asyncio.run`` calls gets a fresh pool per loop.
        """
        loop = asyncio.get_running_loop()
        if self._client is not None and self._client_loop is not loop:
            self._discard_stale_client()
        if self._client is None:
            self._client = httpx.AsyncClient(headers=self._headers, transport=self._transport)
            self._client_loop = loop
        return self._client

    def _discard_stale_client(self) -> None:
        stale, stale_loop = self._client, self._client_loop
        self._client = None
        self._client_loop = None
        # A closed loop took its sockets with it; a live one must close its own pool
        if stale is not None and stale_loop is not None and stale_loop.is_running() and not stale_loop.is_closed():
            asyncio.run_coroutine_threadsafe(stale.aclose(), stale_loop)

    async def aclose(self) -> None:
        """Close the underlying httpx client if it was created."""
        if self._client is None:
            return
        if self._client_loop is not asyncio.get_running_loop():
            self._discard_stale_client()
            return
        try:
            await self._client.aclose()
        finally:
            self._client = None
            self._client_loop = None

    async def __aenter__(self) -> "FapshiClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    def _build_url(self, path: str) -> str:
        """Join ``path`` to the base URL; absolute URLs are used as-is."""
        if _ABSOLUTE_URL_RE.match(path):
            return path
        return f"{self._base_url}/{path.lstrip('/')}"

    def _is_api_host(self, url: str) -> bool:
        return urlsplit(url).netloc.lower() == urlsplit(self._base_url).netloc

    def _log_request(self, method: str, url: str, **kwargs: Any) -> None:
        if self.debug:
            logger.debug(
                "fapshi.request",
                method=method,
                url=url,
                params=kwargs.get("params"),
                body=kwargs.get("body"),
            )

    def _log_response(self, response: httpx.Response, elapsed_ms: float) -> None:
        if self.debug:
            logger.debug(
                "fapshi.response",
                status_code=response.status_code,
                url=str(response.request.url),
                elapsed_ms=round(elapsed_ms, 2),
            )

    @staticmethod
    def _error_from_response(response: httpx.Response) -> FapshiHttpError:
        """Map a non-2xx response, lifting the provider's message when present."""
        body = response.text
        message = f"Fapshi request failed with status {response.status_code}"
        try:
            data = response.json()
        except ValueError:
            data = None
        if isinstance(data, dict):
            provider_message = data.get("message") or data.get("error")
            if provider_message:
                message = f"{message}: {provider_message}"
        return FapshiHttpError(
            message,
            status_code=response.status_code,
            body=body,
            url=str(response.request.url),
        )

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        body: Optional[str] = None,
    ) -> str:
        url = self._build_url(path)
        self._log_request(method, url, params=params, body=body)

        start = time.perf_counter()
        try:
            client = self._http()
            request = client.build_request(method, url, params=params, content=body)
            if not self._is_api_host(url):
                # Credentials only ever go to the Fapshi API host
                request.headers.pop(API_USER_HEADER, None)
                request.headers.pop(API_KEY_HEADER, None)
            response = await client.send(request)
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            if self.debug:
                logger.warning("fapshi.request_failed", method=method, url=url, error=str(exc))
            raise FapshiHttpError(f"Network error: {exc}", url=url) from exc
        self._log_response(response, (time.perf_counter() - start) * 1000)

        if not response.is_success:
            raise self._error_from_response(response)
        return response.text

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> str:
        """GET ``path`` and return the response body."""
        return await self._request("GET", path, params=params)

    async def post(self, path: str, body: str) -> str:
        """POST the JSON string ``body`` to ``path`` and return the response body."""
        return await self._request("POST", path, body=body)
