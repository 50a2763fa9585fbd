import asyncio
import json
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import httpx
import pytest

from conftest import RecordingHandler, TEST_API_KEY, TEST_API_USER
from fapshi import (
    FapshiClient,
    FapshiHttpError,
    FapshiSettings,
    HeaderValidationError,
    LIVE_BASE_URL,
    SANDBOX_BASE_URL,
)
from fapshi.shared.codes import FapshiCode


def test_sandbox_flag_selects_base_url():
    assert FapshiClient("user", "key", sandbox=True).base_url == SANDBOX_BASE_URL
    assert FapshiClient("user", "key", sandbox=False).base_url == LIVE_BASE_URL
    assert FapshiClient("user", "key").sandbox is True


def test_default_headers():
    client = FapshiClient(TEST_API_USER, TEST_API_KEY)
    assert client.headers == {
        "apiuser": TEST_API_USER,
        "apikey": TEST_API_KEY,
        "Content-Type": "application/json",
    }
    # returned as a copy
    client.headers["apikey"] = "changed"
    assert client.headers["apikey"] == TEST_API_KEY


@pytest.mark.parametrize(
    "api_user,api_key,field",
    [
        ("user\n", "key", "apiuser"),
        ("user", "key\r\nX-Injected: 1", "apikey"),
        ("usér", "key", "apiuser"),
        ("user", "k\x00ey", "apikey"),
        ("user", "key\x7f", "apikey"),
        (" user", "key", "apiuser"),
    ],
)
def test_invalid_credentials_rejected_without_network(api_user, api_key, field):
    handler = RecordingHandler()
    with pytest.raises(HeaderValidationError) as exc_info:
        FapshiClient(api_user, api_key, transport=httpx.MockTransport(handler))
    err = exc_info.value
    assert err.field == field
    assert err.code == FapshiCode.HEADER_INVALID
    assert handler.requests == []


def test_header_error_does_not_echo_credential():
    with pytest.raises(HeaderValidationError) as exc_info:
        FapshiClient("user", "FAK_secret\n")
    assert "FAK_secret" not in str(exc_info.value)


def test_repr_masks_api_key():
    client = FapshiClient(TEST_API_USER, TEST_API_KEY)
    assert TEST_API_KEY not in repr(client)
    assert TEST_API_USER in repr(client)


@pytest.mark.asyncio
async def test_get_joins_path_and_sends_credentials(make_client):
    handler = RecordingHandler(payload={"balance": 1000, "currency": "XAF"})
    async with make_client(handler) as client:
        body = await client.get("balance")

    assert json.loads(body) == {"balance": 1000, "currency": "XAF"}
    assert len(handler.requests) == 1
    request = handler.last
    assert request.method == "GET"
    assert str(request.url) == "https://sandbox.fapshi.com/balance"
    assert request.headers["apiuser"] == TEST_API_USER
    assert request.headers["apikey"] == TEST_API_KEY
    assert request.headers["content-type"] == "application/json"


@pytest.mark.asyncio
async def test_get_with_params(make_client):
    handler = RecordingHandler(payload=[])
    async with make_client(handler, sandbox=False) as client:
        await client.get("/transaction/search", params={"status": "successful", "limit": 5})

    url = handler.last.url
    assert url.host == "live.fapshi.com"
    assert url.path == "/transaction/search"
    assert url.params["status"] == "successful"
    assert url.params["limit"] == "5"


@pytest.mark.asyncio
async def test_post_sends_body_verbatim(make_client):
    handler = RecordingHandler(payload={"transId": "abc"})
    async with make_client(handler) as client:
        body = await client.post("expire-pay", '{"transId":"abc"}')

    assert json.loads(body) == {"transId": "abc"}
    assert handler.last.method == "POST"
    assert handler.last.content == b'{"transId":"abc"}'


@pytest.mark.asyncio
async def test_absolute_url_is_not_joined(make_client):
    handler = RecordingHandler()
    async with make_client(handler) as client:
        await client.post("https://example.com/webhook", "{}")

    assert str(handler.last.url) == "https://example.com/webhook"


@pytest.mark.asyncio
async def test_non_2xx_raises_http_error_with_provider_message(make_client):
    handler = RecordingHandler(status_code=400, payload={"message": "Transaction already expired"})
    async with make_client(handler) as client:
        with pytest.raises(FapshiHttpError) as exc_info:
            await client.post("expire-pay", '{"transId":"abc"}')

    err = exc_info.value
    assert err.status_code == 400
    assert err.code == FapshiCode.HTTP_ERROR
    assert "Transaction already expired" in str(err)
    assert "Status: 400" in str(err)
    assert json.loads(err.body) == {"message": "Transaction already expired"}
    assert not err.is_transport_failure


@pytest.mark.asyncio
async def test_non_json_error_body(make_client):
    handler = RecordingHandler(status_code=502, text="Bad Gateway")
    async with make_client(handler) as client:
        with pytest.raises(FapshiHttpError) as exc_info:
            await client.get("balance")

    assert exc_info.value.status_code == 502
    assert exc_info.value.body == "Bad Gateway"


@pytest.mark.asyncio
async def test_network_failure_raises_http_error_once(make_client):
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        raise httpx.ConnectError("connection refused", request=request)

    async with make_client(handler) as client:
        with pytest.raises(FapshiHttpError) as exc_info:
            await client.get("balance")

    err = exc_info.value
    assert err.is_transport_failure
    assert isinstance(err.__cause__, httpx.ConnectError)
    # no retries
    assert len(calls) == 1


@pytest.mark.asyncio
async def test_client_reused_and_closed(make_client):
    handler = RecordingHandler()
    client = make_client(handler)
    await client.get("balance")
    first = client._client
    await client.get("balance")
    assert client._client is first
    await client.aclose()
    assert client._client is None


def test_from_settings_builds_live_client():
    settings = FapshiSettings(api_user="user", api_key="key", sandbox=False, _env_file=None)
    client = FapshiClient.from_settings(settings)
    assert client.base_url == LIVE_BASE_URL
    assert client.headers["apiuser"] == "user"


def test_from_settings_requires_credentials():
    settings = FapshiSettings(api_user=None, api_key=None, _env_file=None)
    with pytest.raises(ValueError):
        FapshiClient.from_settings(settings)


@pytest.mark.asyncio
async def test_debug_logging_never_includes_api_key(make_client):
    from structlog.testing import capture_logs

    handler = RecordingHandler(payload={"balance": 1, "currency": "XAF"})
    client = make_client(handler)
    client.debug = True
    with capture_logs() as logs:
        async with client:
            await client.get("balance")

    events = [entry["event"] for entry in logs]
    assert events == ["fapshi.request", "fapshi.response"]
    assert TEST_API_KEY not in repr(logs)


@pytest.mark.asyncio
async def test_credentials_not_sent_to_other_hosts(make_client):
    handler = RecordingHandler()
    async with make_client(handler) as client:
        await client.post("https://merchant.example.com/fapshi/webhook", "{}")
        await client.post("https://sandbox.fapshi.com/initiate-pay", "{}")

    foreign, own = handler.requests
    assert "apiuser" not in foreign.headers
    assert "apikey" not in foreign.headers
    assert foreign.headers["content-type"] == "application/json"
    assert own.headers["apiuser"] == TEST_API_USER
    assert own.headers["apikey"] == TEST_API_KEY


class _KeepAliveHandler(BaseHTTPRequestHandler):
    protocol_version = "HTTP/1.1"

    def do_GET(self):
        payload = b'{"balance": 1, "currency": "XAF"}'
        self.send_response(200)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        self.wfile.write(payload)

    def log_message(self, format, *args):
        pass


@pytest.fixture
def keep_alive_server():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _KeepAliveHandler)
    server.daemon_threads = True
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_address[1]}/balance"
    finally:
        server.shutdown()
        server.server_close()


def test_client_survives_consecutive_event_loops(keep_alive_server):
    client = FapshiClient("user", "key")

    first = asyncio.run(client.get(keep_alive_server))
    second = asyncio.run(client.get(keep_alive_server))

    assert json.loads(first) == json.loads(second) == {"balance": 1, "currency": "XAF"}
    asyncio.run(client.aclose())
    assert client._client is None


def test_aclose_from_another_loop_drops_stale_pool(make_client):
    client = make_client(RecordingHandler())

    asyncio.run(client.get("balance"))
    stale = client._client
    asyncio.run(client.aclose())

    assert client._client is None
    assert stale is not None
