from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route
from starlette.testclient import TestClient

from backend.companion.middleware.request_id import RequestIdMiddleware
from backend.companion.observability import accept_request_id, get_request_id


def _client(**middleware_kwargs) -> TestClient:
    async def endpoint(request):
        return JSONResponse({"request_id": request.state.request_id})

    app = Starlette(routes=[Route("/test", endpoint, methods=["POST"])])
    app.add_middleware(RequestIdMiddleware, **middleware_kwargs)
    return TestClient(app)


def test_generates_request_id():
    res = _client().post("/test", json={"message": "hello"})
    assert res.status_code == 200
    rid = res.headers.get("x-request-id")
    assert rid and len(rid) >= 32
    assert res.json()["request_id"] == rid


def test_reuses_safe_incoming_id():
    res = _client().post("/test", headers={"X-Request-ID": "abc-123"})
    assert res.headers["x-request-id"] == "abc-123"


def test_replaces_unsafe_incoming_id():
    res = _client().post("/test", headers={"X-Request-ID": "<script>"})
    assert res.headers["x-request-id"] != "<script>"


def test_custom_header_name_is_read_and_echoed():
    client = _client(header_name="X-Correlation-ID")
    res = client.post("/test", headers={"X-Correlation-ID": "feed-beef"})
    assert res.headers["x-correlation-id"] == "feed-beef"
    assert res.json()["request_id"] == "feed-beef"
    assert "x-request-id" not in res.headers


def test_custom_header_name_ignores_default_header():
    res = _client(header_name="x-correlation-id").post("/test", headers={"X-Request-ID": "abc-123"})
    assert res.headers["x-correlation-id"] != "abc-123"


def test_header_name_defaults_to_settings(monkeypatch):
    from backend.companion.config import get_settings

    monkeypatch.setenv("REQUEST_ID_HEADER", "X-Trace-ID")
    get_settings.cache_clear()
    try:
        res = _client().post("/test", headers={"X-Trace-ID": "0123abcd"})
    finally:
        get_settings.cache_clear()
    assert res.headers["x-trace-id"] == "0123abcd"


def test_accept_request_id():
    assert accept_request_id(" abc-123 ") == "abc-123"
    assert accept_request_id("a" * 65) is None
    assert accept_request_id("") is None
    assert accept_request_id(None) is None


def test_get_request_id_uses_configured_header_without_middleware():
    scope = {"type": "http", "headers": [(b"x-correlation-id", b"abc-123")]}
    request = Request(scope)
    assert get_request_id(request, header_name="x-correlation-id") == "abc-123"
    assert get_request_id(request) != "abc-123"
