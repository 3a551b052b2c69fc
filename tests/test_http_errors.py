"""HTTP error handling tests (no network)."""

import pytest
import httpx

from pytinder.transport import HttpxTransport
from pytinder import errors


def make_response(status: int, body: str = "", url: str = "https://api.gotinder.com/test") -> httpx.Response:
    req = httpx.Request("GET", url)
    return httpx.Response(status, request=req, content=body.encode("utf-8"))


def test_error_mapping_unauthorized():
    t = HttpxTransport()
    resp = make_response(401, '{"error":"Unauthorized"}')
    with pytest.raises(errors.UnauthorizedError) as exc_info:
        t._handle_http_error(resp)
    assert exc_info.value.status_code == 401
    assert exc_info.value.remote_error == "Unauthorized"


def test_error_mapping_not_found():
    t = HttpxTransport()
    resp = make_response(404, '{"error":"User not found"}', url="https://api.gotinder.com/user/123")
    with pytest.raises(errors.NotFoundError) as exc_info:
        t._handle_http_error(resp)
    assert exc_info.value.details["url"] == "https://api.gotinder.com/user/123"


def test_error_mapping_bad_request():
    t = HttpxTransport()
    resp = make_response(400, '{"error":"Bad input"}')
    with pytest.raises(errors.BadRequestError):
        t._handle_http_error(resp)


def test_error_mapping_server_error():
    t = HttpxTransport()
    for code in (500, 502, 503):
        resp = make_response(code, '{"error":"Internal"}')
        with pytest.raises(errors.ServerError):
            t._handle_http_error(resp)


def test_error_mapping_permission_and_ratelimit():
    t = HttpxTransport()
    resp_forbidden = make_response(403, '{"error":"Forbidden"}')
    with pytest.raises(errors.PermissionDeniedError):
        t._handle_http_error(resp_forbidden)
    resp_rl = make_response(429, '{"error":"Rate limit"}')
    with pytest.raises(errors.RateLimitError):
        t._handle_http_error(resp_rl)


def test_error_mapping_other_status_and_plain_body():
    t = HttpxTransport()
    resp = make_response(418, "short and stout")
    with pytest.raises(errors.TransportError) as exc_info:
        t._handle_http_error(resp)
    assert type(exc_info.value) is errors.TransportError
    assert exc_info.value.remote_error == "short and stout"
    assert exc_info.value.code == "418"


def test_error_hierarchy():
    base = errors.TinderError("oops")
    assert isinstance(base, Exception)
    for exc_type in (
        errors.NetworkError,
        errors.BadRequestError,
        errors.UnauthorizedError,
        errors.PermissionDeniedError,
        errors.NotFoundError,
        errors.RateLimitError,
        errors.ServerError,
    ):
        assert issubclass(exc_type, errors.TransportError)
    assert issubclass(errors.TransportError, errors.TinderError)
    assert issubclass(errors.AuthenticationError, errors.TinderError)
    assert not issubclass(errors.AuthenticationError, errors.TransportError)
    assert issubclass(errors.ValidationError, errors.TinderError)


@pytest.mark.asyncio
async def test_timeout_wrapped(monkeypatch):
    class FakeClient:
        async def request(self, *args, **kwargs):  # mimics httpx.AsyncClient.request
            raise httpx.ReadTimeout("timeout")

    t = HttpxTransport()

    async def fake_ensure():
        return FakeClient()

    monkeypatch.setattr(t, "_ensure_client", fake_ensure)

    from pytinder import AsyncTinderClient

    client = AsyncTinderClient(t)
    with pytest.raises(errors.NetworkError):
        await client.get_user("u1")
