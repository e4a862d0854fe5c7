# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import asyncio
import dataclasses
import socket

import httpx

from streamguard.config import ProbeSettings
from streamguard.errors import ErrorCategory
from streamguard.http import create_default_http_client
from streamguard.http.adapters import StubHttpClient
from streamguard.http.httpx_client import HttpxClient
from streamguard.http.models import HttpRequest, HttpResponse
from streamguard.models import ProbeStatus, ProbeTarget
from streamguard.probe.prober import BatchProber

MAX_REDIRECTS = 3


def _redirect_chain_handler(hops):
    def handler(request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if path.startswith("/hop"):
            step = int(path[len("/hop") :])
            if step < hops:
                return httpx.Response(302, headers={"Location": f"/hop{step + 1}"})
            return httpx.Response(200)
        if path == "/loop":
            return httpx.Response(302, headers={"Location": "/loop"})
        if path == "/missing":
            return httpx.Response(404)
        if path == "/slow":
            raise httpx.ReadTimeout("read timed out", request=request)
        if path == "/refused":
            raise httpx.ConnectError("connection refused", request=request)
        return httpx.Response(200, headers={"X-Method": request.method, "X-UA": request.headers.get("user-agent", "")})

    return handler


def _client(handler, settings=None):
    settings = settings or ProbeSettings(timeout=1.0)
    transport = httpx.MockTransport(handler)
    inner = httpx.AsyncClient(transport=transport, follow_redirects=True, max_redirects=MAX_REDIRECTS)
    return HttpxClient(settings, client=inner)


def _request(client, url, **kwargs):
    async def go():
        try:
            return await client.request(HttpRequest(url=url, **kwargs))
        finally:
            await client.aclose()

    return asyncio.run(go())


def test_httpx_client_sends_head_with_user_agent():
    settings = ProbeSettings(timeout=1.0, user_agent="Probe/1.0")
    response = _request(_client(_redirect_chain_handler(0), settings), "http://streams.test/live")
    assert response.ok is True
    assert response.status_code == 200
    assert response.headers["x-method"] == "HEAD"
    assert response.headers["x-ua"] == "Probe/1.0"
    assert response.error_category == ErrorCategory.NONE


def test_httpx_client_accepts_any_status():
    response = _request(_client(_redirect_chain_handler(0)), "http://streams.test/missing")
    assert response.ok is True
    assert response.status_code == 404


def test_httpx_client_follows_redirects_up_to_cap():
    response = _request(_client(_redirect_chain_handler(MAX_REDIRECTS)), "http://streams.test/hop0")
    assert response.ok is True
    assert response.status_code == 200
    assert response.redirects == MAX_REDIRECTS
    assert response.url == f"http://streams.test/hop{MAX_REDIRECTS}"


def test_httpx_client_reports_redirects_beyond_cap_as_error():
    response = _request(_client(_redirect_chain_handler(MAX_REDIRECTS + 1)), "http://streams.test/hop0")
    assert response.ok is False
    assert response.status_code is None
    assert response.error_type == "TooManyRedirects"
    assert response.error_category == ErrorCategory.TOO_MANY_REDIRECTS


def test_httpx_client_converts_timeouts_and_connect_errors():
    slow = _request(_client(_redirect_chain_handler(0)), "http://streams.test/slow")
    assert slow.ok is False
    assert slow.error_category == ErrorCategory.TIMEOUT

    refused = _request(_client(_redirect_chain_handler(0)), "http://streams.test/refused")
    assert refused.ok is False
    assert refused.error_category == ErrorCategory.CONNECTION_ERROR
    assert refused.error_message == "connection refused"


def test_dns_failure_is_categorized_from_cause():
    def handler(request: httpx.Request) -> httpx.Response:
        try:
            raise socket.gaierror(-2, "Name or service not known")
        except socket.gaierror as exc:
            raise httpx.ConnectError(str(exc), request=request) from exc

    response = _request(_client(handler), "http://nowhere.invalid/live")
    assert response.ok is False
    assert response.error_category == ErrorCategory.DNS_ERROR


def test_prober_redirect_policy_end_to_end():
    client = _client(_redirect_chain_handler(MAX_REDIRECTS))
    targets = [
        ProbeTarget(name="within cap", url="http://streams.test/hop0"),
        ProbeTarget(name="loop", url="http://streams.test/loop"),
        ProbeTarget(name="missing", url="http://streams.test/missing"),
    ]

    async def go():
        try:
            return await BatchProber(client, ProbeSettings()).run(targets, concurrency=2, per_request_timeout=1.0)
        finally:
            await client.aclose()

    run = asyncio.run(go())
    assert [o.status for o in run.outcomes] == [ProbeStatus.SUCCESS, ProbeStatus.ERROR, ProbeStatus.FAILED]
    assert run.outcomes[1].error_category == ErrorCategory.TOO_MANY_REDIRECTS
    assert run.outcomes[1].status_code is None


def test_create_default_http_client_uses_settings():
    settings = ProbeSettings(timeout=3.0, concurrency=7, max_redirects=2)
    client = create_default_http_client(settings)
    try:
        assert isinstance(client, HttpxClient)
        assert client.settings is settings
        assert client._client.max_redirects == 2
        assert client._client.timeout.connect == 3.0
    finally:
        asyncio.run(client.aclose())


def test_stub_http_client_tracks_requests_and_defaults():
    stub = StubHttpClient()
    stub.add("http://a", HttpResponse(ok=True, status_code=200))

    async def go():
        first = await stub.request(HttpRequest(url="http://a"))
        missing = await stub.request(HttpRequest(url="http://b"))
        await stub.aclose()
        return first, missing

    first, missing = asyncio.run(go())
    assert first.status_code == 200
    assert missing.ok is False
    assert missing.status_code is None
    assert [r.url for r in stub.requests] == ["http://a", "http://b"]
    assert stub.max_in_flight == 1
    assert stub.closed is True


def test_http_response_fields():
    assert {field.name for field in dataclasses.fields(HttpResponse)} == {
        "ok",
        "status_code",
        "headers",
        "url",
        "redirects",
        "error_message",
        "error_type",
        "error_category",
    }
