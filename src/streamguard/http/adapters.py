# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Deterministic HttpClient implementations for tests and offline runs."""

from __future__ import annotations

import asyncio

from .client import HttpClient
from .models import HttpRequest, HttpResponse


class StubHttpClient(HttpClient):
    """
    Programmable HttpClient for tests.

    Responses are keyed by URL. A stubbed exception is converted the same way
    the httpx client converts transport failures, and a stubbed delay lets
    tests simulate slow or hanging servers.
    """

    def __init__(
        self,
        responses: dict[str, HttpResponse | BaseException] | None = None,
        delays: dict[str, float] | None = None,
    ):
        self._responses = responses or {}
        self._delays = delays or {}
        self.requests: list[HttpRequest] = []
        self.in_flight = 0
        self.max_in_flight = 0
        self.closed = False

    def add(self, url: str, response: HttpResponse | BaseException, *, delay: float | None = None) -> None:
        self._responses[url] = response
        if delay is not None:
            self._delays[url] = delay

    async def request(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            delay = self._delays.get(request.url)
            if delay:
                await asyncio.sleep(delay)
            else:
                await asyncio.sleep(0)
            stubbed = self._responses.get(request.url)
            if stubbed is None:
                return HttpResponse(ok=False, status_code=None, error_message="No stubbed response configured")
            if isinstance(stubbed, BaseException):
                return HttpResponse.from_exception(stubbed)
            return stubbed
        finally:
            self.in_flight -= 1

    async def aclose(self) -> None:
        self.closed = True
