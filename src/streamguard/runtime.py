# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level StreamGuard facade for liveness runs."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from dataclasses import replace

from .config import ProbeSettings, load_probe_settings
from .http.client import HttpClient, create_default_http_client
from .models import BatchRun, ProbeTarget
from .probe.prober import BatchProber
from .probe.progress import ProgressSink


class StreamGuard:
    """
    Convenience wrapper that wires settings, HTTP client and progress sink into a BatchProber.

    When no client is injected, a fresh httpx client is opened for each run and
    closed when the run ends, since async clients are bound to the event loop
    that created them.
    """

    def __init__(
        self,
        http_client: HttpClient | None = None,
        settings: ProbeSettings | None = None,
        progress: ProgressSink | None = None,
    ):
        self.settings = settings or load_probe_settings()
        self.http_client = http_client
        self.progress = progress

    async def probe(
        self,
        targets: Sequence[ProbeTarget],
        *,
        concurrency: int | None = None,
        timeout: float | None = None,
    ) -> BatchRun:
        # The connection pool must hold a full batch.
        settings = replace(
            self.settings,
            concurrency=self.settings.concurrency if concurrency is None else concurrency,
            timeout=self.settings.timeout if timeout is None else timeout,
        )
        client = self.http_client or create_default_http_client(settings)
        try:
            prober = BatchProber(client, settings, self.progress)
            return await prober.run(targets, concurrency=concurrency, per_request_timeout=timeout)
        finally:
            if self.http_client is None:
                await client.aclose()

    def check(
        self,
        targets: Sequence[ProbeTarget],
        *,
        concurrency: int | None = None,
        timeout: float | None = None,
    ) -> BatchRun:
        """Synchronous entry point for CLI use."""
        return asyncio.run(self.probe(targets, concurrency=concurrency, timeout=timeout))
