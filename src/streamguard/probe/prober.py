# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Concurrency-limited liveness prober.

Targets are split into consecutive batches of `concurrency` items. The probes
of one batch run concurrently and are all awaited before the next batch
starts, so at most `concurrency` requests are ever in flight and outcomes keep
the order of their targets. Each probe is bounded by its own timeout; a
transport failure becomes that target's `error` outcome and never aborts the
run. There are no retries.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Iterator, Sequence

from ..config import ProbeSettings, load_probe_settings
from ..errors import ErrorCategory, error_category_to_reason
from ..http.client import HttpClient
from ..http.models import HttpRequest, HttpResponse
from ..models.probe import ProbeOutcome, ProbeStatus, ProbeTarget
from ..models.run import BatchRun
from .progress import NullProgress, ProgressSink

logger = logging.getLogger(__name__)

SUCCESS_STATUS_MIN = 200
SUCCESS_STATUS_MAX = 400


def iter_batches(targets: Sequence[ProbeTarget], size: int) -> Iterator[Sequence[ProbeTarget]]:
    for start in range(0, len(targets), size):
        yield targets[start : start + size]


def classify_response(target: ProbeTarget, response: HttpResponse, *, elapsed: float = 0.0) -> ProbeOutcome:
    """Turn a normalized response into the outcome for `target`."""
    status_code = response.status_code
    if status_code is None:
        category = response.error_category
        if category == ErrorCategory.NONE:
            category = ErrorCategory.UNKNOWN_ERROR
        reason = error_category_to_reason(category)
        message = response.error_message
        error = f"{reason} ({message})" if message and message != reason else reason
        return ProbeOutcome(
            url=target.url,
            name=target.name,
            status=ProbeStatus.ERROR,
            error=error,
            error_category=category,
            elapsed=elapsed,
        )

    if SUCCESS_STATUS_MIN <= status_code < SUCCESS_STATUS_MAX:
        return ProbeOutcome(
            url=target.url,
            name=target.name,
            status=ProbeStatus.SUCCESS,
            status_code=status_code,
            elapsed=elapsed,
        )

    return ProbeOutcome(
        url=target.url,
        name=target.name,
        status=ProbeStatus.FAILED,
        status_code=status_code,
        error=f"HTTP {status_code}",
        elapsed=elapsed,
    )


class BatchProber:
    def __init__(
        self,
        http_client: HttpClient,
        settings: ProbeSettings | None = None,
        progress: ProgressSink | None = None,
    ):
        self.http_client = http_client
        self.settings = settings or load_probe_settings()
        self.progress = progress or NullProgress()

    async def probe(self, target: ProbeTarget, timeout: float) -> ProbeOutcome:
        request = HttpRequest(url=target.url, method=self.settings.method, timeout=timeout)
        started = time.monotonic()
        try:
            response = await asyncio.wait_for(self.http_client.request(request), timeout=timeout)
        except asyncio.TimeoutError:
            response = HttpResponse(
                ok=False,
                error_message=f"no response within {timeout:g}s",
                error_type="TimeoutError",
                error_category=ErrorCategory.TIMEOUT,
            )
        except Exception as exc:  # noqa: BLE001
            response = HttpResponse.from_exception(exc)
        return classify_response(target, response, elapsed=time.monotonic() - started)

    async def run(
        self,
        targets: Sequence[ProbeTarget],
        concurrency: int | None = None,
        per_request_timeout: float | None = None,
    ) -> BatchRun:
        width = self.settings.concurrency if concurrency is None else concurrency
        timeout = self.settings.timeout if per_request_timeout is None else per_request_timeout
        if width < 1:
            raise ValueError(f"concurrency must be >= 1, got {width}")
        if timeout <= 0:
            raise ValueError(f"per_request_timeout must be > 0, got {timeout}")

        targets = list(targets)
        run = BatchRun()
        self.progress.start(len(targets))
        try:
            for index, batch in enumerate(iter_batches(targets, width)):
                outcomes = await asyncio.gather(*(self.probe(target, timeout) for target in batch))
                run.outcomes.extend(outcomes)
                self.progress.advance(len(batch))
                logger.debug(
                    "Batch %d done: %d/%d probed",
                    index + 1,
                    len(run.outcomes),
                    len(targets),
                )
        finally:
            self.progress.close()

        logger.info(
            "Probed %d stream(s): %d ok, %d failed",
            run.total,
            run.success_count,
            run.failed_count,
        )
        return run


__all__ = ["BatchProber", "SUCCESS_STATUS_MAX", "SUCCESS_STATUS_MIN", "classify_response", "iter_batches"]
