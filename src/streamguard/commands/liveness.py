# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe every stream of the store for liveness."""

from __future__ import annotations

import logging

from ..models.run import BatchRun
from ..playlist.store import PlaylistStore
from ..runtime import StreamGuard

logger = logging.getLogger(__name__)


def check_streams(
    store: PlaylistStore,
    *,
    guard: StreamGuard | None = None,
    concurrency: int | None = None,
    timeout: float | None = None,
) -> BatchRun:
    # Reading the store first makes a source failure fatal before any request is sent.
    targets = store.targets()
    logger.info("Testing %d stream(s) from %s", len(targets), store.directory)
    guard = guard or StreamGuard()
    return guard.check(targets, concurrency=concurrency, timeout=timeout)


__all__ = ["check_streams"]
