# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for StreamGuard."""

from __future__ import annotations

import logging
import os

DEFAULT_LOG_LEVEL = os.getenv("STREAMGUARD_LOG_LEVEL", "WARNING").upper()

# httpx/httpcore log one INFO line per request; a playlist run issues thousands.
TRANSPORT_LOGGERS = ("httpx", "httpcore")


def resolve_level(level: str | None = None) -> int:
    name = (level or DEFAULT_LOG_LEVEL).upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.WARNING


def setup_logging(level: str | None = None) -> int:
    """
    Configure standard logging for CLI/library use.

    Transport loggers stay at WARNING unless DEBUG is requested. Returns the
    effective level.
    """
    effective = resolve_level(level)
    logging.basicConfig(level=effective, format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("streamguard").setLevel(effective)
    transport_level = effective if effective <= logging.DEBUG else max(effective, logging.WARNING)
    for name in TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)
    return effective


__all__ = ["TRANSPORT_LOGGERS", "resolve_level", "setup_logging"]
