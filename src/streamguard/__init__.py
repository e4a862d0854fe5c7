# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
StreamGuard package entrypoint.

This package reads M3U playlists describing IPTV streams and derives
artifacts from them: canonical playlists, per-category playlists, a static
JSON API, validation reports and README statistics. Its core is a batch
prober that checks stream liveness with bounded parallelism. HTTP behavior is
abstracted behind an injectable async client interface, and domain objects
are modeled with typed dataclasses.
"""

from .config import PathSettings, ProbeSettings, load_path_settings, load_probe_settings
from .errors import ErrorCategory, PlaylistSourceError, StreamGuardError
from .http import (
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    StubHttpClient,
    create_default_http_client,
)
from .log import setup_logging
from .models import BatchRun, Playlist, PlaylistItem, ProbeOutcome, ProbeStatus, ProbeTarget
from .playlist import PlaylistStore, parse_playlist, render_playlist
from .probe import BatchProber, NullProgress, ProgressSink, TqdmProgress
from .runtime import StreamGuard
from .version import __version__

__all__ = [
    "BatchProber",
    "BatchRun",
    "ErrorCategory",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpxClient",
    "NullProgress",
    "PathSettings",
    "Playlist",
    "PlaylistItem",
    "PlaylistSourceError",
    "PlaylistStore",
    "ProbeOutcome",
    "ProbeSettings",
    "ProbeStatus",
    "ProbeTarget",
    "ProgressSink",
    "StreamGuard",
    "StreamGuardError",
    "StubHttpClient",
    "TqdmProgress",
    "create_default_http_client",
    "load_path_settings",
    "load_probe_settings",
    "parse_playlist",
    "render_playlist",
    "setup_logging",
    "__version__",
]
