# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for StreamGuard."""

from ..http.models import Headers, HttpRequest, HttpResponse
from .playlist import GroupInfo, HttpInfo, Playlist, PlaylistItem, TvgInfo
from .probe import ProbeOutcome, ProbeStatus, ProbeTarget
from .run import BatchRun, RunSummary
from .validation import ValidationReport, ValidationResult

__all__ = [
    "BatchRun",
    "GroupInfo",
    "Headers",
    "HttpInfo",
    "HttpRequest",
    "HttpResponse",
    "Playlist",
    "PlaylistItem",
    "ProbeOutcome",
    "ProbeStatus",
    "ProbeTarget",
    "RunSummary",
    "TvgInfo",
    "ValidationReport",
    "ValidationResult",
]
