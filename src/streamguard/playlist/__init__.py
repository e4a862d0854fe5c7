# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""M3U reading, writing and storage."""

from .parser import parse_attributes, parse_extinf, parse_playlist
from .store import PlaylistStore
from .urls import is_uri, normalize_url, sanitize_filename
from .writer import render_extinf, render_playlist

__all__ = [
    "PlaylistStore",
    "is_uri",
    "normalize_url",
    "parse_attributes",
    "parse_extinf",
    "parse_playlist",
    "render_extinf",
    "render_playlist",
    "sanitize_filename",
]
