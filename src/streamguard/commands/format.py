# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Rewrite every playlist of the store in canonical form."""

from __future__ import annotations

import logging

from ..playlist.store import PlaylistStore
from ..playlist.urls import normalize_url
from ..playlist.writer import render_playlist

logger = logging.getLogger(__name__)


def format_playlists(store: PlaylistStore) -> dict[str, int]:
    """Format playlists in place; returns the stream count per file name."""
    formatted: dict[str, int] = {}
    for path, playlist in store.playlists():
        for item in playlist.items:
            item.url = normalize_url(item.url)
        store.write(path, render_playlist(playlist.items))
        formatted[path.name] = len(playlist.items)
        logger.info("Formatted %s (%d streams)", path.name, len(playlist.items))
    return formatted


__all__ = ["format_playlists"]
