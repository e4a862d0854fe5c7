# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Build the master playlist and one playlist per category."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from ..models.playlist import PlaylistItem
from ..playlist.store import PlaylistStore
from ..playlist.urls import normalize_url, sanitize_filename
from ..playlist.writer import render_playlist

logger = logging.getLogger(__name__)

MASTER_PLAYLIST_NAME = "index.m3u"


@dataclass
class GenerateResult:
    master_path: Path
    total_streams: int = 0
    categories: dict[str, int] = field(default_factory=dict)
    written: list[Path] = field(default_factory=list)


def group_by_category(items: Iterable[PlaylistItem]) -> dict[str, list[PlaylistItem]]:
    """Group items by `group-title` in first-seen order; untitled items go to `Undefined`."""
    groups: dict[str, list[PlaylistItem]] = {}
    for item in items:
        groups.setdefault(item.category, []).append(item)
    return groups


def generate_playlists(store: PlaylistStore, output_dir: Path) -> GenerateResult:
    output_dir.mkdir(parents=True, exist_ok=True)

    streams: list[PlaylistItem] = []
    for path, playlist in store.playlists():
        logger.info("Processing %s (%d streams)", path.name, len(playlist.items))
        for item in playlist.items:
            item.url = normalize_url(item.url)
            streams.append(item)

    master_path = output_dir / MASTER_PLAYLIST_NAME
    store.write(master_path, render_playlist(streams, default_title=""))
    result = GenerateResult(master_path=master_path, total_streams=len(streams), written=[master_path])

    for category, items in group_by_category(streams).items():
        category_path = output_dir / f"{sanitize_filename(category)}.m3u"
        store.write(category_path, render_playlist(items, default_title=""))
        result.categories[category] = len(items)
        result.written.append(category_path)
        logger.debug("Wrote %s (%d streams)", category_path, len(items))

    return result


__all__ = ["GenerateResult", "MASTER_PLAYLIST_NAME", "generate_playlists", "group_by_category"]
