# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Static JSON API generated from the playlist store."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from ..models.playlist import PlaylistItem
from ..playlist.store import PlaylistStore

logger = logging.getLogger(__name__)

STREAMS_FILE = "streams.json"
CATEGORIES_FILE = "categories.json"
STATS_FILE = "stats.json"


@dataclass
class ApiDocuments:
    streams: dict[str, Any]
    categories: dict[str, Any]
    stats: dict[str, Any]


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC with millisecond precision and a `Z` suffix."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def stream_record(playlist_stem: str, index: int, item: PlaylistItem) -> dict[str, Any]:
    # Missing attributes are written as empty strings.
    return {
        "id": f"{playlist_stem}-{index}",
        "name": item.name,
        "url": item.url,
        "logo": item.tvg.logo,
        "group": item.group.title,
        "tvgId": item.tvg.id,
    }


def build_api(store: PlaylistStore, *, now: datetime | None = None) -> ApiDocuments:
    streams: list[dict[str, Any]] = []
    categories: dict[str, list[dict[str, Any]]] = {}
    playlist_count = 0

    for path, playlist in store.playlists():
        playlist_count += 1
        for index, item in enumerate(playlist.items):
            record = stream_record(path.stem, index, item)
            streams.append(record)
            categories.setdefault(item.category, []).append(record)

    category_docs = [{"name": name, "count": len(items), "streams": items} for name, items in categories.items()]
    return ApiDocuments(
        streams={"total": len(streams), "streams": streams},
        categories={"total": len(category_docs), "categories": category_docs},
        stats={
            "totalStreams": len(streams),
            "totalCategories": len(category_docs),
            "totalPlaylists": playlist_count,
            "categories": [{"name": doc["name"], "count": doc["count"]} for doc in category_docs],
            "generatedAt": format_timestamp(now or datetime.now(timezone.utc)),
        },
    )


def _write_json(path: Path, payload: dict[str, Any]) -> None:
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2, ensure_ascii=False)


def generate_api(store: PlaylistStore, api_dir: Path, *, now: datetime | None = None) -> ApiDocuments:
    api_dir.mkdir(parents=True, exist_ok=True)
    documents = build_api(store, now=now)
    _write_json(api_dir / STREAMS_FILE, documents.streams)
    _write_json(api_dir / CATEGORIES_FILE, documents.categories)
    _write_json(api_dir / STATS_FILE, documents.stats)
    logger.info("API written to %s", api_dir)
    return documents


__all__ = [
    "ApiDocuments",
    "CATEGORIES_FILE",
    "STATS_FILE",
    "STREAMS_FILE",
    "build_api",
    "format_timestamp",
    "generate_api",
    "stream_record",
]
