# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Structural validation of playlist files."""

from __future__ import annotations

import logging
from collections import Counter

from ..errors import PlaylistSourceError
from ..models.validation import ValidationReport, ValidationResult
from ..playlist.parser import HEADER_PREFIX, parse_playlist
from ..playlist.store import PlaylistStore
from ..playlist.urls import is_uri

logger = logging.getLogger(__name__)


def validate_content(file_name: str, content: str) -> ValidationResult:
    result = ValidationResult(file=file_name)

    if not content.lstrip("\ufeff").startswith(HEADER_PREFIX):
        result.add_error("Missing #EXTM3U header")

    playlist = parse_playlist(content)
    result.streams_count = len(playlist.items)
    url_counts = Counter(item.url.strip() for item in playlist.items if item.url.strip())

    for index, item in enumerate(playlist.items, start=1):
        if not item.name.strip():
            result.add_warning(f"Stream {index}: Missing title")

        url = item.url.strip()
        if not url:
            result.add_error(f"Stream {index}: Missing URL")
            continue
        if not is_uri(url):
            result.add_error(f"Stream {index}: Invalid URL format")

        if url_counts[url] > 1:
            result.add_warning(f"Stream {index}: Duplicate URL detected")

    return result


def validate_playlists(store: PlaylistStore) -> ValidationReport:
    report = ValidationReport()
    for path in store.files():
        try:
            result = validate_content(path.name, store.read(path))
        except PlaylistSourceError as exc:
            logger.warning("Could not validate %s: %s", path.name, exc)
            result = ValidationResult(file=path.name)
            result.add_error(f"Parse error: {exc}")
        report.results.append(result)
    return report


__all__ = ["validate_content", "validate_playlists"]
