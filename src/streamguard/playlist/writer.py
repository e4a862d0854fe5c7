# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Render playlists in canonical form."""

from __future__ import annotations

from collections.abc import Iterable

from ..config import EOL
from ..models.playlist import PlaylistItem

UNTITLED = "Untitled"


def render_extinf(item: PlaylistItem, *, default_title: str = UNTITLED) -> str:
    attrs = ["-1"]
    if item.tvg.id:
        attrs.append(f'tvg-id="{item.tvg.id}"')
    if item.tvg.name:
        attrs.append(f'tvg-name="{item.tvg.name}"')
    if item.tvg.logo:
        attrs.append(f'tvg-logo="{item.tvg.logo}"')
    if item.group.title:
        attrs.append(f'group-title="{item.group.title}"')
    return f"#EXTINF:{' '.join(attrs)},{item.name or default_title}"


def render_playlist(items: Iterable[PlaylistItem], *, eol: str = EOL, default_title: str = UNTITLED) -> str:
    """
    Return an `#EXTM3U` document with one `#EXTINF`/URL pair per item.

    Nameless items get `default_title`; pass an empty string to keep them blank.
    """
    lines = ["#EXTM3U"]
    for item in items:
        lines.append(render_extinf(item, default_title=default_title))
        lines.append(item.url)
    return eol.join(lines) + eol


__all__ = ["UNTITLED", "render_extinf", "render_playlist"]
