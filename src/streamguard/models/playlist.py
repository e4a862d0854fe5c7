# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Parsed M3U playlist models."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class TvgInfo:
    id: str = ""
    name: str = ""
    logo: str = ""
    url: str = ""
    rec: str = ""


@dataclass
class GroupInfo:
    title: str = ""


@dataclass
class HttpInfo:
    referrer: str = ""
    user_agent: str = ""


@dataclass
class PlaylistItem:
    """One `#EXTINF` entry and the URL that follows it."""

    name: str = ""
    url: str = ""
    tvg: TvgInfo = field(default_factory=TvgInfo)
    group: GroupInfo = field(default_factory=GroupInfo)
    http: HttpInfo = field(default_factory=HttpInfo)
    raw: str = ""
    line: int = 0

    @property
    def category(self) -> str:
        return self.group.title or "Undefined"


@dataclass
class Playlist:
    header_attrs: dict[str, str] = field(default_factory=dict)
    items: list[PlaylistItem] = field(default_factory=list)
    has_header: bool = False

    def __len__(self) -> int:
        return len(self.items)
