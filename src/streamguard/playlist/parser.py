# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Tolerant M3U/M3U8 playlist parser."""

from __future__ import annotations

import re

from ..models.playlist import Playlist, PlaylistItem

HEADER_PREFIX = "#EXTM3U"
EXTINF_PREFIX = "#EXTINF:"
EXTGRP_PREFIX = "#EXTGRP:"
EXTVLCOPT_PREFIX = "#EXTVLCOPT:"
ATTR_RE = re.compile(r'([\w\-]+)="([^"]*)"')


def parse_attributes(line: str) -> dict[str, str]:
    """Return the `key="value"` pairs of an `#EXTM3U` or `#EXTINF` line."""
    return {key.lower(): value.strip() for key, value in ATTR_RE.findall(line)}


def _split_title(extinf: str) -> str:
    # The title follows the first comma that is not inside a quoted attribute value.
    in_quotes = False
    for index, char in enumerate(extinf):
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            return extinf[index + 1 :].strip()
    return ""


def _apply_vlc_option(item: PlaylistItem, option: str) -> None:
    key, _, value = option.partition("=")
    key = key.strip().lower()
    if key == "http-referrer":
        item.http.referrer = value.strip()
    elif key == "http-user-agent":
        item.http.user_agent = value.strip()


def parse_extinf(line: str, line_number: int = 0) -> PlaylistItem:
    attrs = parse_attributes(line)
    item = PlaylistItem(name=_split_title(line), raw=line, line=line_number)
    item.tvg.id = attrs.get("tvg-id", "")
    item.tvg.name = attrs.get("tvg-name", "")
    item.tvg.logo = attrs.get("tvg-logo", "")
    item.tvg.url = attrs.get("tvg-url", "")
    item.tvg.rec = attrs.get("tvg-rec", "")
    item.group.title = attrs.get("group-title", "")
    item.http.referrer = attrs.get("http-referrer", "")
    item.http.user_agent = attrs.get("http-user-agent", attrs.get("user-agent", ""))
    return item


def parse_playlist(text: str) -> Playlist:
    """
    Parse M3U text into a Playlist.

    Entries are `#EXTINF` lines followed, possibly after other directives, by
    the stream URL. An entry with no URL before the next `#EXTINF` (or the end
    of the document) is kept with an empty URL so validation can report it.
    URL lines without a preceding `#EXTINF` are ignored.
    """
    playlist = Playlist()
    pending: PlaylistItem | None = None
    raw_lines: list[str] = []

    for number, raw in enumerate(text.lstrip("\ufeff").splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue

        if line.upper().startswith(HEADER_PREFIX) and not playlist.items and pending is None:
            playlist.has_header = True
            playlist.header_attrs = parse_attributes(line)
            continue

        if line.upper().startswith(EXTINF_PREFIX):
            if pending is not None:
                pending.raw = "\n".join(raw_lines)
                playlist.items.append(pending)
            pending = parse_extinf(line, number)
            raw_lines = [line]
            continue

        if pending is None:
            continue

        raw_lines.append(line)
        if line.startswith("#"):
            upper = line.upper()
            if upper.startswith(EXTGRP_PREFIX) and not pending.group.title:
                pending.group.title = line[len(EXTGRP_PREFIX) :].strip()
            elif upper.startswith(EXTVLCOPT_PREFIX):
                _apply_vlc_option(pending, line[len(EXTVLCOPT_PREFIX) :])
            continue

        pending.url = line
        pending.raw = "\n".join(raw_lines)
        playlist.items.append(pending)
        pending = None
        raw_lines = []

    if pending is not None:
        pending.raw = "\n".join(raw_lines)
        playlist.items.append(pending)

    return playlist


__all__ = ["parse_attributes", "parse_extinf", "parse_playlist"]
