# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Directory-backed store of `*.m3u` playlist documents."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from ..errors import PlaylistSourceError
from ..models.playlist import Playlist
from ..models.probe import ProbeTarget
from .parser import parse_playlist

logger = logging.getLogger(__name__)

PLAYLIST_GLOB = "*.m3u"


class PlaylistStore:
    """Reads and writes the playlists of one directory, in file-name order."""

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    def files(self) -> list[Path]:
        if not self.directory.is_dir():
            raise PlaylistSourceError(f"Playlist directory not found: {self.directory}")
        files = sorted(self.directory.glob(PLAYLIST_GLOB))
        logger.debug("Found %d playlist file(s) in %s", len(files), self.directory)
        return files

    def read(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise PlaylistSourceError(f"Unable to read playlist {path}: {exc}") from exc

    def load(self, path: Path) -> Playlist:
        return parse_playlist(self.read(path))

    def write(self, path: Path, content: str) -> None:
        # newline="" keeps the CRLF endings produced by the writer untouched.
        with path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(content)

    def playlists(self) -> Iterator[tuple[Path, Playlist]]:
        for path in self.files():
            yield path, self.load(path)

    def targets(self) -> list[ProbeTarget]:
        """
        Collect every entry of every playlist as a probe target.

        The whole list is read up front so a store failure surfaces before any
        probe is issued.
        """
        targets: list[ProbeTarget] = []
        for _, playlist in self.playlists():
            targets.extend(ProbeTarget(name=item.name, url=item.url) for item in playlist.items)
        return targets


__all__ = ["PLAYLIST_GLOB", "PlaylistStore"]
