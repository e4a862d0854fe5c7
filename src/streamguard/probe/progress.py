# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Progress sinks advanced by the batch prober."""

from __future__ import annotations

from typing import Protocol, TextIO

from tqdm import tqdm


class ProgressSink(Protocol):
    def start(self, total: int) -> None: ...

    def advance(self, count: int) -> None: ...

    def close(self) -> None: ...


class NullProgress(ProgressSink):
    def start(self, total: int) -> None:
        return None

    def advance(self, count: int) -> None:
        return None

    def close(self) -> None:
        return None


class TqdmProgress(ProgressSink):
    """Terminal progress bar counting probed streams."""

    def __init__(self, *, desc: str = "Progress", unit: str = "streams", file: TextIO | None = None, disable: bool = False):
        self.desc = desc
        self.unit = unit
        self.file = file
        self.disable = disable
        self._bar: tqdm | None = None

    def start(self, total: int) -> None:
        self._bar = tqdm(total=total, desc=self.desc, unit=f" {self.unit}", file=self.file, disable=self.disable)

    def advance(self, count: int) -> None:
        if self._bar is not None:
            self._bar.update(count)

    def close(self) -> None:
        if self._bar is not None:
            self._bar.close()
            self._bar = None


__all__ = ["NullProgress", "ProgressSink", "TqdmProgress"]
