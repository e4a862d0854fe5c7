# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Playlist validation report models."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ValidationResult:
    file: str
    valid: bool = True
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    streams_count: int = 0

    def add_error(self, message: str) -> None:
        self.errors.append(message)
        self.valid = False

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)


@dataclass
class ValidationReport:
    results: list[ValidationResult] = field(default_factory=list)

    @property
    def valid_count(self) -> int:
        return sum(1 for result in self.results if result.valid)

    @property
    def total_streams(self) -> int:
        return sum(result.streams_count for result in self.results)

    @property
    def total_errors(self) -> int:
        return sum(len(result.errors) for result in self.results)

    @property
    def total_warnings(self) -> int:
        return sum(len(result.warnings) for result in self.results)

    @property
    def ok(self) -> bool:
        return self.total_errors == 0
