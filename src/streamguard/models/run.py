# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Aggregate result of a batch probe run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .probe import ProbeOutcome, ProbeStatus


@dataclass(frozen=True)
class RunSummary:
    success_count: int
    failed_count: int
    total: int
    # None when nothing was probed.
    success_rate: float | None

    def format_rate(self) -> str:
        if self.success_rate is None:
            return "n/a"
        return f"{self.success_rate * 100:.1f}%"


@dataclass
class BatchRun:
    outcomes: list[ProbeOutcome] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def success_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status == ProbeStatus.SUCCESS)

    @property
    def failed_count(self) -> int:
        """Failed plus errored outcomes."""
        return self.total - self.success_count

    @property
    def success_rate(self) -> float | None:
        if not self.outcomes:
            return None
        return self.success_count / self.total

    @property
    def failures(self) -> list[ProbeOutcome]:
        return [outcome for outcome in self.outcomes if outcome.status != ProbeStatus.SUCCESS]

    def summary(self) -> RunSummary:
        return RunSummary(
            success_count=self.success_count,
            failed_count=self.failed_count,
            total=self.total,
            success_rate=self.success_rate,
        )

    def to_dict(self) -> dict[str, Any]:
        summary = self.summary()
        return {
            "summary": {
                "successCount": summary.success_count,
                "failedOrErrorCount": summary.failed_count,
                "total": summary.total,
                "successRate": summary.success_rate,
            },
            "results": [outcome.to_dict() for outcome in self.outcomes],
        }
