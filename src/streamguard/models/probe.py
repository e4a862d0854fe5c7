# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe target/outcome models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..errors import ErrorCategory


class ProbeStatus(str, Enum):
    SUCCESS = "success"
    FAILED = "failed"
    ERROR = "error"


@dataclass(frozen=True)
class ProbeTarget:
    name: str
    url: str


@dataclass
class ProbeOutcome:
    """
    Result of probing one target.

    `status_code` is set exactly when the probe completed (`success` or
    `failed`); `error` holds a readable cause for `failed` and `error`.
    """

    url: str
    name: str
    status: ProbeStatus
    status_code: int | None = None
    error: str | None = None
    error_category: ErrorCategory = ErrorCategory.NONE
    elapsed: float = 0.0

    @property
    def ok(self) -> bool:
        return self.status == ProbeStatus.SUCCESS

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "url": self.url,
            "name": self.name,
            "status": self.status.value,
        }
        if self.status_code is not None:
            data["statusCode"] = self.status_code
        if self.error:
            data["error"] = self.error
        if self.error_category != ErrorCategory.NONE:
            data["errorCategory"] = self.error_category.value
        return data
