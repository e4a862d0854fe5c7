# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Batch liveness probing."""

from .prober import BatchProber, classify_response, iter_batches
from .progress import NullProgress, ProgressSink, TqdmProgress

__all__ = [
    "BatchProber",
    "NullProgress",
    "ProgressSink",
    "TqdmProgress",
    "classify_response",
    "iter_batches",
]
