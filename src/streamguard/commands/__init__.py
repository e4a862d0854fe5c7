# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Playlist, API and README commands."""

from .api import ApiDocuments, build_api, generate_api
from .format import format_playlists
from .generate import GenerateResult, generate_playlists, group_by_category
from .liveness import check_streams
from .readme import render_stats_section, replace_stats_section, update_readme
from .validate import validate_content, validate_playlists

__all__ = [
    "ApiDocuments",
    "GenerateResult",
    "build_api",
    "check_streams",
    "format_playlists",
    "generate_api",
    "generate_playlists",
    "group_by_category",
    "render_stats_section",
    "replace_stats_section",
    "update_readme",
    "validate_content",
    "validate_playlists",
]
