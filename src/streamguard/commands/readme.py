# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Keep the statistics block of README.md in sync with `stats.json`."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from ..errors import StreamGuardError

logger = logging.getLogger(__name__)

STATS_MARKER = "## 📊 Statistics"
NEXT_SECTION = "\n## "


def format_updated_at(value: str) -> str:
    raw = str(value or "")
    try:
        moment = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError:
        return raw
    return moment.strftime("%Y-%m-%d %H:%M:%S %Z").strip()


def render_stats_section(stats: dict[str, Any]) -> str:
    categories = "\n".join(f"- **{c['name']}:** {c['count']} streams" for c in stats.get("categories") or [])
    return (
        f"{STATS_MARKER}\n"
        "\n"
        f"- **Total Streams:** {stats.get('totalStreams', 0)}\n"
        f"- **Total Categories:** {stats.get('totalCategories', 0)}\n"
        f"- **Total Playlists:** {stats.get('totalPlaylists', 0)}\n"
        f"- **Last Updated:** {format_updated_at(stats.get('generatedAt', ''))}\n"
        "\n"
        "### Categories\n"
        "\n"
        f"{categories}\n"
    )


def replace_stats_section(readme: str, section: str) -> str:
    """Replace the existing statistics block up to the next `## ` heading, or append one."""
    start = readme.find(STATS_MARKER)
    if start == -1:
        return f"{readme}\n\n{section}"
    end = readme.find(NEXT_SECTION, start + 1)
    if end == -1:
        return readme[:start] + section
    return readme[:start] + section + readme[end:]


def update_readme(stats_path: Path, readme_path: Path) -> dict[str, Any] | None:
    """
    Rewrite the statistics block of `readme_path`.

    Returns the stats that were applied, or None when `stats_path` does not
    exist yet (the API has not been generated).
    """
    if not stats_path.exists():
        logger.warning("No stats file at %s; generate the API first", stats_path)
        return None

    try:
        stats = json.loads(stats_path.read_text(encoding="utf-8"))
        readme = readme_path.read_text(encoding="utf-8")
    except (OSError, ValueError) as exc:
        raise StreamGuardError(f"Unable to update README: {exc}") from exc

    readme_path.write_text(replace_stats_section(readme, render_stats_section(stats)), encoding="utf-8")
    logger.info("Updated %s", readme_path)
    return stats


__all__ = ["STATS_MARKER", "format_updated_at", "render_stats_section", "replace_stats_section", "update_readme"]
