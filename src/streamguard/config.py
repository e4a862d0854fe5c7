# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for StreamGuard."""

import os
from dataclasses import dataclass
from pathlib import Path

from .version import __version__

DEFAULT_USER_AGENT = f"StreamGuard/{__version__} (+playlist liveness checker)"

# Playlists are written with CRLF line endings.
EOL = "\r\n"


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class ProbeSettings:
    """Liveness probe defaults."""

    timeout: float = 5.0
    concurrency: int = 5
    max_redirects: int = 3
    method: str = "HEAD"
    user_agent: str = DEFAULT_USER_AGENT
    verify_ssl: bool = True

    @classmethod
    def from_env(cls) -> "ProbeSettings":
        """Create settings from environment variables (evaluated at call time)."""
        timeout = _float_env("STREAMGUARD_PROBE_TIMEOUT", cls.timeout)
        if timeout <= 0:
            timeout = cls.timeout
        concurrency = _int_env("STREAMGUARD_PROBE_CONCURRENCY", cls.concurrency)
        if concurrency < 1:
            concurrency = cls.concurrency
        max_redirects = _int_env("STREAMGUARD_PROBE_MAX_REDIRECTS", cls.max_redirects)
        if max_redirects < 0:
            max_redirects = cls.max_redirects
        method = (os.getenv("STREAMGUARD_PROBE_METHOD") or cls.method).strip().upper()
        return cls(
            timeout=timeout,
            concurrency=concurrency,
            max_redirects=max_redirects,
            method=method or cls.method,
            user_agent=os.getenv("STREAMGUARD_USER_AGENT", cls.user_agent),
            verify_ssl=_bool_env("STREAMGUARD_VERIFY_SSL", cls.verify_ssl),
        )


@dataclass
class PathSettings:
    """Filesystem locations used by the playlist commands."""

    root_dir: Path = Path("./")
    streams_dir: Path = Path("./streams")
    output_dir: Path = Path("./output")
    api_dir: Path = Path("./.api")

    @classmethod
    def from_env(cls) -> "PathSettings":
        return cls(
            root_dir=Path(os.getenv("ROOT_DIR") or cls.root_dir),
            streams_dir=Path(os.getenv("STREAMS_DIR") or cls.streams_dir),
            output_dir=Path(os.getenv("OUTPUT_DIR") or cls.output_dir),
            api_dir=Path(os.getenv("API_DIR") or cls.api_dir),
        )

    @property
    def readme_path(self) -> Path:
        return self.root_dir / "README.md"

    @property
    def stats_path(self) -> Path:
        return self.api_dir / "stats.json"


def load_probe_settings() -> ProbeSettings:
    """Load probe settings from environment with sensible defaults."""
    return ProbeSettings.from_env()


def load_path_settings() -> PathSettings:
    """Load directory settings from environment with sensible defaults."""
    return PathSettings.from_env()
