# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URL helpers for playlist entries."""

from __future__ import annotations

import re
from urllib.parse import unquote, urlsplit, urlunsplit

_SCHEME_RE = re.compile(r"^[a-z][a-z0-9+.\-]*$", re.IGNORECASE)
_ALLOWED_CHARS_RE = re.compile(r"^[a-z0-9:/?#\[\]@!$&'()*+,;=.\-_~%]+$", re.IGNORECASE)
_WHITESPACE_RE = re.compile(r"\s")
_UNSAFE_FILENAME_RE = re.compile(r"[^a-z0-9]")

NETWORK_SCHEMES = frozenset({"http", "https", "rtmp", "rtmps", "rtsp", "rtp", "udp", "mms", "mmsh", "srt"})
DEFAULT_PORTS = {"http": "80", "https": "443", "rtsp": "554", "rtmp": "1935"}


def normalize_url(url: str) -> str:
    """
    Canonicalize a stream URL.

    Scheme and host are lowercased, default ports and fragments are dropped, a
    bare `/` path is removed, and the result is percent-decoded with any
    whitespace replaced by `+`.
    """
    raw = str(url or "").strip()
    if not raw:
        return ""
    try:
        parts = urlsplit(raw)
    except ValueError:
        return raw
    if not parts.scheme or not parts.netloc:
        return _WHITESPACE_RE.sub("+", unquote(raw))

    scheme = parts.scheme.lower()
    userinfo, sep, hostport = parts.netloc.rpartition("@")
    hostport = hostport.lower()
    default_port = DEFAULT_PORTS.get(scheme)
    if default_port and hostport.endswith(f":{default_port}"):
        hostport = hostport[: -len(default_port) - 1]
    netloc = f"{userinfo}{sep}{hostport}"
    path = "" if parts.path == "/" else parts.path

    normalized = urlunsplit((scheme, netloc, path, parts.query, ""))
    return _WHITESPACE_RE.sub("+", unquote(normalized))


def is_uri(value: str) -> bool:
    """Return True when `value` is a syntactically valid absolute URI."""
    raw = str(value or "")
    if not raw or _WHITESPACE_RE.search(raw) or not _ALLOWED_CHARS_RE.match(raw):
        return False
    try:
        parts = urlsplit(raw)
    except ValueError:
        return False
    if not parts.scheme or not _SCHEME_RE.match(parts.scheme):
        return False
    if parts.scheme.lower() in NETWORK_SCHEMES:
        try:
            return bool(parts.hostname)
        except ValueError:
            return False
    return bool(parts.netloc or parts.path)


def sanitize_filename(name: str) -> str:
    return _UNSAFE_FILENAME_RE.sub("-", str(name or "").lower())


__all__ = ["DEFAULT_PORTS", "NETWORK_SCHEMES", "is_uri", "normalize_url", "sanitize_filename"]
