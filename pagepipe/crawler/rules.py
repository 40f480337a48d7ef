# File: pagepipe/crawler/rules.py
"""pagepipe.crawler.rules: stateless URL filtering and canonicalisation helpers."""

from __future__ import annotations

from typing import FrozenSet, Optional, Sequence
from urllib.parse import urlsplit, urlunsplit

__all__: Sequence[str] = (
    "STATIC_EXTENSIONS",
    "normalize_url",
    "extract_host",
    "is_same_domain",
    "is_static_asset",
)

STATIC_EXTENSIONS: FrozenSet[str] = frozenset(
    {
        # images
        ".png", ".jpg", ".jpeg", ".gif", ".svg", ".webp", ".ico", ".bmp",
        # styles & scripts
        ".css", ".js", ".mjs",
        # fonts
        ".woff", ".woff2", ".ttf", ".eot",
        # media
        ".mp4", ".webm", ".mp3", ".wav",
        # archives
        ".zip", ".tar", ".gz",
        # documents
        ".pdf", ".doc", ".docx", ".xls", ".xlsx",
    }
)


def normalize_url(url: str) -> str:
    """Return the canonical form of *url*: no fragment, no trailing slash except for the root.

    Scheme and host are kept as written. Unparsable input is returned unchanged.
    """
    try:
        parts = urlsplit(url)
    except ValueError:
        return url
    path = parts.path
    if path != "/":
        path = path.rstrip("/")
    if not parts.netloc and path.startswith("//"):
        # urlunsplit drops the empty authority, which would turn the path into a host
        rebuilt = f"{parts.scheme}:" if parts.scheme else ""
        rebuilt += "//" + path
        if parts.query:
            rebuilt += "?" + parts.query
        return rebuilt
    return urlunsplit((parts.scheme, parts.netloc, path, parts.query, ""))


def extract_host(url: str) -> Optional[str]:
    """Host of *url* as compared by :func:`is_same_domain` (port kept, userinfo dropped)."""
    try:
        netloc = urlsplit(url).netloc
    except ValueError:
        return None
    return netloc.rpartition("@")[2]


def is_same_domain(url: str, domain: str) -> bool:
    """Exact host match: no case folding, no port or subdomain handling."""
    host = extract_host(url)
    return host is not None and host == domain


def is_static_asset(url: str) -> bool:
    """True when the path's extension marks *url* as a non-content resource."""
    try:
        path = urlsplit(url).path
    except ValueError:
        return False
    segment = path.rsplit("/", 1)[-1]
    dot = segment.rfind(".")
    if dot == -1:
        return False
    return segment[dot:].lower() in STATIC_EXTENSIONS
