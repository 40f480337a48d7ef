# File: pagepipe/errors.py
"""pagepipe.errors: exception hierarchy of the discovery subsystem.

Only :class:`InvalidURLError` ever escapes :meth:`Discoverer.discover`;
the others are raised by collaborators and recovered inside the orchestrator.
"""
from __future__ import annotations

from typing import Optional

__all__ = ("PagePipeError", "InvalidURLError", "SitemapError", "FetchError")


class PagePipeError(Exception):
    """Base class for all PagePipe errors."""


class InvalidURLError(PagePipeError, ValueError):
    """The starting URL cannot be parsed or has no scheme/host."""

    def __init__(self, url: str, reason: str = "") -> None:
        self.url = url
        msg = f"invalid URL: {url!r}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


class SitemapError(PagePipeError):
    """sitemap.xml is unreachable, returned a non-2xx status or is not valid XML."""


class FetchError(PagePipeError):
    """A single page could not be fetched."""

    def __init__(self, url: str, reason: str, status: Optional[int] = None) -> None:
        self.url = url
        self.status = status
        super().__init__(f"fetching {url}: {reason}")
