# pagepipe/crawler/fetcher.py
"""
Fetcher module: the page-fetch capability used by the link crawl.

:class:`PageFetcher` is the contract the orchestrator depends on; :class:`Fetcher`
is the aiohttp implementation with timeout and retry/backoff.
"""
from __future__ import annotations

import asyncio
from typing import Protocol, Sequence, runtime_checkable

from aiohttp import ClientError, ClientSession, ClientTimeout

from pagepipe.config import DiscoveryConfig
from pagepipe.crawler.models import PageData
from pagepipe.errors import FetchError
from pagepipe.logger import logger

__all__ = ("PageFetcher", "Fetcher", "RETRY_STATUS", "ACCEPT_HEADER")

RETRY_STATUS: Sequence[int] = tuple(range(500, 600)) + (429,)
ACCEPT_HEADER = "text/html,application/xhtml+xml"


class _Retry(Exception):
    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status


@runtime_checkable
class PageFetcher(Protocol):
    """Anything that can turn a URL into a :class:`PageData`.

    Implementations raise :class:`~pagepipe.errors.FetchError` for a page that
    cannot be retrieved; the crawl skips it and moves on.
    """

    async def fetch(self, url: str) -> PageData: ...


class Fetcher:
    """Fetches pages over a shared aiohttp session."""

    def __init__(self, session: ClientSession, config: DiscoveryConfig) -> None:
        self.session = session
        self.config = config
        self._timeout = ClientTimeout(total=config.fetch_timeout)
        self._headers = {"User-Agent": config.user_agent, "Accept": ACCEPT_HEADER}

    async def fetch(self, url: str) -> PageData:
        """
        GET *url* and return its decoded body.

        Responses with status 429 or 5xx are retried ``retry_times`` times with
        exponential backoff; any other non-2xx status, a timeout or a transport
        error raises FetchError.
        """
        attempts = 0
        while True:
            try:
                async with self.session.get(
                    url, headers=self._headers, timeout=self._timeout, raise_for_status=False
                ) as resp:
                    if resp.status in RETRY_STATUS and attempts < self.config.retry_times:
                        raise _Retry(resp.status)
                    if not 200 <= resp.status < 300:
                        raise FetchError(url, f"unexpected status {resp.status}", status=resp.status)
                    text = await resp.text(errors="replace")
                    return PageData(url=url, content=text, status=resp.status)
            except _Retry as retry:
                attempts += 1
                # exponential backoff, cap at 60s
                delay = min(self.config.retry_backoff * 2 ** (attempts - 1), 60)
                logger.debug(
                    "Retry %d/%d for %s after HTTP %d (%.2f s)",
                    attempts, self.config.retry_times, url, retry.status, delay,
                )
                await asyncio.sleep(delay)
            except asyncio.TimeoutError as exc:
                raise FetchError(url, "timed out") from exc
            except ClientError as exc:
                raise FetchError(url, str(exc) or type(exc).__name__) from exc
