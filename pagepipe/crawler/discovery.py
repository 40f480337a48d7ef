# === FILE: pagepipe/crawler/discovery.py ===
"""
Page discovery: sitemap first, breadth-first link crawl as the fallback.

The orchestrator owns no network code of its own. It is handed a
:class:`~pagepipe.crawler.fetcher.PageFetcher` and, optionally, a sitemap source,
so a real aiohttp client, a cache or a test stub can be swapped in freely.
"""
from __future__ import annotations

import asyncio
import time
from typing import List, Optional, Protocol
from urllib.parse import urlsplit

from aiohttp import ClientError
from bs4.builder import ParserRejectedMarkup

from pagepipe.config import DiscoveryConfig
from pagepipe.crawler.fetcher import PageFetcher
from pagepipe.crawler.frontier import Frontier
from pagepipe.crawler.link_extractor import extract_links
from pagepipe.crawler.models import DiscoveryResult, PageData
from pagepipe.crawler.rules import extract_host, is_same_domain, is_static_asset, normalize_url
from pagepipe.errors import FetchError, InvalidURLError, SitemapError
from pagepipe.logger import logger

__all__ = ("Discoverer", "SitemapSource")


class SitemapSource(Protocol):
    async def read(self, base_url: str) -> List[str]: ...


class Discoverer:
    """Finds the in-scope pages of a site, starting from one URL."""

    def __init__(
        self,
        fetcher: PageFetcher,
        sitemap_reader: Optional[SitemapSource] = None,
        config: Optional[DiscoveryConfig] = None,
    ) -> None:
        self.fetcher = fetcher
        self.sitemap_reader = sitemap_reader
        self.config = config or DiscoveryConfig()

    async def discover(self, start_url: str) -> DiscoveryResult:
        """
        Return the canonical, same-domain, non-asset URLs reachable from *start_url*.

        The sitemap result is used when it lists at least one in-scope page;
        otherwise the site is crawled breadth-first up to ``max_pages`` URLs.
        Per-page failures are skipped. Raises InvalidURLError if *start_url*
        has no usable scheme and host.
        """
        domain = self._target_domain(start_url)
        started = time.monotonic()

        urls = await self._from_sitemap(start_url)
        if urls:
            result = DiscoveryResult(start_url=start_url, source="sitemap", urls=tuple(urls))
        else:
            urls = await self._from_links(start_url, domain)
            result = DiscoveryResult(start_url=start_url, source="links", urls=tuple(urls))

        logger.info(
            "Discovered %d pages via %s in %.2f s",
            len(result), result.source, time.monotonic() - started,
        )
        return result

    async def _from_sitemap(self, start_url: str) -> List[str]:
        if self.sitemap_reader is None or not self.config.use_sitemap:
            return []
        try:
            urls = await self.sitemap_reader.read(start_url)
        except SitemapError as exc:
            logger.info("Sitemap unavailable, crawling links instead: %s", exc)
            return []
        if not urls:
            logger.info("Sitemap lists no in-scope pages, crawling links instead")
        return urls

    async def _from_links(self, start_url: str, domain: str) -> List[str]:
        frontier = Frontier()
        frontier.add(normalize_url(start_url))
        max_pages = self.config.max_pages

        while frontier.has_next() and frontier.visited_count < max_pages:
            url = frontier.next()
            page = await self._fetch(url)
            if page is None:
                continue
            for link in self._links(page):
                if frontier.visited_count >= max_pages:
                    break
                if is_same_domain(link, domain) and not is_static_asset(link):
                    frontier.add(normalize_url(link))

        logger.debug(
            "Link crawl finished: %d processed, %d visited",
            frontier.processed_count, frontier.visited_count,
        )
        return frontier.all()

    async def _fetch(self, url: str) -> Optional[PageData]:
        try:
            return await self.fetcher.fetch(url)
        except (FetchError, ClientError, asyncio.TimeoutError, OSError) as exc:
            logger.debug("Skipping %s: %s", url, exc)
            return None

    @staticmethod
    def _links(page: PageData) -> List[str]:
        try:
            return list(extract_links(page))
        except (ParserRejectedMarkup, TypeError, ValueError) as exc:
            logger.debug("No links extracted from %s: %s", page.url, exc)
            return []

    @staticmethod
    def _target_domain(start_url: str) -> str:
        try:
            parts = urlsplit(start_url)
        except ValueError as exc:
            raise InvalidURLError(start_url, str(exc)) from exc
        domain = extract_host(start_url)
        if not parts.scheme or not domain:
            raise InvalidURLError(start_url, "must include scheme and host, e.g. https://example.com")
        return domain
