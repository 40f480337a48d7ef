# pagepipe/crawler/sitemap.py
"""
Sitemap reader: one bounded request for ``/sitemap.xml`` turned into a list of
canonical, in-domain page URLs.
"""
from __future__ import annotations

import asyncio
from typing import List
from urllib.parse import urlsplit, urlunsplit

from aiohttp import ClientError, ClientSession, ClientTimeout
from lxml import etree

from pagepipe.config import DiscoveryConfig
from pagepipe.crawler.rules import extract_host, is_same_domain, is_static_asset, normalize_url
from pagepipe.errors import SitemapError
from pagepipe.logger import logger
from pagepipe.parser.sitemap_parser import parse_sitemap

__all__ = ("SitemapReader", "sitemap_url")


def sitemap_url(base_url: str, sitemap_path: str = "/sitemap.xml") -> str:
    """``{scheme}://{host}{sitemap_path}`` for the site of *base_url*."""
    parts = urlsplit(base_url)
    return urlunsplit((parts.scheme, extract_host(base_url) or "", sitemap_path, "", ""))


class SitemapReader:
    """Reads the sitemap of a site through an aiohttp session."""

    def __init__(self, session: ClientSession, config: DiscoveryConfig) -> None:
        self.session = session
        self.config = config

    async def read(self, base_url: str) -> List[str]:
        """
        Return the normalized same-domain, non-asset URLs listed in the sitemap.

        An empty list is a valid result. Raises SitemapError when the request
        fails, times out, answers with a non-2xx status, or the body is not XML.
        """
        location = sitemap_url(base_url, self.config.sitemap_path)
        domain = extract_host(base_url) or ""
        timeout = ClientTimeout(total=self.config.sitemap_timeout)
        try:
            async with self.session.get(
                location,
                headers={"User-Agent": self.config.user_agent},
                timeout=timeout,
                raise_for_status=False,
            ) as resp:
                if not 200 <= resp.status < 300:
                    raise SitemapError(f"{location} returned HTTP {resp.status}")
                body = await resp.read()
        except asyncio.TimeoutError as exc:
            raise SitemapError(f"{location} timed out") from exc
        except ClientError as exc:
            raise SitemapError(f"{location}: {exc}") from exc

        try:
            candidates = parse_sitemap(body)
        except (etree.XMLSyntaxError, ValueError) as exc:
            raise SitemapError(f"{location} is not valid XML: {exc}") from exc

        urls = [
            normalize_url(u)
            for u in candidates
            if is_same_domain(u, domain) and not is_static_asset(u)
        ]
        logger.debug(
            "Sitemap %s: %d entries, %d in scope", location, len(candidates), len(urls)
        )
        return urls
