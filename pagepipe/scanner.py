# === FILE: pagepipe/scanner.py ===
"""
Wrapper that runs one discovery with the real network stack.
"""
from typing import Optional

from aiohttp import ClientSession

from pagepipe.config import DiscoveryConfig
from pagepipe.crawler.discovery import Discoverer
from pagepipe.crawler.fetcher import Fetcher
from pagepipe.crawler.models import DiscoveryResult
from pagepipe.crawler.sitemap import SitemapReader


async def start_discovery(url: str, cfg: Optional[DiscoveryConfig] = None) -> DiscoveryResult:
    """
    Open an aiohttp session, wire the fetcher and sitemap reader, and discover
    the pages reachable from *url*.

    Parameters
    ----------
    url : str
        Starting URL, with scheme and host.
    cfg : DiscoveryConfig, optional
        Discovery policy; defaults are used when omitted.

    Returns
    -------
    DiscoveryResult
        Canonical page URLs in discovery order.
    """
    cfg = cfg or DiscoveryConfig()
    async with ClientSession() as session:
        discoverer = Discoverer(
            fetcher=Fetcher(session, cfg),
            sitemap_reader=SitemapReader(session, cfg),
            config=cfg,
        )
        return await discoverer.discover(url)

__all__ = ["start_discovery"]
