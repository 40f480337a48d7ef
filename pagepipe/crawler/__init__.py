# pagepipe/crawler/__init__.py
"""Discovery crawler: URL rules, frontier, link extraction, sitemap and orchestration."""

from pagepipe.crawler.discovery import Discoverer
from pagepipe.crawler.fetcher import Fetcher, PageFetcher
from pagepipe.crawler.frontier import Frontier
from pagepipe.crawler.link_extractor import extract_links, resolve_href
from pagepipe.crawler.models import DiscoveryResult, PageData
from pagepipe.crawler.rules import is_same_domain, is_static_asset, normalize_url
from pagepipe.crawler.sitemap import SitemapReader

__all__ = [
    "Discoverer",
    "DiscoveryResult",
    "Fetcher",
    "Frontier",
    "PageData",
    "PageFetcher",
    "SitemapReader",
    "extract_links",
    "is_same_domain",
    "is_static_asset",
    "normalize_url",
    "resolve_href",
]
