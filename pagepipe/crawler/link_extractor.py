# pagepipe/crawler/link_extractor.py
"""
Hyperlink extraction for PagePipe: turns the <a href> values of a fetched page
into absolute URLs.
"""
from __future__ import annotations

from typing import Iterator, Optional
from urllib.parse import urldefrag, urljoin

from bs4 import BeautifulSoup
from bs4.element import Tag

from pagepipe.crawler.models import PageData

_SKIPPED_PREFIXES = ("mailto:", "javascript:", "tel:", "#")


def resolve_href(href: str, base_url: str) -> Optional[str]:
    """
    Resolve one href value against *base_url*.

    Returns None for empty, fragment-only, mailto:, javascript: and tel: values,
    and for hrefs that cannot be parsed. The fragment of the result is removed.
    """
    raw = href.strip()
    if not raw or raw.startswith(_SKIPPED_PREFIXES):
        return None
    try:
        absolute = urljoin(base_url, raw)
        return urldefrag(absolute).url
    except ValueError:
        return None


def extract_links(page: PageData) -> Iterator[str]:
    """
    Yield absolute link targets of *page* in document order.

    Duplicates and cross-domain links are kept; filtering and dedup happen later.
    """
    soup = BeautifulSoup(page.content, "html.parser")
    for tag in soup.find_all("a", href=True):
        if not isinstance(tag, Tag):
            continue
        href_val = tag.get("href")
        if not isinstance(href_val, str):
            continue
        resolved = resolve_href(href_val, page.url)
        if resolved is not None:
            yield resolved
