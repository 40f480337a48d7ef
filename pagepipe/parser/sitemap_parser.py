# File: pagepipe/parser/sitemap_parser.py
"""pagepipe.parser.sitemap_parser: parsing sitemap.xml into a list of page URLs."""

from __future__ import annotations

from typing import List, Union

from lxml import etree

__all__ = ("parse_sitemap",)


def parse_sitemap(xml_content: Union[str, bytes]) -> List[str]:
    """Return the ``<loc>`` values of the ``<url>`` entries of a sitemap.

    Only direct ``url`` children of the root element are read, in any namespace,
    so a sitemap index (``<sitemap>`` entries) yields an empty list. Whitespace
    around each location is stripped and empty locations are skipped.

    Raises:
        lxml.etree.XMLSyntaxError: the document is not well-formed XML.

    Example:
    ```python
    from pagepipe.parser.sitemap_parser import parse_sitemap

    with open('sitemap.xml', 'rb') as f:
        urls = parse_sitemap(f.read())
    ```
    """
    if isinstance(xml_content, str):
        xml_content = xml_content.encode("utf-8")
    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    root = etree.fromstring(xml_content, parser=parser)
    urls: List[str] = []
    for entry in root.iterfind("{*}url"):
        loc = entry.find("{*}loc")
        if loc is not None and loc.text and loc.text.strip():
            urls.append(loc.text.strip())
    return urls
