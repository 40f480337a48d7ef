# File: pagepipe/parser/__init__.py
"""pagepipe.parser: document parsers used by discovery."""

from pagepipe.parser.sitemap_parser import parse_sitemap

__all__ = ["parse_sitemap"]
