# File: pagepipe/report/__init__.py
"""pagepipe.report: writers for discovery results, used by the CLI."""

from pagepipe.report.json_report import render_json

__all__ = ["render_json"]
