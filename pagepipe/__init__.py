# pagepipe/__init__.py
"""
PagePipe discovery package.
The CLI lives in :mod:`pagepipe.cli` (console script ``pagepipe``).
"""
__version__ = "0.1.0"

__all__ = ["__version__"]
