# urlshort/__init__.py
"""
Path -> URL redirect service.

Run with:
    urlshort serve --config data/map.json
"""

from .main import build_resolver, create_app

__all__ = ["build_resolver", "create_app"]
