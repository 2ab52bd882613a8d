"""HTML rendering for pages and fragments."""

from __future__ import annotations

from portfolio_site.rendering.helpers import TEMPLATE_HELPERS
from portfolio_site.rendering.renderer import FRAGMENTS, NAV_ITEMS, PAGES, ViewRenderer

__all__ = [
    "FRAGMENTS",
    "NAV_ITEMS",
    "PAGES",
    "TEMPLATE_HELPERS",
    "ViewRenderer",
]
