"""
Core Models Package

Frozen dataclasses for content items, pagers and output pages, plus the
mutable Site collection pagination writes into.
"""

from .items import ContentItem
from .pager import Pager
from .pages import OutputPage
from .site import Site

__all__ = [
    "ContentItem",
    "Pager",
    "OutputPage",
    "Site",
]
