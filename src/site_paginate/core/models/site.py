"""
Module: core.models.site

Purpose:
    Minimal host site: the ordered content items and the page collection
    pagination reads from and registers pages into.

Key Classes:
    - Site: Items plus a mutable page list

Used By:
    - pagination.controller: paginate_site()
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Sequence

from .pages import OutputPage


@dataclass
class Site:
    """
    Content and pages of one site build.
    
    Attributes:
        items: Content items in display order (newest first for a blog)
        pages: Output pages; pagination replaces templates and appends
            new pages here
    """
    
    items: Sequence[Any] = field(default_factory=tuple)
    pages: List[OutputPage] = field(default_factory=list)
    
    def replace_page(self, old: OutputPage, new: OutputPage) -> None:
        """Swap ``old`` for ``new`` keeping its position in the page list.
        
        Raises:
            ValueError: If ``old`` is not registered with the site
        """
        for i, page in enumerate(self.pages):
            if page is old:
                self.pages[i] = new
                return
        raise ValueError(f"Page not registered with site: {old.path}")
    
    def add_page(self, page: OutputPage) -> None:
        """Register a newly generated page."""
        self.pages.append(page)
