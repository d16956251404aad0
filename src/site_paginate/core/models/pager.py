"""
Module: core.models.pager

Purpose:
    Navigation metadata for one page of one pagination stream.

Key Classes:
    - Pager: Immutable per-page value attached to an OutputPage

Dependencies:
    - dataclasses (std)

Used By:
    - pagination.pager: build_pager()
    - core.models.pages: OutputPage.pager
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Pager:
    """
    Navigation state for a single page (immutable).
    
    Attributes:
        stream_index: Index of the stream in the configured path list
        page: Page number (1-based)
        per_page: Configured items per page
        items: Items shown on this page, in display order
        total_items: Item count across the whole stream
        total_pages: Page count of the stream
        previous_page: Previous page number, None on page 1
        next_page: Next page number, None on the last page
        previous_page_path: URL of the previous page, if known
        next_page_path: URL of the next page, if known
    
    Invariants:
        - 1 <= page <= total_pages
        - len(items) <= per_page
    
    Example:
        >>> pager = Pager(stream_index=0, page=2, per_page=10, items=(),
        ...               total_items=25, total_pages=3, previous_page=1, next_page=3)
        >>> pager.page, pager.total_pages, pager.next_page
        (2, 3, 3)
    """
    
    stream_index: int
    page: int
    per_page: int
    items: tuple[Any, ...]
    total_items: int
    total_pages: int
    previous_page: Optional[int] = None
    next_page: Optional[int] = None
    previous_page_path: Optional[str] = None
    next_page_path: Optional[str] = None
    
    @property
    def is_first(self) -> bool:
        """True for page 1."""
        return self.previous_page is None
    
    @property
    def is_last(self) -> bool:
        """True for the final page of the stream."""
        return self.next_page is None
    
    def to_payload(self) -> dict[str, Any]:
        """
        Template-facing view of the pager.
        
        Keys match the "paginator" variable layouts expect, so items are
        exposed as "posts".
        """
        return {
            "page": self.page,
            "per_page": self.per_page,
            "posts": list(self.items),
            "total_posts": self.total_items,
            "total_pages": self.total_pages,
            "previous_page": self.previous_page,
            "previous_page_path": self.previous_page_path,
            "next_page": self.next_page,
            "next_page_path": self.next_page_path,
        }
