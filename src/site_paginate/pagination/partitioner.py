"""
Module: pagination.partitioner

Purpose:
    Split an ordered item sequence into fixed-size pages.

Key Functions:
    - calculate_pages(): Page count for an item count
    - partition(): Build a Partition over a sequence

Key Classes:
    - Partition: Page count plus per-page slicing

Algorithm:
    total_pages = max(1, ceil(count / per_page))
    page n holds items[(n-1)*per_page : n*per_page]
    An empty sequence still yields one (empty) page.

Used By:
    - pagination.controller: paginate_site()
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Sequence


def calculate_pages(count: int, per_page: int) -> int:
    """
    Number of pages needed for ``count`` items.
    
    Examples:
        >>> calculate_pages(25, 10)
        3
        >>> calculate_pages(0, 10)
        1
    """
    if not isinstance(per_page, int) or isinstance(per_page, bool):
        raise ValueError(f"per_page must be an integer: {per_page!r}")
    if per_page <= 0:
        raise ValueError(f"per_page must be positive: {per_page}")
    if count < 0:
        raise ValueError(f"count must be non-negative: {count}")
    return max(1, math.ceil(count / per_page))


@dataclass(frozen=True)
class Partition:
    """
    Items split into pages (immutable).
    
    Attributes:
        items: All items, in display order
        per_page: Page size
        total_pages: Number of pages (at least 1)
    
    Example:
        >>> p = partition(list(range(25)), 10)
        >>> p.total_pages, len(p.page_of(3))
        (3, 5)
    """
    
    items: tuple[Any, ...]
    per_page: int
    total_pages: int
    
    @property
    def total_items(self) -> int:
        return len(self.items)
    
    def page_of(self, page_number: int) -> tuple[Any, ...]:
        """
        Items on page ``page_number`` (1-based).
        
        Raises:
            IndexError: If the page does not exist
        """
        if not 1 <= page_number <= self.total_pages:
            raise IndexError(f"Page {page_number} outside 1..{self.total_pages}")
        start = (page_number - 1) * self.per_page
        end = min(page_number * self.per_page, len(self.items))
        return self.items[start:end]
    
    def pages(self) -> list[tuple[Any, ...]]:
        """All page slices in order."""
        return [self.page_of(n) for n in range(1, self.total_pages + 1)]


def partition(items: Sequence[Any], per_page: int) -> Partition:
    """
    Partition items into pages of ``per_page``.
    
    Args:
        items: Items in display order (not re-sorted)
        per_page: Positive page size
        
    Returns:
        Partition over a snapshot of ``items``
        
    Raises:
        ValueError: If per_page is not positive
    """
    total_pages = calculate_pages(len(items), per_page)
    return Partition(items=tuple(items), per_page=per_page, total_pages=total_pages)
