"""
Module: pagination.pager

Purpose:
    Build the Pager for one page of a stream.

Key Functions:
    - build_pager(): Compute navigation metadata for a page

Used By:
    - pagination.controller: paginate_site()
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

from site_paginate.core.models import Pager

from .config import ConfigurationError


def build_pager(
    stream_index: int,
    page_number: int,
    items: Sequence[Any],
    total_pages: int,
    per_page: int,
    *,
    total_items: Optional[int] = None,
    page_path: Optional[Callable[[int], str]] = None,
) -> Pager:
    """
    Create the Pager for ``page_number``.
    
    Args:
        stream_index: Stream the page belongs to
        page_number: 1-based page number
        items: Items shown on this page
        total_pages: Page count of the stream
        per_page: Configured page size
        total_items: Item count of the whole stream; defaults to len(items)
        page_path: Maps a page number to its URL, used for
            previous_page_path / next_page_path
        
    Returns:
        Pager for the page
        
    Raises:
        ConfigurationError: If page_number is outside 1..total_pages
    """
    if not 1 <= page_number <= total_pages:
        raise ConfigurationError(
            f"Page number {page_number} outside 1..{total_pages} for stream {stream_index}"
        )
    
    previous_page = page_number - 1 if page_number > 1 else None
    next_page = page_number + 1 if page_number < total_pages else None
    
    previous_page_path = None
    next_page_path = None
    if page_path is not None:
        if previous_page is not None:
            previous_page_path = page_path(previous_page)
        if next_page is not None:
            next_page_path = page_path(next_page)
    
    return Pager(
        stream_index=stream_index,
        page=page_number,
        per_page=per_page,
        items=tuple(items),
        total_items=len(items) if total_items is None else total_items,
        total_pages=total_pages,
        previous_page=previous_page,
        next_page=next_page,
        previous_page_path=previous_page_path,
        next_page_path=next_page_path,
    )
