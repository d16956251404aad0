"""
Module: pagination.locator

Purpose:
    Find the existing page that serves as page 1 (and layout template)
    of a pagination stream.

Key Functions:
    - is_candidate(): Name + directory hierarchy check
    - find_template(): Most specific candidate for a stream
    - first_page_url(): URL of a stream's first page

Algorithm:
    A page qualifies when it is an index document living in the stream's
    base directory or one of that directory's ancestors. Among qualifying
    pages the one with the longest path wins, so "/blog/index.html" beats
    "/index.html" for a "/blog/page:num" stream. Ties keep the first page
    in site order.

Used By:
    - pagination.controller: paginate_site()
"""

from __future__ import annotations

from typing import Iterable, Optional

from site_paginate.common.path_utils import INDEX_DOCUMENT, directory_hierarchy
from site_paginate.core.models import OutputPage

from .config import StreamConfig


def is_candidate(page: OutputPage, stream: StreamConfig) -> bool:
    """True if ``page`` may act as the template for ``stream``."""
    if page.name != INDEX_DOCUMENT:
        return False
    return page.directory in directory_hierarchy(stream.base_directory)


def find_template(pages: Iterable[OutputPage], stream: StreamConfig) -> Optional[OutputPage]:
    """
    Pick the template page for a stream.
    
    Args:
        pages: Site pages in registration order
        stream: Stream to find a template for
        
    Returns:
        The candidate with the longest path, or None if there is none
    """
    best: Optional[OutputPage] = None
    for page in pages:
        if not is_candidate(page, stream):
            continue
        if best is None or len(page.path) > len(best.path):
            best = page
    return best


def first_page_url(pages: Iterable[OutputPage], stream: StreamConfig) -> Optional[str]:
    """URL of the stream's first page, or None without a template."""
    template = find_template(pages, stream)
    return template.url if template else None
