"""
Module: pagination.controller

Purpose:
    Paginate every configured stream of a site.
    Locate template → Filter → Partition → Build pagers → Register pages

Key Functions:
    - paginate_site(): Main entry point

Key Classes:
    - StreamResult: Outcome for one stream
    - PaginationResult: Outcome for the whole run

Dependencies:
    - pagination.locator: Template discovery
    - pagination.filters: Hidden exclusion and stream filters
    - pagination.partitioner: Page slicing
    - pagination.pager: Pager construction

Used By:
    - Host site generators, once per build
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence

from site_paginate.common.path_utils import page_url, paginated_directory
from site_paginate.core.models import OutputPage, Site

from .config import PaginationConfig, StreamConfig
from .filters import exclude_hidden, select
from .locator import find_template
from .pager import build_pager
from .partitioner import partition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StreamResult:
    """
    Pagination outcome for one stream (immutable).
    
    Attributes:
        index: Stream index
        template: Template page with the page 1 pager attached
            (None when skipped)
        pages: Every page of the stream, page 1 first
        skipped: True if no template page was found
        used_fallback: True if the filter matched nothing and the
            unfiltered items were paginated instead
    """
    index: int
    template: Optional[OutputPage]
    pages: tuple[OutputPage, ...] = ()
    skipped: bool = False
    used_fallback: bool = False
    
    @property
    def page_count(self) -> int:
        return len(self.pages)
    
    @property
    def new_pages(self) -> tuple[OutputPage, ...]:
        """Pages generated beyond the template (2..N)."""
        return self.pages[1:]


@dataclass(frozen=True)
class PaginationResult:
    """
    Pagination outcome for a site (immutable).
    
    Attributes:
        streams: One result per processed stream, in configured order
        warnings: Warning messages raised during the run
    """
    streams: tuple[StreamResult, ...] = ()
    warnings: tuple[str, ...] = ()
    
    @property
    def new_pages(self) -> tuple[OutputPage, ...]:
        """All generated pages in registration order."""
        return tuple(page for stream in self.streams for page in stream.new_pages)


def paginate_site(site: Site, config: PaginationConfig) -> PaginationResult:
    """
    Paginate the site's items for every configured stream.
    
    Page 1 of each stream is the stream's template page, swapped in the
    site's page list for a copy carrying its pager. Pages 2..N are clones
    of the template appended to the page list.
    
    Args:
        site: Host site; its page list is updated
        config: Pagination configuration
        
    Returns:
        PaginationResult describing each stream
        
    Raises:
        ConfigurationError: If pager construction detects an inconsistent
            page range
    """
    if not config.enabled:
        logger.debug("Pagination disabled")
        return PaginationResult()
    
    if not site.pages:
        logger.debug("Site has no pages, nothing to paginate")
        return PaginationResult()
    
    warnings: List[str] = []
    results: List[StreamResult] = []
    visible = exclude_hidden(site.items)
    
    for stream in config.streams:
        template = find_template(site.pages, stream)
        if template is None:
            message = (
                f"Pagination is enabled, but no index.html page was found to use as "
                f"the template for {stream.path_template!r}. Skipping stream {stream.index}."
            )
            logger.warning(message)
            warnings.append(message)
            results.append(StreamResult(index=stream.index, template=None, skipped=True))
            continue
        
        result = _paginate_stream(stream, template, visible, config.items_per_page)
        
        site.replace_page(template, result.template)
        for page in result.new_pages:
            site.add_page(page)
        
        logger.info(
            f"Paginated {result.template.pager.total_items} items for {stream.path_template!r} "
            f"onto {result.page_count} pages"
        )
        results.append(result)
    
    return PaginationResult(streams=tuple(results), warnings=tuple(warnings))


def _paginate_stream(
    stream: StreamConfig,
    template: OutputPage,
    visible: Sequence[Any],
    per_page: int,
) -> StreamResult:
    """
    Build every page of one stream without touching the site.
    
    Args:
        stream: Stream configuration
        template: Template page found for the stream
        visible: Site items with hidden ones removed
        per_page: Page size
        
    Returns:
        StreamResult with the attached template and the new pages
    """
    items = select(visible, stream.filter)
    used_fallback = False
    if not items:
        # A filter that matches nothing paginates the whole (visible) set.
        items = visible
        used_fallback = stream.filter is not None
        if used_fallback:
            logger.debug(
                f"Filter {stream.filter.name}={stream.filter.value!r} matched no items; "
                f"paginating all {len(visible)} visible items for stream {stream.index}"
            )
    
    parts = partition(items, per_page)
    page_path = _page_path_resolver(stream, template)
    
    pages: List[OutputPage] = []
    for page_number in range(1, parts.total_pages + 1):
        pager = build_pager(
            stream.index,
            page_number,
            parts.page_of(page_number),
            parts.total_pages,
            per_page,
            total_items=parts.total_items,
            page_path=page_path,
        )
        if page_number == 1:
            pages.append(template.attach(pager))
        else:
            directory = paginated_directory(stream.path_template, page_number)
            pages.append(template.clone_to(directory, pager))
    
    return StreamResult(
        index=stream.index,
        template=pages[0],
        pages=tuple(pages),
        used_fallback=used_fallback,
    )


def _page_path_resolver(stream: StreamConfig, template: OutputPage) -> Callable[[int], str]:
    """Map page numbers of a stream to their URLs."""
    def page_path(page_number: int) -> str:
        if page_number <= 1:
            return template.url
        return page_url(stream.path_template, page_number)
    return page_path
