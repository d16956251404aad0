"""
Module: pagination

Purpose:
    Split site content into pages for one or more pagination streams.

Key Functions:
    - paginate_site(): Main entry point
    - select(): Apply a stream filter
    - partition(): Split items into pages
    - build_pager(): Per-page navigation metadata
    - find_template(): Locate a stream's first page

Key Classes:
    - PaginationConfig: Configuration for a run
    - StreamConfig: One pagination stream
    - StreamFilter: Per-stream item filter
    - PaginationResult: Outcome of a run
"""

from .config import (
    ConfigurationError,
    PaginationConfig,
    StreamConfig,
    StreamFilter,
)
from .filters import exclude_hidden, is_hidden, matches, select
from .partitioner import Partition, calculate_pages, partition
from .pager import build_pager
from .locator import find_template, first_page_url, is_candidate
from .controller import PaginationResult, StreamResult, paginate_site

__all__ = [
    # Config
    "ConfigurationError",
    "PaginationConfig",
    "StreamConfig",
    "StreamFilter",
    # Filtering
    "exclude_hidden",
    "is_hidden",
    "matches",
    "select",
    # Partitioning
    "Partition",
    "calculate_pages",
    "partition",
    "build_pager",
    # Templates
    "find_template",
    "first_page_url",
    "is_candidate",
    # Controller
    "paginate_site",
    "PaginationResult",
    "StreamResult",
]
