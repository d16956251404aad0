"""
Module: pagination.filters

Purpose:
    Decide which content items belong to a pagination stream.

Key Functions:
    - is_hidden(): Read an item's hidden flag
    - exclude_hidden(): Drop items flagged hidden
    - matches(): Test one item against a stream filter
    - select(): Apply a stream filter to a sequence of items

Dependencies:
    - pagination.config: StreamFilter

Used By:
    - pagination.controller: candidate item sets per stream
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from .config import StreamFilter

logger = logging.getLogger(__name__)


def is_hidden(item: Any) -> bool:
    """
    Read an item's hidden flag.
    
    Prefers a ``hidden`` attribute (ContentItem) and falls back to the
    "hidden" field of mapping-style items such as plain dicts.
    """
    hidden = getattr(item, "hidden", None)
    if hidden is None:
        hidden = item.get("hidden")
    return bool(hidden)


def exclude_hidden(items: Sequence[Any]) -> list[Any]:
    """Items that are not hidden, order preserved."""
    visible = [item for item in items if not is_hidden(item)]
    if len(visible) != len(items):
        logger.debug(f"Excluded {len(items) - len(visible)} hidden items")
    return visible


def matches(item: Any, stream_filter: StreamFilter) -> bool:
    """
    Check whether an item passes a stream filter.
    
    An unset field (missing, None or False) never matches.
    
    Args:
        item: Object with a mapping-style ``get`` (ContentItem or dict)
        stream_filter: Filter to test against
        
    Returns:
        True if the item's field value is accepted by the filter
    """
    value = item.get(stream_filter.name)
    if value is None or value is False:
        return False
    return stream_filter.accepts(value)


def select(items: Sequence[Any], stream_filter: Optional[StreamFilter]) -> Sequence[Any]:
    """
    Apply a stream filter.
    
    Args:
        items: Candidate items in display order
        stream_filter: Filter for the stream, or None
        
    Returns:
        ``items`` itself when there is no filter, otherwise a new list of
        the matching items in their original order (possibly empty)
    """
    if stream_filter is None:
        return items
    
    selected = [item for item in items if matches(item, stream_filter)]
    logger.debug(
        f"Filter {stream_filter.name}={stream_filter.value!r}: "
        f"{len(selected)}/{len(items)} items selected"
    )
    return selected
