"""
Module: core.models.items

Purpose:
    Content records (posts) that pagination distributes across pages.
    The host owns these; pagination only reads them.

Key Classes:
    - ContentItem: Immutable post with arbitrary named fields

Dependencies:
    - dataclasses (std)

Used By:
    - pagination.filters: hidden exclusion and stream filters
    - core.models.pager: page item slices
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class ContentItem:
    """
    A single content item (immutable).
    
    Fields are free-form front matter values. Filters and the hidden flag
    read them through ``get`` so a plain dict works wherever a
    ContentItem does.
    
    Attributes:
        id: Identifier used in logs and reprs (e.g. the post slug)
        fields: Named values such as "category", "tags", "hidden"
    
    Example:
        >>> post = ContentItem("hello-world", {"category": "news"})
        >>> post.get("category")
        'news'
        >>> post.hidden
        False
    """
    
    id: str
    fields: Mapping[str, Any] = field(default_factory=dict)
    
    def get(self, name: str, default: Any = None) -> Any:
        """Return the value of field ``name`` or ``default``."""
        return self.fields.get(name, default)
    
    @property
    def hidden(self) -> bool:
        """True when the item is excluded from every pagination stream."""
        return bool(self.fields.get("hidden", False))
