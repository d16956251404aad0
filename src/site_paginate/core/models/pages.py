"""
Module: core.models.pages

Purpose:
    Output pages produced by the site build. Page 1 of a stream is an
    existing page (the template); later pages are clones of it.

Key Classes:
    - OutputPage: Immutable page record identified by directory + name

Dependencies:
    - dataclasses (std)
    - common.path_utils: site path normalization

Used By:
    - pagination.locator: template discovery
    - pagination.controller: attaching pagers and cloning pages
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import PurePosixPath
from typing import Any, Mapping, Optional

from site_paginate.common.path_utils import INDEX_DOCUMENT, normalize_directory

from .pager import Pager


@dataclass(frozen=True)
class OutputPage:
    """
    A page of the generated site (immutable).
    
    Attaching a pager or moving the page produces a new record; the
    orchestrator swaps records in the site's page list instead of
    mutating them.
    
    Attributes:
        directory: Site-relative directory, normalized to "/a/b" form
        name: File name, e.g. "index.html"
        content: Unrendered page body
        data: Front matter values
        pager: Pager attached during pagination, if any
    
    Example:
        >>> page = OutputPage("/blog", "index.html")
        >>> page.path
        '/blog/index.html'
        >>> page.url
        '/blog/'
    """
    
    directory: str
    name: str
    content: str = ""
    data: Mapping[str, Any] = field(default_factory=dict)
    pager: Optional[Pager] = None
    
    def __post_init__(self) -> None:
        """Normalize directory and validate name."""
        if not self.name or "/" in self.name:
            raise ValueError(f"Invalid page name: {self.name!r}")
        object.__setattr__(self, "directory", normalize_directory(self.directory))
    
    @property
    def path(self) -> str:
        """Full site path of the page ("/blog/index.html")."""
        return str(PurePosixPath(self.directory) / self.name)
    
    @property
    def url(self) -> str:
        """Public URL; index documents resolve to their directory."""
        if self.name == INDEX_DOCUMENT:
            return self.directory if self.directory == "/" else f"{self.directory}/"
        return self.path
    
    def attach(self, pager: Pager) -> OutputPage:
        """Return a copy of this page carrying ``pager``."""
        return replace(self, pager=pager)
    
    def clone_to(self, directory: str, pager: Pager) -> OutputPage:
        """Return a copy with the same name and content at ``directory``."""
        return replace(self, directory=directory, pager=pager)
