"""
Module: pagination.config

Purpose:
    Immutable pagination configuration: global switch, page size and the
    ordered list of streams with their optional filters. Built explicitly
    from a site settings mapping and handed to the orchestrator.

Key Classes:
    - StreamFilter: Field name + accepted value(s)
    - StreamConfig: One pagination stream
    - PaginationConfig: Full configuration
    - ConfigurationError: Invalid settings or inconsistent pagination

Dependencies:
    - dataclasses (std)
    - core.schemas.validator: jsonschema validation of raw settings

Used By:
    - pagination.controller: paginate_site()
    - pagination.filters: select()
    - pagination.locator: find_template()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple

from site_paginate.common.path_utils import PAGE_NUMBER_PLACEHOLDER, base_output_path
from site_paginate.core.schemas.validator import ValidationError, validate_pagination_settings

logger = logging.getLogger(__name__)

DEFAULT_PATH_TEMPLATE = "/page:num"


class ConfigurationError(Exception):
    """Pagination settings are invalid or pagination reached an impossible state."""
    pass


@dataclass(frozen=True)
class StreamFilter:
    """
    Restricts a stream to items whose field matches (immutable).

    Attributes:
        name: Item field to read
        value: Accepted scalar, or a collection of accepted values

    Example:
        >>> StreamFilter("category", ("news", "releases")).accepts("news")
        True
    """

    name: str
    value: Any

    def __post_init__(self) -> None:
        """Validate and freeze collection values."""
        if not self.name:
            raise ValueError("Filter name must be non-empty")
        if isinstance(self.value, (list, set)):
            object.__setattr__(self, "value", tuple(self.value))

    @property
    def is_collection(self) -> bool:
        return isinstance(self.value, (tuple, frozenset))

    def accepts(self, value: Any) -> bool:
        """True if ``value`` equals the scalar or is one of the collection values."""
        if self.is_collection:
            return value in self.value
        return value == self.value


@dataclass(frozen=True)
class StreamConfig:
    """
    One pagination stream (immutable).

    Attributes:
        index: Position in the configured path list
        path_template: Output path for pages 2..N, e.g. "/blog/page:num"
        filter: Optional item filter for this stream
    """

    index: int
    path_template: str
    filter: Optional[StreamFilter] = None

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.index < 0:
            raise ValueError(f"index must be non-negative: {self.index}")
        if PAGE_NUMBER_PLACEHOLDER not in self.path_template:
            raise ValueError(
                f"path_template must contain {PAGE_NUMBER_PLACEHOLDER!r}: {self.path_template!r}"
            )

    @property
    def base_directory(self) -> str:
        """Directory of the stream's first page ("/blog" for "/blog/page:num")."""
        return base_output_path(self.path_template)


@dataclass(frozen=True)
class PaginationConfig:
    """
    Configuration for paginating a site (immutable).

    Attributes:
        enabled: Global switch; False skips every stream
        items_per_page: Page size shared by all streams
        streams: Streams in configured (processing) order

    Invariants:
        - enabled implies items_per_page > 0
        - streams[i].index == i

    Example:
        >>> config = PaginationConfig.from_site_config({
        ...     "paginate": 10,
        ...     "paginate_path": ["/page:num", "/news/page:num"],
        ...     "paginate_filter": [None, {"name": "category", "value": "news"}],
        ... })
        >>> [s.base_directory for s in config.streams]
        ['/', '/news']
    """

    enabled: bool
    items_per_page: int = 0
    streams: Tuple[StreamConfig, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not isinstance(self.items_per_page, int) or isinstance(self.items_per_page, bool):
            raise ValueError(f"items_per_page must be an integer: {self.items_per_page!r}")
        if self.enabled and self.items_per_page <= 0:
            raise ValueError(f"items_per_page must be positive: {self.items_per_page}")
        for i, stream in enumerate(self.streams):
            if stream.index != i:
                raise ValueError(f"Stream at position {i} has index {stream.index}")

    @classmethod
    def disabled(cls) -> PaginationConfig:
        """Configuration that paginates nothing."""
        return cls(enabled=False)

    @classmethod
    def from_site_config(cls, settings: Mapping[str, Any]) -> PaginationConfig:
        """
        Build a configuration from site settings.

        Reads "paginate" (items per page), "paginate_path" (string or list
        of path templates) and "paginate_filter" (list index-aligned with
        the paths, entries None or {"name", "value"}). A zero or missing
        "paginate" disables pagination.

        Args:
            settings: Parsed site settings

        Returns:
            PaginationConfig

        Raises:
            ConfigurationError: If the pagination keys are malformed
        """
        try:
            validate_pagination_settings(settings)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid pagination settings: {e}") from e

        # Integral floats such as 10.0 pass the schema as integers.
        per_page = int(settings.get("paginate") or 0)

        paths = settings.get("paginate_path", DEFAULT_PATH_TEMPLATE)
        if isinstance(paths, str):
            logger.warning(
                "paginate_path is a string but should be a list; "
                "converting it for backwards compatibility, update the site settings"
            )
            paths = [paths]

        filters = list(settings.get("paginate_filter") or [])
        if len(filters) > len(paths):
            logger.warning(
                f"paginate_filter has {len(filters)} entries for {len(paths)} paths; "
                "extra filters are ignored"
            )

        streams = []
        for index, path_template in enumerate(paths):
            raw_filter = filters[index] if index < len(filters) else None
            stream_filter = None
            if raw_filter is not None:
                stream_filter = StreamFilter(name=raw_filter["name"], value=raw_filter["value"])
            streams.append(StreamConfig(index=index, path_template=path_template, filter=stream_filter))

        return cls(
            enabled=per_page > 0,
            items_per_page=per_page,
            streams=tuple(streams),
        )
