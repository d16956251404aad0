"""Top-level package for site_paginate.

Provides subpackages:
- site_paginate.core – content, page and pager models plus settings schema
- site_paginate.pagination – stream configuration, filtering, partitioning
  and the orchestrator that paginates a site
- site_paginate.common – shared path helpers
"""


def _get_version() -> str:
    """Get version from installed package metadata."""
    from importlib.metadata import PackageNotFoundError, version as pkg_version

    try:
        return pkg_version("site-paginate")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()
__all__: list[str] = ["__version__"]
