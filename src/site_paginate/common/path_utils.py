"""Site path utilities.

Pagination works on site-relative URL paths ("/blog/page2"), never on the
filesystem, so everything here is built on PurePosixPath.
"""

from __future__ import annotations

from pathlib import PurePosixPath

PAGE_NUMBER_PLACEHOLDER = ":num"
INDEX_DOCUMENT = "index.html"


def ensure_leading_slash(path: str) -> str:
    """Prefix path with "/" unless it already has one.
    
    Examples:
        >>> ensure_leading_slash("page2")
        '/page2'
        >>> ensure_leading_slash("/blog")
        '/blog'
    """
    return path if path.startswith("/") else f"/{path}"


def remove_leading_slash(path: str) -> str:
    """Strip every leading "/" from path."""
    return path.lstrip("/")


def normalize_directory(directory: str) -> str:
    """Return directory as an absolute site path without trailing slash.
    
    Examples:
        >>> normalize_directory("blog/")
        '/blog'
        >>> normalize_directory("")
        '/'
    """
    return str(PurePosixPath("/") / remove_leading_slash(directory))


def _placeholder_index(parts: tuple[str, ...]) -> int:
    """Index of the first path part holding the page number placeholder."""
    for i, part in enumerate(parts):
        if PAGE_NUMBER_PLACEHOLDER in part:
            return i
    raise ValueError(f"Path template has no {PAGE_NUMBER_PLACEHOLDER!r} placeholder")


def page_number_segment(path_template: str, page_number: int) -> str:
    """Path segment holding the placeholder, with the page number substituted.
    
    Examples:
        >>> page_number_segment("/blog/page:num", 3)
        'page3'
        >>> page_number_segment("/page:num/all", 2)
        'page2'
    """
    parts = PurePosixPath(ensure_leading_slash(path_template)).parts
    segment = parts[_placeholder_index(parts)]
    return segment.replace(PAGE_NUMBER_PLACEHOLDER, str(page_number), 1)


def base_output_path(path_template: str) -> str:
    """Directory that holds a stream's numbered pages.
    
    This is the part of the template before the segment carrying the
    page number.
    
    Examples:
        >>> base_output_path("/blog/page:num")
        '/blog'
        >>> base_output_path("/blog/page:num/")
        '/blog'
        >>> base_output_path("/page:num/all")
        '/'
    """
    parts = PurePosixPath(ensure_leading_slash(path_template)).parts
    return str(PurePosixPath(*parts[:_placeholder_index(parts)]))


def page_url(path_template: str, page_number: int) -> str:
    """URL of page ``page_number`` (2 and up), keeping the template's form.
    
    Examples:
        >>> page_url("/blog/page:num", 2)
        '/blog/page2'
        >>> page_url("/blog/page:num/", 2)
        '/blog/page2/'
    """
    return ensure_leading_slash(
        path_template.replace(PAGE_NUMBER_PLACEHOLDER, str(page_number), 1)
    )


def paginated_directory(path_template: str, page_number: int) -> str:
    """Directory for page ``page_number`` of a stream (pages 2 and up).
    
    Examples:
        >>> paginated_directory("page:num", 2)
        '/page2'
        >>> paginated_directory("/blog/page:num/", 3)
        '/blog/page3'
        >>> paginated_directory("/page:num/all", 2)
        '/page2/all'
    """
    return normalize_directory(page_url(path_template, page_number))
