import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import site_paginate
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from site_paginate.core.models import ContentItem, OutputPage, Site  # noqa: E402


# Common test fixtures
@pytest.fixture
def make_posts():
    """Factory for numbered posts; extra kwargs become fields on every post."""
    def _create(count: int, **fields):
        return [ContentItem(f"post-{i}", {"title": f"Post {i}", **fields}) for i in range(1, count + 1)]
    return _create


@pytest.fixture
def root_index() -> OutputPage:
    """Site root index page."""
    return OutputPage("/", "index.html", content="{{ paginator.posts }}")


@pytest.fixture
def blog_index() -> OutputPage:
    """Nested blog index page."""
    return OutputPage("/blog", "index.html", content="{{ paginator.posts }}")


@pytest.fixture
def site(make_posts, root_index) -> Site:
    """Site with 25 posts, a root index page and an about page."""
    return Site(items=make_posts(25), pages=[root_index, OutputPage("/about", "about.html")])
