"""
Unit tests for template page discovery.
"""

from site_paginate.core.models import OutputPage
from site_paginate.pagination import StreamConfig, find_template, first_page_url, is_candidate


class TestIsCandidate:
    """Tests for is_candidate."""

    def test_when_index_in_base_directory_then_true(self):
        assert is_candidate(OutputPage("/blog", "index.html"), StreamConfig(0, "/blog/page:num"))

    def test_when_index_in_ancestor_directory_then_true(self):
        assert is_candidate(OutputPage("/", "index.html"), StreamConfig(0, "/blog/page:num"))

    def test_when_index_in_sibling_or_child_directory_then_false(self):
        stream = StreamConfig(0, "/blog/page:num")

        assert not is_candidate(OutputPage("/about", "index.html"), stream)
        assert not is_candidate(OutputPage("/blog/2024", "index.html"), stream)

    def test_when_not_index_document_then_false(self):
        assert not is_candidate(OutputPage("/blog", "feed.xml"), StreamConfig(0, "/blog/page:num"))


class TestFindTemplate:
    """Tests for find_template."""

    def test_when_root_and_nested_candidates_then_longest_path_wins(self):
        root = OutputPage("/", "index.html")
        blog = OutputPage("/blog", "index.html")

        assert find_template([root, blog], StreamConfig(0, "/blog/page:num")) is blog
        assert find_template([blog, root], StreamConfig(0, "/blog/page:num")) is blog

    def test_when_root_stream_then_root_index(self):
        root = OutputPage("/", "index.html")
        blog = OutputPage("/blog", "index.html")

        assert find_template([blog, root], StreamConfig(0, "/page:num")) is root

    def test_when_tie_then_first_in_site_order(self):
        first = OutputPage("/blog", "index.html", content="first")
        second = OutputPage("/blog", "index.html", content="second")

        assert find_template([first, second], StreamConfig(0, "/blog/page:num")) is first

    def test_when_no_candidate_then_none(self):
        pages = [OutputPage("/about", "index.html"), OutputPage("/", "feed.xml")]

        assert find_template(pages, StreamConfig(0, "/page:num")) is None

    def test_when_no_pages_then_none(self):
        assert find_template([], StreamConfig(0, "/page:num")) is None


class TestFirstPageUrl:
    """Tests for first_page_url."""

    def test_when_template_found_then_its_url(self):
        pages = [OutputPage("/", "index.html"), OutputPage("/blog", "index.html")]

        assert first_page_url(pages, StreamConfig(0, "/blog/page:num")) == "/blog/"

    def test_when_missing_then_none(self):
        assert first_page_url([], StreamConfig(0, "/blog/page:num")) is None
