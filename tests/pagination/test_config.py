"""
Unit tests for pagination configuration.
"""

import logging

import pytest

from site_paginate.pagination import (
    ConfigurationError,
    PaginationConfig,
    StreamConfig,
    StreamFilter,
)


class TestStreamFilter:
    """Tests for StreamFilter."""

    def test_accepts_when_scalar_then_equality(self):
        stream_filter = StreamFilter("category", "news")

        assert stream_filter.accepts("news")
        assert not stream_filter.accepts("releases")

    def test_accepts_when_list_then_membership(self):
        stream_filter = StreamFilter("category", ["news", "releases"])

        assert stream_filter.value == ("news", "releases")
        assert stream_filter.accepts("releases")
        assert not stream_filter.accepts("misc")

    def test_init_when_name_empty_then_raises(self):
        with pytest.raises(ValueError, match="Filter name"):
            StreamFilter("", "news")


class TestStreamConfig:
    """Tests for StreamConfig."""

    def test_base_directory(self):
        assert StreamConfig(0, "/blog/page:num").base_directory == "/blog"
        assert StreamConfig(0, "page:num").base_directory == "/"

    def test_init_when_placeholder_missing_then_raises(self):
        with pytest.raises(ValueError, match=":num"):
            StreamConfig(0, "/blog/page")


class TestPaginationConfig:
    """Tests for PaginationConfig construction and site settings parsing."""

    def test_init_when_enabled_without_page_size_then_raises(self):
        with pytest.raises(ValueError, match="items_per_page"):
            PaginationConfig(enabled=True, items_per_page=0)

    def test_init_when_stream_index_mismatch_then_raises(self):
        with pytest.raises(ValueError, match="index"):
            PaginationConfig(enabled=True, items_per_page=5, streams=(StreamConfig(1, "/page:num"),))

    def test_disabled(self):
        config = PaginationConfig.disabled()

        assert not config.enabled
        assert config.streams == ()

    def test_from_site_config_when_list_paths_then_streams_in_order(self):
        config = PaginationConfig.from_site_config({
            "paginate": 10,
            "paginate_path": ["/page:num", "/news/page:num"],
            "paginate_filter": [None, {"name": "category", "value": "news"}],
        })

        assert config.enabled
        assert config.items_per_page == 10
        assert [s.path_template for s in config.streams] == ["/page:num", "/news/page:num"]
        assert config.streams[0].filter is None
        assert config.streams[1].filter == StreamFilter("category", "news")

    def test_from_site_config_when_string_path_then_normalized_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="site_paginate.pagination.config"):
            config = PaginationConfig.from_site_config({"paginate": 5, "paginate_path": "/blog/page:num"})

        assert [s.path_template for s in config.streams] == ["/blog/page:num"]
        assert "backwards compatibility" in caplog.text

    def test_from_site_config_when_no_path_then_default(self):
        config = PaginationConfig.from_site_config({"paginate": 5})

        assert [s.path_template for s in config.streams] == ["/page:num"]

    @pytest.mark.parametrize("settings", [{}, {"paginate": 0}, {"paginate": None}])
    def test_from_site_config_when_page_size_missing_or_zero_then_disabled(self, settings):
        config = PaginationConfig.from_site_config(settings)

        assert not config.enabled

    def test_from_site_config_when_fewer_filters_than_paths_then_rest_unfiltered(self):
        config = PaginationConfig.from_site_config({
            "paginate": 5,
            "paginate_path": ["/a/page:num", "/b/page:num"],
            "paginate_filter": [{"name": "tag", "value": "a"}],
        })

        assert config.streams[0].filter == StreamFilter("tag", "a")
        assert config.streams[1].filter is None

    def test_from_site_config_when_extra_filters_then_ignored(self, caplog):
        with caplog.at_level(logging.WARNING, logger="site_paginate.pagination.config"):
            config = PaginationConfig.from_site_config({
                "paginate": 5,
                "paginate_path": ["/page:num"],
                "paginate_filter": [None, {"name": "tag", "value": "a"}],
            })

        assert len(config.streams) == 1
        assert "extra filters are ignored" in caplog.text

    def test_from_site_config_when_invalid_then_configuration_error(self):
        with pytest.raises(ConfigurationError, match="Invalid pagination settings"):
            PaginationConfig.from_site_config({"paginate": -3})

    def test_from_site_config_when_integral_float_page_size_then_int(self):
        config = PaginationConfig.from_site_config({"paginate": 10.0, "paginate_path": ["/page:num"]})

        assert config.items_per_page == 10
        assert isinstance(config.items_per_page, int)

    def test_init_when_page_size_not_int_then_raises(self):
        with pytest.raises(ValueError, match="integer"):
            PaginationConfig(enabled=True, items_per_page=10.0)
