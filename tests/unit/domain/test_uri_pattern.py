"""Tests for pagelinks.domain.services.uri_pattern."""

from __future__ import annotations

import pytest

from pagelinks.domain.services.pagination_model import PaginationModel
from pagelinks.domain.services.uri_pattern import (
    build_match_pattern,
    create_link,
    extract_page,
    is_query_style,
    substitute,
)

QUERY = "page={page}"
PATH = "page/{page}"


class TestPatternStyle:
    def test_query_style(self):
        assert is_query_style(QUERY) is True
        assert is_query_style("p={page}") is True

    def test_path_style(self):
        assert is_query_style(PATH) is False
        assert is_query_style("{page}") is False

    def test_leading_equals_is_path_style(self):
        assert is_query_style("={page}") is False

    def test_substitute(self):
        assert substitute(PATH, 12) == "page/12"


class TestBuildMatchPattern:
    def test_is_case_insensitive(self):
        assert build_match_pattern(QUERY).search("/x?PAGE=2") is not None

    def test_is_memoized(self):
        assert build_match_pattern(QUERY) is build_match_pattern(QUERY)

    def test_template_is_escaped(self):
        pattern = build_match_pattern("p.{page}")
        assert pattern.search("/items/p.4") is not None
        assert pattern.search("/items/px4") is None


class TestExtractPage:
    @pytest.mark.parametrize(
        ("uri", "expected"),
        [
            ("/posts?page=3", 3),
            ("/posts?sort=asc&page=12", 12),
            ("/posts?page=7&sort=asc", 7),
            ("/posts?PAGE=4", 4),
            ("/posts", None),
            ("/posts?page=03", None),
            ("/posts?page=0", None),
            ("/posts?subpage=3", None),
            ("/posts?page=3x", None),
            ("/posts?page=", None),
        ],
    )
    def test_query_style(self, uri, expected):
        assert extract_page(QUERY, uri) == expected

    @pytest.mark.parametrize(
        ("uri", "expected"),
        [
            ("/posts/page/3", 3),
            ("/posts/page/3/", 3),
            ("/posts/page/3?sort=asc", 3),
            ("/posts/page/3/comments", 3),
            ("/posts/Page/8", 8),
            ("/posts/page/3a", None),
            ("/posts/mypage/3", None),
            ("/posts", None),
        ],
    )
    def test_path_style(self, uri, expected):
        assert extract_page(PATH, uri) == expected

    def test_template_without_token(self):
        assert extract_page("page", "/posts/page") is None


class TestCreateLink:
    def test_replaces_page_in_query(self):
        assert create_link(QUERY, "/posts?page=3", 5) == "/posts?page=5"

    def test_replaces_only_page_number(self):
        uri = "/posts?sort=asc&page=3&tag=7"
        assert create_link(QUERY, uri, 4) == "/posts?sort=asc&page=4&tag=7"

    def test_keeps_parameter_case(self):
        assert create_link(QUERY, "/posts?PAGE=3", 2) == "/posts?PAGE=2"

    def test_appends_query_parameter(self):
        assert create_link(QUERY, "/posts", 2) == "/posts?page=2"

    def test_appends_to_existing_query(self):
        assert create_link(QUERY, "/posts?sort=asc", 2) == "/posts?sort=asc&page=2"

    def test_appends_path_segment(self):
        assert create_link(PATH, "/posts", 2) == "/posts/page/2"

    def test_path_segment_on_root(self):
        assert create_link(PATH, "/", 2) == "/page/2"

    def test_path_segment_before_query(self):
        assert create_link(PATH, "/posts?sort=asc", 2) == "/posts/page/2?sort=asc"

    def test_trailing_slash_before_query_is_not_doubled(self):
        assert create_link(PATH, "/posts/?sort=asc", 2) == "/posts/page/2?sort=asc"

    def test_replaces_path_segment(self):
        assert create_link(PATH, "/posts/page/3", 7) == "/posts/page/7"

    def test_replaces_path_segment_keeping_query(self):
        assert create_link(PATH, "/posts/page/3?sort=asc", 4) == "/posts/page/4?sort=asc"

    def test_leading_zero_is_not_replaced(self):
        assert create_link(QUERY, "/posts?page=03", 2) == "/posts?page=03&page=2"


class TestModelDelegation:
    def test_create_link_from_query_uri(self):
        model = PaginationModel({"uri": "/posts?page=3", "pattern": "page={page}"})
        assert model.create_link(5) == "/posts?page=5"
        assert model.get_page() == 3

    def test_create_link_for_path_pattern(self):
        model = PaginationModel({"uri": "/posts", "pattern": "page/{page}"})
        assert model.create_link(2) == "/posts/page/2"

    def test_build_match_pattern_uses_configured_pattern(self):
        model = PaginationModel({"pattern": "p={page}"})
        assert model.build_match_pattern().search("/list?p=9").group(1) == "9"

    def test_default_uri_gets_query_parameter(self):
        assert PaginationModel().create_link(2) == "/?page=2"
