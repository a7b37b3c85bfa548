"""Tests for mdengine.markdown.allowed_html."""

from __future__ import annotations

import pytest

from mdengine.errors import UnknownAllowedHtmlPluginError
from mdengine.markdown.allowed_html import (
    ALLOWED_HTML,
    format_allowed_html,
    get_allowed_html_plugin,
    merge_allowed_html,
    parse_allowed_html,
)


class TestParse:
    def test_string_form(self) -> None:
        allowlist = parse_allowed_html('<a href target="_blank"> <EM> <ol start type>')
        assert allowlist == {
            "a": {"href": None, "target": frozenset({"_blank"})},
            "em": {},
            "ol": {"start": None, "type": None},
        }

    def test_mapping_form(self) -> None:
        allowlist = parse_allowed_html({"a": ["href"], "div": {"class": ["x", "y"]}, "br": None})
        assert allowlist == {
            "a": {"href": None},
            "div": {"class": frozenset({"x", "y"})},
            "br": {},
        }

    def test_empty(self) -> None:
        assert parse_allowed_html(None) == {}
        assert parse_allowed_html("") == {}

    def test_repeated_tag_is_merged(self) -> None:
        allowlist = parse_allowed_html('<a href> <a title> <a rel="nofollow"> <a rel="noopener">')
        assert allowlist["a"] == {"href": None, "title": None, "rel": frozenset({"nofollow", "noopener"})}

    def test_default_allowlist_parses(self) -> None:
        allowlist = parse_allowed_html(ALLOWED_HTML)
        assert "p" in allowlist
        assert "script" not in allowlist
        assert "href" in allowlist["a"]


class TestMerge:
    def test_union_of_tags(self) -> None:
        merged = merge_allowed_html("<p>", {"del": {}}, "<a href>")
        assert set(merged) == {"p", "del", "a"}

    def test_any_value_wins_over_value_set(self) -> None:
        merged = merge_allowed_html('<a target="_blank">', "<a target>")
        assert merged["a"]["target"] is None

    def test_value_sets_are_unioned(self) -> None:
        merged = merge_allowed_html('<ol type="1">', '<ol type="a">')
        assert merged["ol"]["type"] == frozenset({"1", "a"})


class TestFormat:
    def test_sorted_output(self) -> None:
        assert format_allowed_html({"em": {}, "a": {"target": {"_blank"}, "href": None}}) == (
            '<a href target="_blank"> <em>'
        )

    def test_format_then_parse_is_stable(self) -> None:
        original = parse_allowed_html(ALLOWED_HTML)
        assert parse_allowed_html(format_allowed_html(original)) == original


class TestPlugins:
    def test_known_plugin(self) -> None:
        assert "math" in get_allowed_html_plugin("mathml")
        assert "video" in get_allowed_html_plugin("media")

    def test_unknown_plugin(self) -> None:
        with pytest.raises(UnknownAllowedHtmlPluginError):
            get_allowed_html_plugin("flash")
