"""Tests for the bleach-backed sanitizer."""

from __future__ import annotations

from bs4 import BeautifulSoup

from mdengine.markdown.config import DisallowedTags
from mdengine.markdown.postprocessors import sanitize_html, strip_unsafe_urls
from mdengine.markdown.postprocessors.sanitizer import is_safe_url


class TestDisallowedTags:
    html = "<p><strong>bold</strong> <script>alert(1)</script></p>"

    def test_unwrap_keeps_text(self) -> None:
        result = sanitize_html(self.html, "<p> <strong>")
        assert "<strong>bold</strong>" in result
        assert "<script" not in result
        assert "alert(1)" in result

    def test_escape_renders_tags_as_text(self) -> None:
        result = sanitize_html(self.html, "<p> <strong>", disallowed_tags=DisallowedTags.ESCAPE)
        assert "<script" not in result
        assert "&lt;script&gt;" in result

    def test_remove_drops_content(self) -> None:
        result = sanitize_html(self.html, "<p> <strong>", disallowed_tags="remove")
        assert "<strong>bold</strong>" in result
        assert "alert(1)" not in result

    def test_empty_input(self) -> None:
        assert sanitize_html("", "<p>") == ""


class TestAttributes:
    def test_disallowed_attributes_removed(self) -> None:
        result = sanitize_html('<p id="x" onclick="evil()">hi</p>', "<p>")
        assert result == "<p>hi</p>"

    def test_unsafe_protocol_removed(self) -> None:
        result = sanitize_html('<a href="javascript:alert(1)">x</a>', "<a href>")
        assert "javascript" not in result
        assert ">x</a>" in result

    def test_value_constraints(self) -> None:
        allowed = '<a href target="_blank">'
        kept = sanitize_html('<a href="https://x.org" target="_blank">x</a>', allowed)
        dropped = sanitize_html('<a href="https://x.org" target="_top">x</a>', allowed)
        assert BeautifulSoup(kept, "html.parser").a.get("target") == "_blank"
        assert BeautifulSoup(dropped, "html.parser").a.get("target") is None

    def test_wildcard_attribute(self) -> None:
        result = sanitize_html('<div data-id="1" id="x">y</div>', "<div data-*>")
        div = BeautifulSoup(result, "html.parser").div
        assert div.get("data-id") == "1"
        assert div.get("id") is None

    def test_global_attributes(self) -> None:
        result = sanitize_html('<p class="lead">y</p>', "<* class> <p>")
        assert BeautifulSoup(result, "html.parser").p.get("class") == ["lead"]

    def test_comments_removed(self) -> None:
        assert "<!--" not in sanitize_html("<!-- hidden --><p>y</p>", "<p>")


# ── URL schemes ──────────────────────────────────────────────────────────


class TestUnsafeUrls:
    def test_relative_and_allowed_schemes_are_safe(self) -> None:
        for url in ("/docs", "#top", "page?q=1", "https://x.org", "mailto:a@b.org"):
            assert is_safe_url(url)

    def test_obfuscated_javascript_is_unsafe(self) -> None:
        for url in ("javascript:alert(1)", "JaVaScRiPt:x", " java\tscript:x", "&#106;avascript:x", "data:text/html,x"):
            assert not is_safe_url(url)

    def test_strip_unsafe_urls_keeps_tags(self) -> None:
        result = strip_unsafe_urls('<p><a href="javascript:x" title="t">a</a><img src="https://x.org/i.png"></p>')
        soup = BeautifulSoup(result, "html.parser")
        assert not soup.a.has_attr("href")
        assert soup.a["title"] == "t"
        assert soup.img["src"] == "https://x.org/i.png"

    def test_strip_unsafe_urls_returns_clean_html_unchanged(self) -> None:
        html = '<p><a href="/x">a</a></p>'
        assert strip_unsafe_urls(html) is html
