"""Tests for the Pandoc parser."""

from __future__ import annotations

import pytest

from mdengine.conf import Settings
from mdengine.errors import BackendConversionError
from mdengine.markdown import get_parser
from mdengine.markdown.config import get_pandoc_config
from mdengine.markdown.parsers.pandoc import PandocParser

requires_pandoc = pytest.mark.skipif(not PandocParser.is_installed(), reason="pandoc binary not available")


class TestPandocConfig:
    def test_extensions_appended_to_format(self) -> None:
        config = get_pandoc_config(Settings({"format": "markdown", "pandoc_extensions": ["smart", "-raw_html"]}))
        assert config["format"] == "markdown+smart-raw_html"
        assert config["to"] == "html5"

    def test_wrap_becomes_argument(self) -> None:
        config = get_pandoc_config(Settings({"extra_args": ["--mathml"], "wrap": "none"}))
        assert config["extra_args"] == ["--mathml", "--wrap=none"]

    def test_contributes_allowed_html(self) -> None:
        parser = get_parser("pandoc", {"render_strategy": {"type": "filter_output", "allowed_html": "<p>"}})
        assert {"p", "del", "sup", "sub"} <= set(parser.get_effective_allowed_html())


@requires_pandoc
class TestPandocParser:
    def test_converts_and_sanitizes(self) -> None:
        html = get_parser("pandoc").parse("~~old~~ **new** <script>x</script>").html
        assert "<del>old</del>" in html
        assert "<strong>new</strong>" in html
        assert "<script" not in html

    def test_conversion_failure(self) -> None:
        parser = PandocParser({"settings": {"format": "not-a-real-format"}})
        with pytest.raises(BackendConversionError):
            parser.parse("x")
