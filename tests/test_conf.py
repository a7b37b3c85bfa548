"""Tests for mdengine.conf: dotted settings and the configuration store."""

from __future__ import annotations

from django.test import override_settings

from mdengine.conf import DEFAULTS, Settings, get_config


class TestSettings:
    def test_dotted_get(self) -> None:
        s = Settings({"render_strategy": {"type": "filter_output"}})
        assert s.get("render_strategy.type") == "filter_output"
        assert s.get("render_strategy.missing", "x") == "x"
        assert s.get("render_strategy.type.deeper") is None

    def test_set_creates_intermediate_dicts(self) -> None:
        s = Settings()
        s.set("a.b.c", 1)
        assert s.get("a.b.c") == 1
        assert s.all() == {"a": {"b": {"c": 1}}}

    def test_values_merge_over_defaults(self) -> None:
        s = Settings({"a": {"x": 1, "y": 2}}, {"a": {"y": 3}})
        assert s.get("a.x") == 1
        assert s.get("a.y") == 3

    def test_defaults_are_not_modified_by_set(self) -> None:
        s = Settings({"a": 1})
        s.set("a", 2)
        assert s.defaults() == {"a": 1}
        assert s.get("a") == 2

    def test_contains(self) -> None:
        s = Settings({"a": {"b": None}})
        assert "a.b" in s
        assert "a.c" not in s


class TestGetConfig:
    def test_reads_django_settings(self) -> None:
        config = get_config()
        assert config.get("base_url") == "https://example.com"
        assert config.get("parser") == DEFAULTS["parser"]

    def test_override_settings(self) -> None:
        with override_settings(MARKDOWN_ENGINE={"parser": "pandoc", "hooks": {"error_policy": "warning"}}):
            config = get_config()
        assert config.get("parser") == "pandoc"
        assert config.get("hooks.error_policy") == "warning"
        assert config.get("hooks.markdown") == []
