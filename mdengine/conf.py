# mdengine/conf.py
"""
Configuration store for the markdown engine.

Values are read from ``DEFAULTS`` deep-merged with the ``MARKDOWN_ENGINE``
dict from Django settings, when Django settings are configured::

    MARKDOWN_ENGINE = {
        "parser": "python_markdown",
        "base_url": "https://example.com",
        "cache_timeout": 300,
        "parsers": {
            "python_markdown": {
                "render_strategy": {"type": "filter_output"},
                "extensions": [{"id": "strikethrough", "enabled": True}],
            },
        },
    }
"""

import copy

from django.conf import settings

DEFAULTS = {
    "parser": "python_markdown",
    "base_url": "http://localhost",
    "site_name": "Markdown",
    # Seconds to cache parsed output; None disables caching.
    "cache_timeout": None,
    "hooks": {
        "markdown": [],
        "markdown_html": [],
        "error_policy": "exception",
    },
    "parsers": {},
}


def _deep_merge(base: dict, overrides: dict) -> dict:
    merged = copy.deepcopy(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


class Settings:
    """
    Nested settings with dotted-key access.

    Used both as the project configuration store and as the settings object
    held by parsers and extensions. Defaults are kept separately so that
    ``defaults()`` always reflects the pristine values.

    Args:
        defaults: Default values
        values: Overrides, deep-merged on top of the defaults
    """

    def __init__(self, defaults: dict | None = None, values: dict | None = None):
        self._defaults = copy.deepcopy(defaults or {})
        self._values = _deep_merge(self._defaults, values or {})

    def get(self, key: str, default=None):
        current = self._values
        for part in key.split("."):
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]
        return current

    def set(self, key: str, value) -> None:
        parts = key.split(".")
        current = self._values
        for part in parts[:-1]:
            if not isinstance(current.get(part), dict):
                current[part] = {}
            current = current[part]
        current[parts[-1]] = value

    def defaults(self) -> dict:
        return copy.deepcopy(self._defaults)

    def all(self) -> dict:
        return copy.deepcopy(self._values)

    def __contains__(self, key: str) -> bool:
        sentinel = object()
        return self.get(key, sentinel) is not sentinel

    def __repr__(self):
        return f"<Settings {self._values!r}>"


def get_config() -> Settings:
    """Build the configuration store from defaults and Django settings."""
    overrides = {}
    if settings.configured:
        overrides = getattr(settings, "MARKDOWN_ENGINE", None) or {}
    return Settings(DEFAULTS, overrides)
