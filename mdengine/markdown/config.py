# mdengine/markdown/config.py

import copy
import enum
from dataclasses import dataclass, field

from .allowed_html import format_allowed_html, parse_allowed_html


class RenderStrategy(str, enum.Enum):
    """
    Trust boundary applied around markdown conversion.

    FILTER_OUTPUT sanitizes the converted HTML against an allowlist.
    ESCAPE_INPUT escapes HTML in the source before conversion.
    STRIP_INPUT removes HTML tags from the source before conversion.
    NONE applies nothing; the caller takes full responsibility.
    """

    FILTER_OUTPUT = "filter_output"
    ESCAPE_INPUT = "escape_input"
    STRIP_INPUT = "strip_input"
    NONE = "none"


class DisallowedTags(str, enum.Enum):
    """How the sanitizer treats tags missing from the allowlist."""

    UNWRAP = "unwrap"
    ESCAPE = "escape"
    REMOVE = "remove"


@dataclass
class ParserConfiguration:
    """
    Configuration owned by a parser.

    ``extensions`` maps an extension id to ``{"enabled": bool, "settings": dict}``.
    ``settings`` holds backend specific settings.
    """

    render_strategy: RenderStrategy = RenderStrategy.FILTER_OUTPUT
    allowed_html: dict | None = None
    allowed_html_plugins: list = field(default_factory=list)
    disallowed_tags: DisallowedTags = DisallowedTags.UNWRAP
    settings: dict = field(default_factory=dict)
    extensions: dict = field(default_factory=dict)

    def __post_init__(self):
        self.render_strategy = RenderStrategy(self.render_strategy)
        self.disallowed_tags = DisallowedTags(self.disallowed_tags)
        if self.allowed_html is not None:
            self.allowed_html = parse_allowed_html(self.allowed_html)
        self.allowed_html_plugins = list(self.allowed_html_plugins)

    @classmethod
    def from_dict(cls, data: dict | None) -> "ParserConfiguration":
        """
        Build a configuration from its persisted form.

        Extensions missing from ``data`` are left out entirely, which means
        they are disabled. An empty ``allowed_html`` is kept as an empty
        allowlist; only a missing one falls back to the default.
        """
        data = copy.deepcopy(data or {})
        render_strategy = data.get("render_strategy") or {}
        if isinstance(render_strategy, str):
            render_strategy = {"type": render_strategy}

        extensions = {}
        for item in data.get("extensions") or []:
            extensions[item["id"]] = {
                "enabled": bool(item.get("enabled", False)),
                "settings": dict(item.get("settings") or {}),
            }

        return cls(
            render_strategy=render_strategy.get("type") or RenderStrategy.FILTER_OUTPUT,
            allowed_html=render_strategy.get("allowed_html"),
            allowed_html_plugins=render_strategy.get("plugins") or [],
            disallowed_tags=render_strategy.get("disallowed_tags") or DisallowedTags.UNWRAP,
            settings=data.get("settings") or {},
            extensions=extensions,
        )

    def as_dict(self) -> dict:
        """Persisted form; allowlist settings only apply to FILTER_OUTPUT."""
        render_strategy = {"type": self.render_strategy.value}
        if self.render_strategy is RenderStrategy.FILTER_OUTPUT:
            if self.allowed_html is not None:
                render_strategy["allowed_html"] = format_allowed_html(self.allowed_html)
            render_strategy["plugins"] = list(self.allowed_html_plugins)
            render_strategy["disallowed_tags"] = self.disallowed_tags.value

        data = {"render_strategy": render_strategy}
        if self.settings:
            data["settings"] = copy.deepcopy(self.settings)
        if self.extensions:
            data["extensions"] = [
                {
                    "id": extension_id,
                    "enabled": config.get("enabled", False),
                    "settings": copy.deepcopy(config.get("settings") or {}),
                }
                for extension_id, config in self.extensions.items()
            ]
        return data


def get_pandoc_config(settings) -> dict:
    """
    Arguments for pypandoc built from a pandoc parser's settings.

    Pandoc extensions are appended to the input format, so
    ``format="markdown"`` with ``pandoc_extensions=["smart"]`` becomes
    ``--from=markdown+smart``.
    """
    from_format = settings.get("format", "markdown")
    for extension in settings.get("pandoc_extensions", []):
        from_format += extension if extension[0] in "+-" else f"+{extension}"

    extra_args = list(settings.get("extra_args", []))
    if settings.get("wrap"):
        extra_args.append(f"--wrap={settings.get('wrap')}")

    return {
        "format": from_format,
        "to": settings.get("to", "html5"),
        "extra_args": extra_args,
    }
