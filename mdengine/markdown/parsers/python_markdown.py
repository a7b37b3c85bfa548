# mdengine/markdown/parsers/python_markdown.py

import copy
from dataclasses import dataclass, field

import markdown

from ..extensions.base import EnvironmentAwareInterface, SettingsInterface
from .extensible import ExtensibleParser


@dataclass
class MarkdownEnvironment:
    """
    Everything needed to build a ``markdown.Markdown`` instance.

    ``config`` holds settings merged in by extensions implementing
    ``SettingsInterface``, keyed by their ``settings_key()``.
    """

    extensions: list = field(default_factory=list)
    extension_configs: dict = field(default_factory=dict)
    config: dict = field(default_factory=dict)

    def add_extension(self, extension) -> None:
        self.extensions.append(extension)


class PythonMarkdownParser(ExtensibleParser):
    id = "python_markdown"
    label = "Python-Markdown"
    description = "Converts markdown with Python-Markdown and the bundled extensions."
    bundled_extensions = ("enhanced_links", "smart_punctuation", "strikethrough", "typography")
    default_enabled_extensions = ("enhanced_links", "strikethrough")

    @classmethod
    def default_settings(cls):
        return {
            # Python-Markdown extensions loaded by name, before bundled ones.
            "extensions": ["fenced_code", "tables", "sane_lists"],
            "extension_configs": {},
            "output_format": "html",
        }

    def get_environment(self) -> MarkdownEnvironment:
        environment = MarkdownEnvironment(
            extensions=list(self.settings.get("extensions") or []),
            extension_configs=copy.deepcopy(self.settings.get("extension_configs") or {}),
        )

        enabled = list(self.extensions().enabled())
        for _, extension in enabled:
            if isinstance(extension, SettingsInterface):
                key = extension.settings_key()
                if key:
                    environment.config[key] = extension.settings.all()

        for _, extension in enabled:
            if isinstance(extension, EnvironmentAwareInterface):
                extension.set_environment(environment)

        return environment

    def convert_to_html(self, markdown_text, language=None):
        # A fresh instance per call; markdown.Markdown keeps per-document state.
        environment = self.get_environment()
        md = markdown.Markdown(
            extensions=environment.extensions,
            extension_configs=environment.extension_configs,
            output_format=self.settings.get("output_format", "html"),
        )
        return md.convert(markdown_text)
