# mdengine/markdown/extensions/__init__.py

from .base import (
    AllowedHtmlInterface,
    BaseExtension,
    EnvironmentAwareInterface,
    ExtensionDefinition,
    GuidelinesAlterInterface,
    GuidelinesInterface,
    SettingsInterface,
)
from .collection import ExtensionCollection

EXTENSIONS = [
    ExtensionDefinition(
        id="enhanced_links",
        label="Enhanced Links",
        extension_class="mdengine.markdown.extensions.link_renderer.LinkRenderer",
        description="Additional enhancements when rendering links.",
        installed="markdown",
    ),
    ExtensionDefinition(
        id="smart_punctuation",
        label="Smart Punctuation",
        extension_class="mdengine.markdown.extensions.smart_punctuation.SmartPunctuationExtension",
        description="Converts ASCII quotes, dashes, and ellipses to their Unicode equivalents.",
        url="https://python-markdown.github.io/extensions/smarty/",
        installed="markdown.extensions.smarty",
    ),
    ExtensionDefinition(
        id="strikethrough",
        label="Strikethrough",
        extension_class="mdengine.markdown.extensions.strikethrough.StrikethroughExtension",
        description="Use ~~ to indicate text that should be rendered within <del> tags.",
        installed="markdown",
    ),
    ExtensionDefinition(
        id="typography",
        label="Typography",
        extension_class="mdengine.markdown.extensions.typography.TypographyExtension",
        description="Word breaks in long paths, sub/sup pairing and non-breaking space cleanup.",
        requires={"smart_punctuation"},
        weight=10,
        installed="bs4",
    ),
]


def get_definitions(ids=None) -> list:
    """Bundled definitions, optionally restricted to ``ids`` (in that order)."""
    if ids is None:
        return list(EXTENSIONS)
    by_id = {definition.id: definition for definition in EXTENSIONS}
    return [by_id[extension_id] for extension_id in ids if extension_id in by_id]


__all__ = [
    "EXTENSIONS",
    "AllowedHtmlInterface",
    "BaseExtension",
    "EnvironmentAwareInterface",
    "ExtensionCollection",
    "ExtensionDefinition",
    "GuidelinesAlterInterface",
    "GuidelinesInterface",
    "SettingsInterface",
    "get_definitions",
]
