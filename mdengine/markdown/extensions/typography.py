# mdengine/markdown/extensions/typography.py

from markdown.extensions import Extension
from markdown.postprocessors import Postprocessor

from ..postprocessors.typography_enhancer import typography_enhancer
from .base import (
    AllowedHtmlInterface,
    BaseExtension,
    EnvironmentAwareInterface,
    GuidelinesAlterInterface,
)


class _TypographyPostprocessor(Postprocessor):
    def __init__(self, md, options):
        super().__init__(md)
        self.options = options

    def run(self, text):
        return typography_enhancer(text, **self.options)


class _TypographyMarkdownExtension(Extension):
    def __init__(self, options, **kwargs):
        self.options = options
        super().__init__(**kwargs)

    def extendMarkdown(self, md):
        # Last, after raw HTML (30) and amp substitution (20) are restored.
        md.postprocessors.register(_TypographyPostprocessor(md, self.options), "typography", 5)


class TypographyExtension(
    BaseExtension, AllowedHtmlInterface, EnvironmentAwareInterface, GuidelinesAlterInterface
):
    """Sub/sup pairing, word breaks in paths and nbsp cleanup on the rendered HTML."""

    @classmethod
    def default_settings(cls):
        return {
            "wrap_subsup_pairs": True,
            "add_word_breaks": True,
            "normalize_nbsp": True,
        }

    def allowed_html_tags(self, parser):
        return "<wbr> <span class> <sub> <sup>"

    def alter_guidelines(self, guides):
        general = guides.get("general")
        if general is not None:
            general["items"].append(
                {
                    "title": "Long paths",
                    "description": "Slashes in long URLs and paths get line break opportunities.",
                    "tags": {"wbr": ["See https://example.com/a/very/long/path for details."]},
                }
            )

    def set_environment(self, environment):
        options = {key: bool(self.get_setting(key)) for key in self.default_settings()}
        environment.add_extension(_TypographyMarkdownExtension(options))
