# mdengine/markdown/extensions/strikethrough.py
"""
Strikethrough support: ``~~deleted~~`` renders as ``<del>deleted</del>``.
"""

from markdown.extensions import Extension
from markdown.inlinepatterns import SimpleTagInlineProcessor

from .base import (
    AllowedHtmlInterface,
    BaseExtension,
    EnvironmentAwareInterface,
    GuidelinesInterface,
)

STRIKETHROUGH_RE = r"(~{2})(.+?)\1"


class StrikethroughMarkdownExtension(Extension):
    def extendMarkdown(self, md):
        # Below code spans and escapes (190/180), above emphasis (60).
        md.inlinePatterns.register(
            SimpleTagInlineProcessor(STRIKETHROUGH_RE, "del"), "strikethrough", 65
        )


class StrikethroughExtension(
    BaseExtension, AllowedHtmlInterface, EnvironmentAwareInterface, GuidelinesInterface
):
    def allowed_html_tags(self, parser):
        return {"del": {}}

    def get_guidelines(self):
        return {
            "title": self.label,
            "items": [
                {
                    "title": "Strikethrough",
                    "description": "Wrap text in two tildes to strike it through.",
                    "tags": {"del": ["~~Strikethrough~~"]},
                }
            ],
        }

    def set_environment(self, environment):
        environment.add_extension(StrikethroughMarkdownExtension())
