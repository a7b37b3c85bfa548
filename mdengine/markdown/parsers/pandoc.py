# mdengine/markdown/parsers/pandoc.py

import logging

import pypandoc

from ...errors import BackendConversionError
from ..config import get_pandoc_config
from ..extensions.base import AllowedHtmlInterface
from .base import BaseParser

logger = logging.getLogger(__name__)


class PandocParser(BaseParser, AllowedHtmlInterface):
    """
    Converts markdown with Pandoc through pypandoc.

    Pandoc has built-in support for strikethrough, smart typography,
    tables, task lists and more, enabled through ``pandoc_extensions``;
    this parser does not take mdengine extensions.
    """

    id = "pandoc"
    label = "Pandoc"
    description = "Converts markdown with the Pandoc binary."

    @classmethod
    def is_installed(cls) -> bool:
        try:
            pypandoc.get_pandoc_version()
        except OSError:
            return False
        return True

    @classmethod
    def default_settings(cls):
        return {
            "format": "markdown",
            "pandoc_extensions": [
                "autolink_bare_uris",
                "strikeout",
                "superscript",
                "subscript",
                "task_lists",
                "smart",
                "pipe_tables",
                "fenced_code_attributes",
            ],
            "extra_args": [],
            "wrap": "none",
        }

    def allowed_html_tags(self, parser):
        # Markup Pandoc emits for the default extensions.
        return (
            "<del> <sup> <sub> <span class> <div class> <code class> <pre class> "
            "<input type checked disabled> <section id class>"
        )

    def convert_to_html(self, markdown_text, language=None):
        pandoc_config = get_pandoc_config(self.settings)
        try:
            return pypandoc.convert_text(
                markdown_text,
                to=pandoc_config["to"],
                format=pandoc_config["format"],
                extra_args=pandoc_config["extra_args"],
            )
        except RuntimeError as e:
            logger.error(f"Pandoc conversion failed: {e}")
            raise BackendConversionError(f"Pandoc could not convert markdown: {e}") from e
