# mdengine/markdown/__init__.py
"""
Markdown to HTML rendering with pluggable parsers and extensions.

    from mdengine.markdown import get_parser

    parser = get_parser("python_markdown")
    parsed = parser.parse("**bold** <script>alert(1)</script>")
    parsed.html  # '<p><strong>bold</strong> alert(1)</p>'

Pipeline for ``parse``:

1. Input filter (escape_input / strip_input render strategies)
2. ``markdown`` hooks
3. Backend conversion (``convert_to_html``)
4. ``markdown_html`` hooks
5. Output sanitizer (filter_output render strategy)
"""

from .config import DisallowedTags, ParserConfiguration, RenderStrategy
from .hooks import HookRegistry, MarkdownHooks, hooks
from .parsed import ParsedMarkdown
from .parsers import BaseParser, ExtensibleParser, get_parser
from .renderer import render_markdown

__all__ = [
    "BaseParser",
    "DisallowedTags",
    "ExtensibleParser",
    "HookRegistry",
    "MarkdownHooks",
    "ParsedMarkdown",
    "ParserConfiguration",
    "RenderStrategy",
    "get_parser",
    "hooks",
    "render_markdown",
]
