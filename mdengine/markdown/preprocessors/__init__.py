# mdengine/markdown/preprocessors/__init__.py
"""Input filters applied before conversion by the escape/strip render strategies."""

from django.utils.html import escape, strip_tags

from ..config import RenderStrategy


def escape_input(text: str) -> str:
    """HTML-escape the source so angle brackets can never become markup."""
    return str(escape(text))


def strip_input(text: str) -> str:
    """Remove all HTML tags from the source."""
    return strip_tags(text)


def apply_input_strategy(text: str, render_strategy: RenderStrategy) -> str:
    """Apply the input half of a render strategy."""
    if render_strategy is RenderStrategy.ESCAPE_INPUT:
        return escape_input(text)
    if render_strategy is RenderStrategy.STRIP_INPUT:
        return strip_input(text)
    return text
