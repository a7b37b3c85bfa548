# mdengine/markdown/parsers/__init__.py

from django.utils.module_loading import import_string

from ...conf import get_config
from ...errors import UnknownParserError
from .base import BaseParser
from .extensible import ExtensibleParser

PARSERS = {
    "python_markdown": "mdengine.markdown.parsers.python_markdown.PythonMarkdownParser",
    "pandoc": "mdengine.markdown.parsers.pandoc.PandocParser",
}


def get_parser_class(parser_id: str):
    try:
        return import_string(PARSERS[parser_id])
    except KeyError:
        raise UnknownParserError(
            f"Unknown markdown parser '{parser_id}'. Available: {', '.join(PARSERS)}"
        ) from None


def get_parser(parser_id: str | None = None, configuration=None, **kwargs) -> BaseParser:
    """
    Instantiate a parser by id.

    Args:
        parser_id: Registered parser id; defaults to the ``parser`` setting
        configuration: Parser configuration; defaults to the stored one
        **kwargs: Passed to the parser constructor (``hooks``, ``config``, ...)
    """
    config = kwargs.get("config") or get_config()
    kwargs["config"] = config
    parser_id = parser_id or config.get("parser")
    return get_parser_class(parser_id)(configuration, **kwargs)


__all__ = ["PARSERS", "BaseParser", "ExtensibleParser", "get_parser", "get_parser_class"]
