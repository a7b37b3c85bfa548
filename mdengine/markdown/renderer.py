# mdengine/markdown/renderer.py

import hashlib
import json
import logging

from django.core.cache import cache

from .parsed import ParsedMarkdown
from .parsers import BaseParser, get_parser

logger = logging.getLogger(__name__)


def cache_key(parser: BaseParser, text: str, language: str | None = None) -> str:
    """Key covering everything the output depends on."""
    # base_url decides which links are internal.
    payload = json.dumps(
        [parser.id, text, language, parser.get_configuration().as_dict(), parser.config.get("base_url")],
        sort_keys=True,
        default=str,
    )
    return "mdengine:parsed:" + hashlib.sha256(payload.encode("utf-8")).hexdigest()


def render_markdown(text, language=None, parser=None) -> ParsedMarkdown:
    """
    Main rendering function

    Args:
        text: Raw markdown text
        language: Optional language code of the text
        parser: Parser instance or id; defaults to the configured parser

    Returns:
        ParsedMarkdown whose html already went through the render strategy
    """
    if not isinstance(parser, BaseParser):
        parser = get_parser(parser)
    text = text or ""

    timeout = parser.config.get("cache_timeout")
    if timeout is None:
        return parser.parse(text, language)

    key = cache_key(parser, text, language)
    parsed = cache.get(key)
    if parsed is None:
        parsed = parser.parse(text, language)
        cache.set(key, parsed, timeout)
    else:
        logger.debug(f"Using cached markdown for key {key}")
    return parsed
