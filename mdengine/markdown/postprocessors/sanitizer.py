# mdengine/markdown/postprocessors/sanitizer.py

import fnmatch
import html as html_lib
import logging
import re

import bleach
from bs4 import BeautifulSoup

from ..allowed_html import parse_allowed_html
from ..config import DisallowedTags

logger = logging.getLogger(__name__)

ALLOWED_PROTOCOLS = ["http", "https", "mailto", "tel"]


def _attribute_filter(allowlist: dict):
    """Build a bleach attribute callable that honors wildcards and value sets."""
    global_attributes = allowlist.get("*", {})

    def _match(attributes: dict, name: str, value: str) -> bool:
        for pattern, values in attributes.items():
            if pattern == name or (pattern.endswith("*") and fnmatch.fnmatchcase(name, pattern)):
                if values is None or value in values:
                    return True
        return False

    def allow(tag, name, value):
        return _match(allowlist.get(tag, {}), name, value) or _match(global_attributes, name, value)

    return allow


def _remove_disallowed_elements(html: str, tags: set) -> str:
    soup = BeautifulSoup(html, "html.parser")
    for element in soup.find_all(True):
        if element.decomposed:
            continue
        if element.name not in tags:
            element.decompose()
    return str(soup)


def sanitize_html(
    html: str,
    allowed_html,
    *,
    disallowed_tags=DisallowedTags.UNWRAP,
    protocols=None,
    language: str | None = None,
) -> str:
    """
    Reduce HTML to the tags and attributes in an allowlist.

    Args:
        html: HTML to sanitize
        allowed_html: Allowlist, as a mapping or in string form
        disallowed_tags: ``unwrap`` drops disallowed tags but keeps their
            text, ``escape`` renders them as text, ``remove`` deletes them
            together with their content
        protocols: URL schemes permitted in href/src attributes
        language: Language of the text; unused by the sanitizer itself

    Returns:
        Sanitized HTML
    """
    if not html:
        return ""

    allowlist = parse_allowed_html(allowed_html)
    tags = {tag for tag in allowlist if tag != "*"}
    disallowed_tags = DisallowedTags(disallowed_tags)

    if disallowed_tags is DisallowedTags.REMOVE:
        html = _remove_disallowed_elements(html, tags)

    logger.debug(f"Sanitizing {len(html)} characters of HTML against {len(tags)} allowed tags")

    return bleach.clean(
        html,
        tags=tags,
        attributes=_attribute_filter(allowlist),
        protocols=protocols or ALLOWED_PROTOCOLS,
        strip=disallowed_tags is not DisallowedTags.ESCAPE,
        strip_comments=True,
    )


# Attributes whose value is loaded or followed as a URL.
URL_ATTRIBUTES = ("href", "src", "action", "formaction", "poster", "cite", "background")

_SCHEME_RE = re.compile(r"^([a-z][a-z0-9+.-]*):")
_URL_NOISE_RE = re.compile(r"[\x00-\x20\x7f]+")


def is_safe_url(value: str, protocols=None) -> bool:
    """Relative URLs are safe; absolute ones need an allowed scheme."""
    normalized = _URL_NOISE_RE.sub("", html_lib.unescape(value)).lower()
    match = _SCHEME_RE.match(normalized)
    if match is None:
        return True
    return match.group(1) in (protocols or ALLOWED_PROTOCOLS)


def strip_unsafe_urls(html: str, protocols=None) -> str:
    """
    Drop URL attributes with a disallowed scheme, leaving tags alone.

    Used by the input render strategies: the backend can still turn
    ``[x](javascript:...)`` into a link even though no source HTML survives.
    """
    if not html:
        return ""

    soup = BeautifulSoup(html, "html.parser")
    removed = 0
    for element in soup.find_all(True):
        for attribute in URL_ATTRIBUTES:
            value = element.get(attribute)
            if value is not None and not is_safe_url(value, protocols):
                del element[attribute]
                removed += 1

    if not removed:
        return html

    logger.debug(f"Removed {removed} URL attributes with disallowed protocols")
    return str(soup)
