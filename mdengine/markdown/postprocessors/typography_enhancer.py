# mdengine/markdown/postprocessors/typography_enhancer.py
"""
Typography fixes applied to rendered HTML.

- Wraps adjacent <sub> and <sup> elements in a span with "subsup" class
- Adds word-break opportunities (<wbr> tags) after slashes in paths/URLs
- Normalizes non-breaking spaces outside code

Smart quotes, dashes and ellipses are handled by the smart punctuation
extension during conversion, so they are NOT implemented here.
"""

import re

from bs4 import BeautifulSoup, NavigableString, Tag

_SLASH_RUN = re.compile(r"(/+)")
_EXCLUDED_WORD_BREAK = {"pre", "script", "style", "noscript"}
_EXCLUDED_NBSP = {"pre", "code"}


def _inside(node, names: set) -> bool:
    parent = node.parent
    while parent is not None:
        if isinstance(parent, Tag) and parent.name in names:
            return True
        parent = parent.parent
    return False


def _next_tag_sibling(node):
    """Next sibling, skipping whitespace-only text. None if text intervenes."""
    sibling = node.next_sibling
    while isinstance(sibling, NavigableString):
        if sibling.strip():
            return None
        sibling = sibling.next_sibling
    return sibling


def _wrap_subsup_pairs(soup: BeautifulSoup) -> None:
    pairs = {"sub": "sup", "sup": "sub"}
    for first in soup.find_all(["sub", "sup"]):
        if first.parent is not None and "subsup" in first.parent.get("class", []):
            continue
        second = _next_tag_sibling(first)
        if not isinstance(second, Tag) or second.name != pairs[first.name]:
            continue

        wrapper = soup.new_tag("span")
        wrapper["class"] = ["subsup"]
        first.insert_before(wrapper)

        node = first
        while node is not None:
            following = node.next_sibling
            wrapper.append(node.extract())
            if node is second:
                break
            node = following


def _add_word_breaks(soup: BeautifulSoup) -> None:
    # Collect first; the tree is modified while replacing nodes.
    text_nodes = [
        node
        for node in soup.find_all(string=True)
        if type(node) is NavigableString and not _inside(node, _EXCLUDED_WORD_BREAK)
    ]

    for node in text_nodes:
        text = str(node)
        if not re.search(r"/+[^/]", text):
            continue

        parts = [part for part in _SLASH_RUN.split(text) if part]
        for index, part in enumerate(parts):
            node.insert_before(soup.new_string(part))
            if part.startswith("/") and index < len(parts) - 1:
                node.insert_before(soup.new_tag("wbr"))
        node.extract()


def _normalize_nbsp(soup: BeautifulSoup) -> None:
    for node in soup.find_all(string=True):
        if "\xa0" not in node or _inside(node, _EXCLUDED_NBSP):
            continue
        # Keep nbsp between a number and a unit ("5\xa0km").
        node.replace_with(re.sub(r"(?<![0-9])\xa0(?![A-Za-z])", " ", str(node)))


def typography_enhancer(
    html: str,
    wrap_subsup_pairs: bool = True,
    add_word_breaks: bool = True,
    normalize_nbsp: bool = True,
) -> str:
    """
    Enhance typography in an HTML fragment.

    Args:
        html: HTML string to process
        wrap_subsup_pairs: Wrap adjacent sub/sup pairs in span.subsup
        add_word_breaks: Add <wbr> tags after slashes for better URL wrapping
        normalize_nbsp: Convert non-breaking spaces to regular spaces where appropriate

    Returns:
        Processed HTML
    """
    soup = BeautifulSoup(html, "html.parser")

    if wrap_subsup_pairs:
        _wrap_subsup_pairs(soup)

    if add_word_breaks:
        _add_word_breaks(soup)

    if normalize_nbsp:
        _normalize_nbsp(soup)

    return str(soup)
