# mdengine/markdown/allowed_html.py
"""
Tag allowlists used by the "filter output" render strategy.

An allowlist maps a tag name to the attributes permitted on it. Each
attribute maps to a frozenset of permitted values, or None when any value
is permitted:

    {"a": {"href": None, "target": frozenset({"_blank"})}, "em": {}}

The "*" tag holds attributes permitted on every allowed tag. Attribute names
ending in "*" match by prefix (``data-*``).

Allowlists can also be written in the compact string form used in
configuration files:

    <a href target="_blank"> <em> <* class>
"""

import re

from ..errors import UnknownAllowedHtmlPluginError

TagAllowlist = dict[str, dict[str, frozenset | None]]

ALLOWED_HTML = (
    "<a href hreflang title> <abbr title> <blockquote cite> <br> <cite> <code class> "
    "<dd> <del> <dl> <dt> <em> <h1 id> <h2 id> <h3 id> <h4 id> <h5 id> <h6 id> <hr> "
    "<img src alt title width height> <li> <ol start type> <p> <pre class> <strong> "
    "<table> <thead> <tbody> <tfoot> <tr> <th colspan rowspan scope align> "
    "<td colspan rowspan align> <ul type>"
)

# Standalone allowlist providers that a parser configuration can opt into by
# id through ``allowed_html_plugins``.
ALLOWED_HTML_PLUGINS = {
    "media": (
        "<figure> <figcaption> <picture> <source src srcset type media> "
        "<video src width height controls preload loop muted poster> "
        "<audio src controls preload loop muted> <track src kind srclang label default>"
    ),
    "mathml": (
        "<math xmlns display alttext> <mrow> <mi mathvariant> "
        "<mo stretchy largeop movablelimits symmetric maxsize minsize form> <mn> "
        "<msup> <msub> <msubsup> <mfrac linethickness bevelled> <msqrt> <mroot> "
        "<mtext> <menclose notation> <mspace width height depth> <mpadded> <mphantom> "
        "<mtable columnalign rowspacing columnspacing displaystyle> <mtr columnalign> "
        "<mtd columnalign rowspan colspan> <semantics> <annotation> <annotation-xml>"
    ),
    "svg": (
        "<svg xmlns viewBox role aria-hidden focusable> <path d fill stroke stroke-width> "
        "<g fill stroke stroke-width>"
    ),
}

_TAG_RE = re.compile(r"<\s*([a-zA-Z0-9*-]+)([^>]*)>")
_ATTRIBUTE_RE = re.compile(r"""([a-zA-Z0-9_:*-]+)(?:\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"'>]+)))?""")


def parse_allowed_html(value) -> TagAllowlist:
    """
    Normalize an allowlist given as a string or a mapping.

    Args:
        value: String form (``"<a href> <em>"``), a mapping of tag to
            attributes, or None

    Returns:
        A new allowlist; attribute value constraints are frozensets
    """
    if not value:
        return {}

    allowlist = {}
    if isinstance(value, str):
        for match in _TAG_RE.finditer(value):
            tag = match.group(1).lower()
            attributes = allowlist.setdefault(tag, {})
            for attribute in _ATTRIBUTE_RE.finditer(match.group(2)):
                name = attribute.group(1).lower()
                raw = next((g for g in attribute.groups()[1:] if g is not None), None)
                values = frozenset(raw.split()) if raw is not None else None
                _merge_attribute(attributes, name, values)
        return allowlist

    for tag, attributes in value.items():
        normalized = allowlist.setdefault(tag.lower(), {})
        if isinstance(attributes, dict):
            items = attributes.items()
        else:
            items = ((name, None) for name in attributes or ())
        for name, values in items:
            if values is not None and not isinstance(values, frozenset):
                values = frozenset([values] if isinstance(values, str) else values)
            _merge_attribute(normalized, name.lower(), values)
    return allowlist


def _merge_attribute(attributes: dict, name: str, values) -> None:
    if name not in attributes:
        attributes[name] = values
    elif attributes[name] is None or values is None:
        attributes[name] = None
    else:
        attributes[name] = attributes[name] | values


def merge_allowed_html(*allowlists) -> TagAllowlist:
    """Union any number of allowlists (strings or mappings)."""
    merged = {}
    for allowlist in allowlists:
        for tag, attributes in parse_allowed_html(allowlist).items():
            target = merged.setdefault(tag, {})
            for name, values in attributes.items():
                _merge_attribute(target, name, values)
    return merged


def format_allowed_html(allowlist) -> str:
    """Render an allowlist in its string form, sorted for stable output."""
    parts = []
    for tag, attributes in sorted(parse_allowed_html(allowlist).items()):
        tokens = [tag]
        for name, values in sorted(attributes.items()):
            if values is None:
                tokens.append(name)
            else:
                tokens.append(f'{name}="{" ".join(sorted(values))}"')
        parts.append(f"<{' '.join(tokens)}>")
    return " ".join(parts)


def get_allowed_html_plugin(plugin_id: str) -> TagAllowlist:
    try:
        return parse_allowed_html(ALLOWED_HTML_PLUGINS[plugin_id])
    except KeyError:
        raise UnknownAllowedHtmlPluginError(
            f"Unknown allowed HTML plugin '{plugin_id}'. "
            f"Available: {', '.join(sorted(ALLOWED_HTML_PLUGINS))}"
        ) from None
