# mdengine/templatetags/markdown_tags.py

from django import template
from django.utils.safestring import mark_safe

from mdengine.markdown.renderer import render_markdown

register = template.Library()


# The parser's render strategy has already been applied, so the HTML is
# marked safe. With the "none" strategy that is the operator's choice.
@register.filter(name="markdown")
def markdown_filter(value, language=None):
    return mark_safe(render_markdown(value, language=language).html)


@register.simple_tag(takes_context=True)
def markdown_parse(context, value, parser=None, language=None):
    """Template tag with an explicit parser; language defaults to LANGUAGE_CODE"""
    language = language or context.get("LANGUAGE_CODE")
    return mark_safe(render_markdown(value, language=language, parser=parser).html)
