# mdengine/markdown/postprocessors/__init__.py

from .sanitizer import ALLOWED_PROTOCOLS, sanitize_html, strip_unsafe_urls
from .typography_enhancer import typography_enhancer

__all__ = ["ALLOWED_PROTOCOLS", "sanitize_html", "strip_unsafe_urls", "typography_enhancer"]
