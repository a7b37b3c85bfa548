# mdengine/markdown/hooks.py
"""
Alteration hooks run around markdown conversion.

Two hooks exist:

1. ``markdown`` (alter_before_convert)
   ↓ (Markdown source, after the render strategy's input filter)

2. ``markdown_html`` (alter_after_convert)
   ↓ (HTML returned by the backend, before output filtering)

Callbacks take ``(subject, context)`` and return the new subject; returning
None keeps the subject unchanged. They run sequentially in registration
order. Every callback goes through ``do_trusted_callback``, so it must be a
lambda, a method of a ``MarkdownHooks`` subclass, or a method listed in a
``TrustedCallbackInterface`` class's ``trusted_callbacks``.
"""

import inspect
import logging

from django.utils.module_loading import import_string

from ..conf import get_config
from ..security import ErrorPolicy, do_trusted_callback

logger = logging.getLogger(__name__)

MARKDOWN = "markdown"
MARKDOWN_HTML = "markdown_html"
HOOKS = (MARKDOWN, MARKDOWN_HTML)


class MarkdownHooks:
    """Base class for hook owners; all public methods are trusted."""

    def alter_markdown(self, markdown, context):
        return markdown

    def alter_markdown_html(self, html, context):
        return html


class HookRegistry:
    def __init__(self, error_policy=ErrorPolicy.THROW_EXCEPTION):
        self.error_policy = ErrorPolicy(error_policy)
        self._callbacks = {hook: [] for hook in HOOKS}

    def _check(self, hook):
        if hook not in self._callbacks:
            raise ValueError(f"Unknown markdown hook '{hook}'. Expected one of: {', '.join(HOOKS)}")

    def register(self, hook: str, callback) -> None:
        self._check(hook)
        self._callbacks[hook].append(callback)

    def unregister(self, hook: str, callback) -> None:
        self._check(hook)
        self._callbacks[hook].remove(callback)

    def register_hooks(self, hooks: MarkdownHooks) -> None:
        """Register both alter methods of a ``MarkdownHooks`` instance."""
        self.register(MARKDOWN, hooks.alter_markdown)
        self.register(MARKDOWN_HTML, hooks.alter_markdown_html)

    def callbacks(self, hook: str) -> list:
        self._check(hook)
        return list(self._callbacks[hook])

    def clear(self) -> None:
        for callbacks in self._callbacks.values():
            callbacks.clear()

    def alter(self, hook: str, subject: str, context: dict) -> str:
        for callback in self.callbacks(hook):
            result = do_trusted_callback(
                callback,
                [subject, context],
                f"Markdown hook '{hook}' callback %s is not trusted. Subclass MarkdownHooks "
                "or list the method in TrustedCallbackInterface.trusted_callbacks.",
                self.error_policy,
                extra_trusted=MarkdownHooks,
            )
            if result is not None:
                subject = result
        return subject

    def alter_before_convert(self, markdown: str, context: dict) -> str:
        return self.alter(MARKDOWN, markdown, context)

    def alter_after_convert(self, html: str, context: dict) -> str:
        return self.alter(MARKDOWN_HTML, html, context)


def load_hooks_from_config(registry: "HookRegistry", config=None) -> None:
    """
    Register hooks named in configuration.

    Entries are ``"dotted.path.Class::method"`` strings. ``MarkdownHooks``
    subclasses are instantiated once and their bound method is registered;
    other classes must name a static or class method. The error policy is
    taken from ``hooks.error_policy``.
    """
    config = config or get_config()
    registry.error_policy = ErrorPolicy(config.get("hooks.error_policy", ErrorPolicy.THROW_EXCEPTION))
    instances = {}
    for hook in HOOKS:
        for callback in config.get(f"hooks.{hook}", []):
            logger.debug(f"Registering '{hook}' hook from configuration: {callback}")
            registry.register(hook, _bind_hook(callback, instances))


def _bind_hook(callback, instances: dict):
    if not isinstance(callback, str) or "::" not in callback:
        return callback
    class_path, method_name = callback.split("::", 1)
    owner = import_string(class_path)
    if not (inspect.isclass(owner) and issubclass(owner, MarkdownHooks)):
        return callback
    if not inspect.isfunction(inspect.getattr_static(owner, method_name)):
        # Static and class methods are called on the class itself.
        return callback
    if class_path not in instances:
        instances[class_path] = owner()
    return getattr(instances[class_path], method_name)


# Default registry used by parsers that are not given one explicitly.
hooks = HookRegistry()
