# mdengine/security.py
"""
Guard for callbacks that cross a plugin boundary.

Callbacks supplied by configuration or third-party code are only invoked
when their owner declares them safe:

    class MyHooks(TrustedCallbackInterface):
        trusted_callbacks = frozenset({"rewrite"})

        def rewrite(self, markdown, context):
            ...

    do_trusted_callback((MyHooks(), "rewrite"), [markdown, context], "%s is not trusted")

Lambdas and functions defined inside another function are always trusted;
they cannot be named from configuration, so they cannot be substituted.
"""

import enum
import inspect
import logging
import types
import warnings

from django.utils.module_loading import import_string

from .errors import (
    UntrustedCallbackDeprecationWarning,
    UntrustedCallbackError,
    UntrustedCallbackWarning,
)

logger = logging.getLogger(__name__)


class ErrorPolicy(str, enum.Enum):
    """What happens when an untrusted callback is invoked."""

    THROW_EXCEPTION = "exception"
    TRIGGER_WARNING = "warning"
    TRIGGER_SILENCED_DEPRECATION = "silenced_deprecation"


class TrustedCallbackInterface:
    """
    Marks a class as owning trusted callbacks.

    ``trusted_callbacks`` lists the method names that may be invoked
    through ``do_trusted_callback``. Anything not listed is untrusted.
    """

    trusted_callbacks: frozenset = frozenset()


def _is_anonymous(callback) -> bool:
    if not isinstance(callback, types.FunctionType):
        return False
    return callback.__name__ == "<lambda>" or "<locals>" in callback.__qualname__


def _resolve(callback):
    """Split a callback into ``(object_or_class, method_name)``.

    ``method_name`` is None when the callback is not a method reference.
    """
    if isinstance(callback, tuple) and len(callback) == 2:
        object_or_class, method_name = callback
        if isinstance(object_or_class, str):
            object_or_class = import_string(object_or_class)
        return object_or_class, method_name
    if isinstance(callback, str) and "::" in callback:
        class_path, method_name = callback.split("::", 1)
        return import_string(class_path), method_name
    if inspect.ismethod(callback):
        return callback.__self__, callback.__func__.__name__
    return callback, None


def _describe(object_or_class, method_name) -> str:
    if isinstance(object_or_class, types.FunctionType) or inspect.isclass(object_or_class):
        owner = object_or_class
    else:
        owner = type(object_or_class)
    description = f"{owner.__module__}.{owner.__qualname__}"
    if method_name:
        description += f"::{method_name}"
    return description


def _is_subclass(object_or_class, parent) -> bool:
    if inspect.isclass(object_or_class):
        return issubclass(object_or_class, parent)
    return isinstance(object_or_class, parent)


def is_trusted_callback(callback, extra_trusted: type | None = None) -> bool:
    """Return whether ``callback`` may be invoked without an error."""
    if _is_anonymous(callback):
        return True

    object_or_class, method_name = _resolve(callback)
    if method_name is None:
        return False

    if extra_trusted is not None and _is_subclass(object_or_class, extra_trusted):
        return not method_name.startswith("_")

    if _is_subclass(object_or_class, TrustedCallbackInterface):
        return method_name in object_or_class.trusted_callbacks

    return False


def do_trusted_callback(
    callback,
    args,
    message: str,
    error_policy: ErrorPolicy = ErrorPolicy.THROW_EXCEPTION,
    extra_trusted: type | None = None,
):
    """
    Invoke ``callback`` with ``args`` if it is trusted.

    Args:
        callback: Bound method, ``(object_or_class, "method")`` tuple,
            ``"dotted.path.Class::method"`` string, or an anonymous function
        args: Positional arguments for the callback
        message: Error message for untrusted callbacks; ``%s`` is replaced
            with a description of the resolved callback
        error_policy: One of ``ErrorPolicy``
        extra_trusted: Optional class; any public method of its instances
            or subclasses is trusted

    Returns:
        The callback's return value, unchanged

    Raises:
        UntrustedCallbackError: The callback is not trusted and the policy
            is ``ErrorPolicy.THROW_EXCEPTION``; the callback is not invoked
    """
    error_policy = ErrorPolicy(error_policy)
    object_or_class, method_name = _resolve(callback)

    if not is_trusted_callback(callback, extra_trusted):
        description = _describe(object_or_class, method_name)
        message = message.replace("%s", description, 1)

        if error_policy is ErrorPolicy.TRIGGER_SILENCED_DEPRECATION:
            warnings.warn(message, UntrustedCallbackDeprecationWarning, stacklevel=2)
        elif error_policy is ErrorPolicy.TRIGGER_WARNING:
            logger.warning(message)
            warnings.warn(message, UntrustedCallbackWarning, stacklevel=2)
        else:
            raise UntrustedCallbackError(message)

    if method_name is not None:
        callback = getattr(object_or_class, method_name)
    return callback(*args)
