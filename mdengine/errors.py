"""Error hierarchy for the markdown engine."""


class MarkdownError(Exception):
    """Base for all mdengine errors."""


class UnknownParserError(MarkdownError, LookupError):
    """Raised when a parser id is not registered."""


class UnknownExtensionError(MarkdownError, LookupError):
    """Raised when an extension id is not part of a parser's bundle."""


class UnknownAllowedHtmlPluginError(MarkdownError, LookupError):
    """Raised when an allowed HTML plugin id is not registered."""


class BackendConversionError(MarkdownError):
    """Raised by a parser backend when it cannot convert markdown."""


class UntrustedCallbackError(MarkdownError):
    """Raised when an untrusted callback is invoked under the exception policy."""


class UntrustedCallbackWarning(UserWarning):
    """Emitted when an untrusted callback is invoked under the warning policy."""


class UntrustedCallbackDeprecationWarning(PendingDeprecationWarning):
    """Emitted for untrusted callbacks under the silenced deprecation policy.

    ``PendingDeprecationWarning`` is ignored by the default warning filters,
    so nothing is shown unless the caller opts in.
    """
