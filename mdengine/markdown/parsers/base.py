# mdengine/markdown/parsers/base.py

import copy
import logging
from abc import ABC, abstractmethod

from ...conf import Settings, get_config
from ..allowed_html import ALLOWED_HTML, get_allowed_html_plugin, merge_allowed_html, parse_allowed_html
from ..config import ParserConfiguration, RenderStrategy
from ..extensions.base import AllowedHtmlInterface
from ..guidelines import default_guidelines
from ..hooks import hooks as default_hooks
from ..parsed import ParsedMarkdown
from ..postprocessors.sanitizer import sanitize_html, strip_unsafe_urls
from ..preprocessors import apply_input_strategy

logger = logging.getLogger(__name__)


class BaseParser(ABC):
    """
    Base class for markdown parsers.

    Subclasses implement ``convert_to_html`` for a specific backend; callers
    use ``parse``, which applies the configured render strategy around the
    conversion.

    Args:
        configuration: ``ParserConfiguration`` or its persisted dict form.
            Defaults to ``parsers.<id>`` from the configuration store, or
            ``default_configuration()`` when that is not set
        hooks: Hook registry to run; defaults to the module-level registry
        config: Configuration store; defaults to ``get_config()``
    """

    id = None
    label = ""
    description = ""

    def __init__(self, configuration=None, *, hooks=None, config=None):
        self.config = config if config is not None else get_config()
        self.hooks = hooks if hooks is not None else default_hooks
        if configuration is None:
            stored = self.config.get(f"parsers.{self.id}")
            configuration = ParserConfiguration.from_dict(stored) if stored else self.default_configuration()
        self.set_configuration(configuration)

    @classmethod
    def is_installed(cls) -> bool:
        return True

    @classmethod
    def default_settings(cls) -> dict:
        return {}

    def default_configuration(self) -> ParserConfiguration:
        return ParserConfiguration(settings=self.default_settings())

    def set_configuration(self, configuration) -> None:
        if isinstance(configuration, ParserConfiguration):
            configuration = copy.deepcopy(configuration)
        else:
            configuration = ParserConfiguration.from_dict(configuration)
        self._configuration = configuration
        self.settings = Settings(self.default_settings(), configuration.settings)

    def get_configuration(self) -> ParserConfiguration:
        render_strategy = self.get_render_strategy()
        configuration = ParserConfiguration(render_strategy=render_strategy, settings=self.settings.all())
        if render_strategy is RenderStrategy.FILTER_OUTPUT:
            configuration.allowed_html = copy.deepcopy(self._configuration.allowed_html)
            configuration.allowed_html_plugins = self.get_allowed_html_plugins()
            configuration.disallowed_tags = self._configuration.disallowed_tags
        return configuration

    def get_setting(self, key: str, default=None):
        return self.settings.get(key, default)

    def get_render_strategy(self) -> RenderStrategy:
        return self._configuration.render_strategy

    def get_allowed_html(self) -> dict:
        """The base allowlist, before plugins and extensions are merged in."""
        if self._configuration.allowed_html is not None:
            return copy.deepcopy(self._configuration.allowed_html)
        return parse_allowed_html(ALLOWED_HTML)

    def get_allowed_html_plugins(self) -> list:
        return list(self._configuration.allowed_html_plugins)

    def get_effective_allowed_html(self) -> dict:
        """Allowlist used by the sanitizer: base, plugins, then contributors."""
        allowlists = [self.get_allowed_html()]
        allowlists += [get_allowed_html_plugin(plugin_id) for plugin_id in self.get_allowed_html_plugins()]
        if isinstance(self, AllowedHtmlInterface):
            allowlists.append(self.allowed_html_tags(self))
        return merge_allowed_html(*allowlists)

    def get_context(self, **context) -> dict:
        """Context passed to hooks."""
        return {"parser": self, **context}

    def get_guidelines(self) -> dict:
        return default_guidelines(
            base_url=self.config.get("base_url", ""),
            site_name=self.config.get("site_name", ""),
        )

    @abstractmethod
    def convert_to_html(self, markdown: str, language: str | None = None) -> str:
        """
        Convert markdown to HTML with the backend.

        The result is NOT safe to output: it is the backend's raw HTML. Use
        ``parse`` to get HTML that went through the render strategy.
        """

    def parse(self, markdown: str, language: str | None = None) -> ParsedMarkdown:
        """
        Parse markdown into HTML, applying the render strategy.

        Backend errors propagate; there is no partial result.

        Args:
            markdown: Untrusted markdown source
            language: Optional language code, passed to hooks

        Returns:
            ParsedMarkdown with the original source and the final HTML
        """
        source = markdown or ""
        render_strategy = self.get_render_strategy()
        logger.debug(f"Parsing {len(source)} characters with '{self.id}' ({render_strategy.value})")

        text = apply_input_strategy(source, render_strategy)

        context = self.get_context(language=language)
        text = self.hooks.alter_before_convert(text, context)

        html = self.convert_to_html(text, language)

        context["markdown"] = text
        html = self.hooks.alter_after_convert(html, context)

        if render_strategy is RenderStrategy.FILTER_OUTPUT:
            html = sanitize_html(
                html,
                self.get_effective_allowed_html(),
                disallowed_tags=self._configuration.disallowed_tags,
                language=language,
            )
        elif render_strategy in (RenderStrategy.ESCAPE_INPUT, RenderStrategy.STRIP_INPUT):
            # No source HTML survives, but markdown links can still carry any scheme.
            html = strip_unsafe_urls(html)

        return ParsedMarkdown.create(source, html, language)

    def __repr__(self):
        return f"<{type(self).__name__} id={self.id!r}>"
