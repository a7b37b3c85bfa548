# mdengine/markdown/parsers/extensible.py

import logging

from ..allowed_html import merge_allowed_html
from ..config import ParserConfiguration
from ..extensions import ExtensionCollection, get_definitions
from ..extensions.base import AllowedHtmlInterface, GuidelinesAlterInterface, GuidelinesInterface
from .base import BaseParser

logger = logging.getLogger(__name__)


class ExtensibleParser(BaseParser):
    """
    A parser that owns a collection of extensions.

    Args:
        configuration: See ``BaseParser``
        extension_definitions: Definitions to use instead of the bundled ones
        hooks: See ``BaseParser``
        config: See ``BaseParser``
    """

    # Ids of the extensions from ``EXTENSIONS`` this parser ships with.
    bundled_extensions = ()
    # Extensions enabled by ``default_configuration()``.
    default_enabled_extensions = ()

    def __init__(self, configuration=None, *, extension_definitions=None, hooks=None, config=None):
        if extension_definitions is None:
            extension_definitions = get_definitions(self.bundled_extensions)
        self._extension_definitions = list(extension_definitions)
        self._extension_collection = None
        super().__init__(configuration, hooks=hooks, config=config)

    def get_bundled_extension_ids(self) -> list:
        return [definition.id for definition in self._extension_definitions]

    def default_configuration(self) -> ParserConfiguration:
        configuration = super().default_configuration()
        bundled = set(self.get_bundled_extension_ids())
        configuration.extensions = {
            extension_id: {"enabled": True, "settings": {}}
            for extension_id in self.default_enabled_extensions
            if extension_id in bundled
        }
        return configuration

    def set_configuration(self, configuration) -> None:
        super().set_configuration(configuration)
        bundled = set(self.get_bundled_extension_ids())
        for extension_id in self._configuration.extensions:
            if extension_id not in bundled:
                logger.warning(f"Ignoring configuration for unknown extension '{extension_id}' on '{self.id}'")
        self._extension_collection = None

    def extensions(self) -> ExtensionCollection:
        if self._extension_collection is None:
            self._extension_collection = ExtensionCollection(
                self._extension_definitions,
                self._configuration.extensions,
                parser=self,
            )
        return self._extension_collection

    def extension(self, extension_id: str):
        """Return an extension by id; raises UnknownExtensionError."""
        return self.extensions().get(extension_id)

    def set_extension_configuration(self, extension_id: str, configuration: dict) -> None:
        self.extensions().set_instance_configuration(extension_id, configuration)
        self._configuration.extensions[extension_id] = configuration

    def get_configuration(self) -> ParserConfiguration:
        """
        Current configuration.

        Only active extensions are kept: enabled ones, and disabled ones that
        an enabled extension requires. Everything else is left out so stored
        configuration stays minimal.
        """
        configuration = super().get_configuration()
        configuration.extensions = {
            extension_id: extension.get_configuration() for extension_id, extension in self.extensions().enabled()
        }
        return configuration

    def get_effective_allowed_html(self) -> dict:
        allowlists = [super().get_effective_allowed_html()]
        for _, extension in self.extensions().enabled():
            if isinstance(extension, AllowedHtmlInterface):
                allowlists.append(extension.allowed_html_tags(self))
        return merge_allowed_html(*allowlists)

    def get_guidelines(self) -> dict:
        guides = super().get_guidelines()
        enabled = list(self.extensions().enabled())

        for extension_id, extension in enabled:
            if isinstance(extension, GuidelinesInterface):
                element = extension.get_guidelines()
                if element:
                    guides.setdefault("extensions", {})[extension_id] = element

        for _, extension in enabled:
            if isinstance(extension, GuidelinesAlterInterface):
                extension.alter_guidelines(guides)

        return guides
