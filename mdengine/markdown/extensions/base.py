# mdengine/markdown/extensions/base.py
"""
Building blocks for parser extensions.

An extension is described by an ``ExtensionDefinition`` and instantiated by
an ``ExtensionCollection``. Optional behavior is expressed through the
capability mixins below; the parser checks for each one with
``isinstance`` and skips extensions that do not implement it.
"""

import importlib.util
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from django.utils.module_loading import import_string

from ...conf import Settings


@dataclass(frozen=True)
class ExtensionDefinition:
    """
    Static description of an extension.

    Args:
        id: Identifier, unique within a parser
        label: Human readable name
        extension_class: Class or dotted path to it
        description: Short description
        url: Documentation URL
        requires: Ids of extensions that must be active when this one is
        required_by: Ids of extensions that need this one
        weight: Ordering within a collection, lower first
        installed: Module that must be importable for the extension to work
    """

    id: str
    label: str
    extension_class: object
    description: str = ""
    url: str = ""
    requires: frozenset = field(default_factory=frozenset)
    required_by: frozenset = field(default_factory=frozenset)
    weight: int = 0
    installed: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "requires", frozenset(self.requires))
        object.__setattr__(self, "required_by", frozenset(self.required_by))

    def get_class(self):
        if isinstance(self.extension_class, str):
            return import_string(self.extension_class)
        return self.extension_class

    def is_installed(self) -> bool:
        if not self.installed:
            return True
        try:
            return importlib.util.find_spec(self.installed) is not None
        except ModuleNotFoundError:
            return False


class BaseExtension:
    """
    A single unit of rendering behavior owned by a parser.

    ``enabled`` is the extension's own stored flag. Whether it is actually
    active also depends on the extensions that require it; ask the owning
    collection (``ExtensionCollection.is_active``) for that.
    """

    def __init__(self, definition: ExtensionDefinition, configuration: dict | None = None, parser=None):
        configuration = configuration or {}
        self.definition = definition
        self.parser = parser
        self.enabled = bool(configuration.get("enabled", False))
        self.settings = Settings(self.default_settings(), configuration.get("settings"))
        # Filled in by the collection: declared dependents plus reverse requirements.
        self.required_by = set(definition.required_by)

    @classmethod
    def default_settings(cls) -> dict:
        return {}

    @property
    def id(self) -> str:
        return self.definition.id

    @property
    def label(self) -> str:
        return self.definition.label

    @property
    def requires(self) -> frozenset:
        return self.definition.requires

    def is_installed(self) -> bool:
        return self.definition.is_installed()

    def get_setting(self, key: str, default=None):
        return self.settings.get(key, default)

    def set_setting(self, key: str, value) -> None:
        self.settings.set(key, value)

    def get_configuration(self) -> dict:
        return {"enabled": self.enabled, "settings": self.settings.all()}

    def __repr__(self):
        return f"<{type(self).__name__} id={self.id!r} enabled={self.enabled}>"


class AllowedHtmlInterface(ABC):
    """Extension contributes tags to the sanitizer allowlist."""

    @abstractmethod
    def allowed_html_tags(self, parser) -> dict:
        """Return an allowlist (string or mapping form)."""


class GuidelinesInterface(ABC):
    """Extension adds its own entries to the parser guidelines."""

    @abstractmethod
    def get_guidelines(self) -> dict:
        """Return a guideline group: ``{"title": ..., "items": [...]}``."""


class GuidelinesAlterInterface(ABC):
    """Extension alters the guidelines built by the parser."""

    @abstractmethod
    def alter_guidelines(self, guides: dict) -> None:
        """Modify ``guides`` in place."""


class SettingsInterface(ABC):
    """
    Extension merges its settings into the backend environment config.

    ``settings_key`` is the environment config key; returning None keeps
    the settings private to the extension.
    """

    @abstractmethod
    def settings_key(self) -> str | None:
        """Key under which settings are merged."""


class EnvironmentAwareInterface(ABC):
    """Extension registers behavior with the backend environment."""

    @abstractmethod
    def set_environment(self, environment) -> None:
        """Register with ``environment`` before conversion."""
