# mdengine/markdown/extensions/collection.py

import logging

from ...errors import UnknownExtensionError

logger = logging.getLogger(__name__)


class ExtensionCollection:
    """
    The extensions available to one parser instance.

    Instances are created lazily from their definitions. Iteration follows
    definition order (``weight``, then declaration order).

    Args:
        definitions: ``ExtensionDefinition`` objects bundled with the parser
        configurations: Mapping of extension id to ``{"enabled", "settings"}``
        parser: The owning parser, passed to each extension
    """

    def __init__(self, definitions, configurations: dict | None = None, parser=None):
        ordered = sorted(enumerate(definitions), key=lambda item: (item[1].weight, item[0]))
        self._definitions = {definition.id: definition for _, definition in ordered}
        self._configurations = dict(configurations or {})
        self._instances = {}
        self.parser = parser

        # Reverse requirements: if B requires A, A is required by B.
        self._required_by = {extension_id: set(d.required_by) for extension_id, d in self._definitions.items()}
        for definition in self._definitions.values():
            for required in definition.requires:
                if required in self._required_by:
                    self._required_by[required].add(definition.id)
                else:
                    logger.warning(
                        f"Extension '{definition.id}' requires unknown extension '{required}'"
                    )

    def ids(self) -> list:
        return list(self._definitions)

    def has(self, extension_id: str) -> bool:
        return extension_id in self._definitions

    def get(self, extension_id: str):
        if extension_id not in self._instances:
            try:
                definition = self._definitions[extension_id]
            except KeyError:
                raise UnknownExtensionError(
                    f"Unknown markdown extension '{extension_id}'. "
                    f"Available: {', '.join(self._definitions) or 'none'}"
                ) from None
            extension = definition.get_class()(
                definition,
                self._configurations.get(extension_id),
                parser=self.parser,
            )
            extension.required_by = set(self._required_by[extension_id])
            self._instances[extension_id] = extension
        return self._instances[extension_id]

    def set_instance_configuration(self, extension_id: str, configuration: dict) -> None:
        if extension_id not in self._definitions:
            raise UnknownExtensionError(f"Unknown markdown extension '{extension_id}'")
        self._configurations[extension_id] = configuration
        self._instances.pop(extension_id, None)

    def __iter__(self):
        for extension_id in self._definitions:
            yield extension_id, self.get(extension_id)

    def __len__(self):
        return len(self._definitions)

    def __contains__(self, extension_id):
        return self.has(extension_id)

    def resolve_enabled(self) -> frozenset:
        """
        Ids of active extensions.

        Starts from the extensions whose own flag is enabled, then adds every
        extension required by an active one until nothing changes. Growth is
        monotonic, so cycles terminate and activate every member once one is
        active. Extensions whose library is not installed never become active.
        """
        installed = {}
        for extension_id, extension in self:
            installed[extension_id] = extension.is_installed()
            if not installed[extension_id] and extension.enabled:
                logger.warning(f"Markdown extension '{extension_id}' is enabled but not installed")

        active = {
            extension_id
            for extension_id, extension in self
            if extension.enabled and installed[extension_id]
        }

        changed = True
        while changed:
            changed = False
            for extension_id, extension in self:
                if extension_id in active or not installed[extension_id]:
                    continue
                if extension.required_by & active:
                    logger.debug(
                        f"Enabling markdown extension '{extension_id}', "
                        f"required by {', '.join(sorted(extension.required_by & active))}"
                    )
                    active.add(extension_id)
                    changed = True

        return frozenset(active)

    def is_active(self, extension_id: str) -> bool:
        self.get(extension_id)
        return extension_id in self.resolve_enabled()

    def enabled(self):
        """Iterate ``(id, extension)`` pairs for active extensions, in order."""
        active = self.resolve_enabled()
        for extension_id, extension in self:
            if extension_id in active:
                yield extension_id, extension
