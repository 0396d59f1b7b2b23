# src/picocompat/plugins/registry.py
"""Registry of loaded legacy plugins, partitioned by API revision.

Loading plugins is the host's job; the registry only records what was
loaded and which legacy handlers each plugin implements. Handler
presence is checked once at registration so dispatch never has to
introspect plugin objects.
"""

from dataclasses import dataclass
from typing import Any

from picocompat.contracts import ApiRevision, LegacyEvent
from picocompat.core.logging import get_logger

logger = get_logger(__name__)


def detect_capabilities(plugin: Any) -> frozenset[LegacyEvent]:
    """Return the legacy events a plugin has a callable handler for.

    NOTE: This getattr is at the LEGACY PLUGIN TRUST BOUNDARY - legacy
    plugins declare handlers by method name only, there is no interface
    to check against.
    """
    return frozenset(event for event in LegacyEvent if callable(getattr(plugin, event.value, None)))


def detect_revision(plugin: Any) -> ApiRevision:
    """Read the API revision a plugin declares.

    Plugins written for API v0 predate any version declaration, so a
    plugin without an `api_version` attribute is an API v0 plugin.
    """
    declared = getattr(plugin, "api_version", ApiRevision.V0)
    return ApiRevision.parse(declared)


@dataclass(frozen=True, eq=False)
class LegacyPluginHandle:
    """Registration record for one loaded legacy plugin."""

    name: str
    plugin: Any
    revision: ApiRevision
    capabilities: frozenset[LegacyEvent]

    def implements(self, event: LegacyEvent) -> bool:
        return event in self.capabilities


class LegacyPluginRegistry:
    """Read view of loaded plugins by declared API revision.

    Usage:
        registry = LegacyPluginRegistry()
        registry.register(MyOldPlugin())

        for handle in registry.plugins_of_revision(ApiRevision.V0):
            ...
    """

    def __init__(self) -> None:
        self._by_name: dict[str, LegacyPluginHandle] = {}
        self._by_revision: dict[ApiRevision, list[LegacyPluginHandle]] = {revision: [] for revision in ApiRevision}

    def register(
        self,
        plugin: Any,
        *,
        name: str | None = None,
        revision: ApiRevision | int | None = None,
    ) -> LegacyPluginHandle:
        """Register a loaded plugin.

        Args:
            plugin: Plugin instance
            name: Unique plugin name (defaults to the plugin's class name)
            revision: Declared API revision (defaults to detect_revision())

        Returns:
            The registration record

        Raises:
            ValueError: If the name is taken or the revision is unknown
        """
        plugin_name = name if name is not None else type(plugin).__name__
        if plugin_name in self._by_name:
            existing = self._by_name[plugin_name].plugin
            raise ValueError(f"Duplicate legacy plugin name: '{plugin_name}'. Already registered by {type(existing).__name__}")

        plugin_revision = detect_revision(plugin) if revision is None else ApiRevision.parse(revision)
        handle = LegacyPluginHandle(
            name=plugin_name,
            plugin=plugin,
            revision=plugin_revision,
            capabilities=detect_capabilities(plugin),
        )
        self._by_name[plugin_name] = handle
        self._by_revision[plugin_revision].append(handle)

        logger.debug(
            "Legacy plugin registered",
            plugin=plugin_name,
            revision=int(plugin_revision),
            handlers=sorted(handle.capabilities),
        )
        return handle

    def plugins_of_revision(self, revision: ApiRevision) -> list[LegacyPluginHandle]:
        """Get plugins declaring the given revision, in registration order."""
        return list(self._by_revision[revision])

    def get(self, name: str) -> LegacyPluginHandle | None:
        """Get a plugin registration by name."""
        return self._by_name.get(name)

    def __len__(self) -> int:
        return len(self._by_name)
