# src/picocompat/plugins/manager.py
"""Host-facing manager for compatibility plugins.

Uses pluggy for hook-based registration. The host fires canonical events
through the manager, which builds the ParameterBundle in canonical slot
order and hands it to every registered compatibility plugin.
"""

from typing import Any

import pluggy

from picocompat.contracts import CANONICAL_SIGNATURES, CanonicalEvent, ParameterBundle
from picocompat.plugins.hookspecs import (
    PROJECT_NAME,
    ContentSpec,
    CustomEventSpec,
    LoadingSpec,
    PagesSpec,
    RenderSpec,
)


def build_bundle(event: CanonicalEvent, values: dict[str, Any]) -> ParameterBundle:
    """Build a canonical bundle from keyword values.

    Slots the caller leaves out are None.

    Raises:
        TypeError: If a value names a slot the event doesn't have
    """
    signature = CANONICAL_SIGNATURES[event]
    unknown = sorted(set(values) - set(signature))
    if unknown:
        raise TypeError(f"Event '{event.value}' has no slot(s) {', '.join(unknown)}; expected {', '.join(signature) or 'none'}")
    return ParameterBundle.of(**{name: values.get(name) for name in signature})


class CompatManager:
    """Registers compatibility plugins and fires canonical events at them.

    Usage:
        manager = CompatManager()
        manager.register(PluginApi0Compat(settings, registry))

        bundle = manager.fire(CanonicalEvent.ON_PAGES_LOADED, pages=pages)
        pages = bundle.get("pages")
    """

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)

        self._pm.add_hookspecs(LoadingSpec)
        self._pm.add_hookspecs(ContentSpec)
        self._pm.add_hookspecs(PagesSpec)
        self._pm.add_hookspecs(RenderSpec)
        self._pm.add_hookspecs(CustomEventSpec)

    def register(self, plugin: Any, name: str | None = None) -> None:
        """Register a compatibility plugin.

        Args:
            plugin: Plugin instance implementing hook methods
            name: Registration name (defaults to the plugin's `name` attribute)

        Raises:
            ValueError: If a plugin with the same name is already registered
        """
        plugin_name = name if name is not None else getattr(plugin, "name", None)
        self._pm.register(plugin, name=plugin_name)

    def is_registered(self, plugin: Any) -> bool:
        return self._pm.is_registered(plugin)

    def fire(self, event: CanonicalEvent, **values: Any) -> ParameterBundle:
        """Fire a canonical event.

        Returns:
            The bundle after all plugins ran, carrying their mutations
        """
        bundle = build_bundle(event, values)
        self.fire_bundle(event, bundle)
        return bundle

    def fire_bundle(self, event: CanonicalEvent, bundle: ParameterBundle) -> None:
        """Fire a canonical event with a caller-built bundle."""
        getattr(self._pm.hook, event.value)(bundle=bundle)

    def emit_custom(self, event_name: str, **values: Any) -> ParameterBundle:
        """Ask compatibility plugins to broadcast an arbitrary event."""
        bundle = ParameterBundle.of(**values)
        self._pm.hook.on_custom_event(event_name=event_name, bundle=bundle)
        return bundle
