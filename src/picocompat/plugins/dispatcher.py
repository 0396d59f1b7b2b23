# src/picocompat/plugins/dispatcher.py
"""Alias dispatcher: re-broadcasts canonical events as legacy events.

Dispatch is presence-based. A legacy plugin receives an event if it
implements a handler of that name; there is no subscription step.
Handler exceptions propagate to the caller unmodified and abort the
broadcast - legacy plugins were never sandboxed and their failures must
stay visible.
"""

from collections.abc import Mapping

from picocompat.contracts import (
    EVENT_ALIASES,
    LEGACY_SIGNATURES,
    ApiRevision,
    CanonicalEvent,
    LegacyEvent,
    ParameterBundle,
)
from picocompat.core.logging import get_logger
from picocompat.plugins.registry import LegacyPluginHandle, LegacyPluginRegistry

logger = get_logger(__name__)

# API v0 events are also offered to plugins using API v1 (but not later)
TARGET_REVISIONS: tuple[ApiRevision, ...] = (ApiRevision.V0, ApiRevision.V1)


class AliasDispatcher:
    """Maps canonical events to legacy events and invokes legacy handlers.

    Holds no mutable state of its own: the alias table is fixed and the
    registry is only read.
    """

    def __init__(
        self,
        registry: LegacyPluginRegistry,
        aliases: Mapping[CanonicalEvent, tuple[LegacyEvent, ...]] = EVENT_ALIASES,
    ) -> None:
        self._registry = registry
        self._aliases = aliases

    @property
    def aliases(self) -> Mapping[CanonicalEvent, tuple[LegacyEvent, ...]]:
        return self._aliases

    def dispatch_canonical(self, event: CanonicalEvent, bundle: ParameterBundle) -> None:
        """Fire every legacy alias of a canonical event, in table order.

        Canonical events without an alias are ignored.
        """
        for legacy_event in self._aliases.get(event, ()):
            self.trigger(legacy_event, bundle)

    def trigger(self, event: LegacyEvent, bundle: ParameterBundle) -> None:
        """Invoke a legacy event on every target plugin implementing it.

        Arguments are the bundle's cells in the event's legacy signature
        order.

        Raises:
            MissingSlotError: If the bundle lacks a slot of the signature
        """
        args = bundle.refs(LEGACY_SIGNATURES[event])
        receivers = [handle for handle in self.target_plugins() if handle.implements(event)]

        logger.debug("Dispatching legacy event", legacy_event=event.value, receivers=[h.name for h in receivers])

        for handle in receivers:
            getattr(handle.plugin, event.value)(*args)

    def target_plugins(self) -> list[LegacyPluginHandle]:
        """Plugins receiving legacy events, by ascending revision then registry order."""
        seen: set[str] = set()
        plugins: list[LegacyPluginHandle] = []
        for revision in TARGET_REVISIONS:
            for handle in self._registry.plugins_of_revision(revision):
                if handle.name not in seen:
                    seen.add(handle.name)
                    plugins.append(handle)
        return plugins

    def handle_custom_event(self, event_name: str, bundle: ParameterBundle) -> None:
        """Reject a request to broadcast an arbitrary event.

        Only events of the fixed alias table are ever originated here.
        """
        logger.debug("Custom event not forwarded to legacy plugins", event_name=event_name)
