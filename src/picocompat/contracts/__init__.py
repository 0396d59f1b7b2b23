"""Shared contracts: event names, signatures, bundles and errors.

This package has no dependencies on the plugin layer, so both the host
side (manager, hookspecs) and the legacy side (dispatcher) import from
here.
"""

from picocompat.contracts.bundle import ParameterBundle, Ref
from picocompat.contracts.enums import ApiRevision, CanonicalEvent, LegacyEvent
from picocompat.contracts.errors import MissingSlotError, PageIndexError
from picocompat.contracts.signatures import (
    CANONICAL_SIGNATURES,
    EVENT_ALIASES,
    LEGACY_SIGNATURES,
)

__all__ = [
    # Enums
    "ApiRevision",
    "CanonicalEvent",
    "LegacyEvent",
    # Bundles
    "ParameterBundle",
    "Ref",
    # Signatures
    "CANONICAL_SIGNATURES",
    "EVENT_ALIASES",
    "LEGACY_SIGNATURES",
    # Errors
    "MissingSlotError",
    "PageIndexError",
]
