"""Exceptions raised by the compatibility layer.

Errors raised by legacy plugin handlers are NOT wrapped here. They
propagate to the host unmodified.
"""


class PageIndexError(Exception):
    """Raised when a page record cannot be given a collection key.

    A record returned from the get_pages event must carry either an
    `id` or a `url`. Without both there is nothing to derive a key from,
    and assigning an arbitrary one would hide a broken legacy plugin.

    Attributes:
        position: Index of the offending record in the legacy page list
    """

    def __init__(self, position: int) -> None:
        self.position = position
        super().__init__(f"Page record at position {position} has neither an 'id' nor a 'url' to derive its key from")


class MissingSlotError(LookupError):
    """Raised when a bundle lacks a slot required by an event signature."""

    def __init__(self, slot: str, available: tuple[str, ...]) -> None:
        self.slot = slot
        self.available = available
        super().__init__(f"Parameter bundle has no slot '{slot}' (available: {', '.join(available) or 'none'})")
