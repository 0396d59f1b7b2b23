"""Parameter bundles shared between canonical and legacy events.

Legacy plugins were written for a calling convention where every event
argument was passed by reference: a handler could replace a string or
swap a whole array and the caller would see the new value. Python has
no reference parameters, so each argument travels in a `Ref` cell.

A handler mutates a slot by assigning to its `value`:

    class MyLegacyPlugin:
        def before_parse_content(self, raw_content: Ref[str]) -> None:
            raw_content.value = raw_content.value.replace("foo", "bar")

The same `Ref` objects are handed to every handler of one firing, and
back to the host, so later handlers and the canonical caller observe the
mutation.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from picocompat.contracts.errors import MissingSlotError

T = TypeVar("T")


@dataclass(eq=False)
class Ref(Generic[T]):
    """Mutable single-value cell standing in for a by-reference argument.

    Identity comparison only: two cells holding equal values are still
    different slots.
    """

    value: T


class ParameterBundle:
    """Ordered set of named, independently mutable slots.

    Built fresh for each canonical event firing. Handlers must not keep a
    reference to the bundle after the firing returns.
    """

    __slots__ = ("_slots",)

    def __init__(self, slots: Iterable[tuple[str, Ref[Any]]] = ()) -> None:
        self._slots: dict[str, Ref[Any]] = {}
        for name, ref in slots:
            if name in self._slots:
                raise ValueError(f"Duplicate slot name in parameter bundle: '{name}'")
            self._slots[name] = ref

    @classmethod
    def of(cls, **values: Any) -> "ParameterBundle":
        """Create a bundle wrapping each keyword value in a fresh Ref.

        Slot order follows keyword order. Values that are already Refs
        are shared rather than wrapped again.
        """
        return cls((name, value if isinstance(value, Ref) else Ref(value)) for name, value in values.items())

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._slots)

    def ref(self, name: str) -> Ref[Any]:
        """Return the cell for a slot.

        Raises:
            MissingSlotError: If the bundle has no such slot
        """
        try:
            return self._slots[name]
        except KeyError:
            raise MissingSlotError(name, self.names) from None

    def refs(self, names: Iterable[str]) -> tuple[Ref[Any], ...]:
        """Return the cells for several slots, in the requested order."""
        return tuple(self.ref(name) for name in names)

    def get(self, name: str) -> Any:
        return self.ref(name).value

    def set(self, name: str, value: Any) -> None:
        self.ref(name).value = value

    def __contains__(self, name: object) -> bool:
        return name in self._slots

    def __iter__(self) -> Iterator[str]:
        return iter(self._slots)

    def __len__(self) -> int:
        return len(self._slots)

    def __repr__(self) -> str:
        inner = ", ".join(f"{name}={ref.value!r}" for name, ref in self._slots.items())
        return f"ParameterBundle({inner})"
