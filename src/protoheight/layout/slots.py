"""Named single-child slots for container nodes."""

from __future__ import annotations

from enum import Enum
from typing import Generic, Iterator, TypeVar

from ..core.node import RenderBox


class PrototypeHeightSlot(Enum):
    """The two slots of a prototype-height container.

    PROTOTYPE holds the child that donates its height; CONTENT holds the
    child that is actually painted and hit-tested.
    """

    PROTOTYPE = "prototype"
    CONTENT = "content"


S = TypeVar("S", bound=Enum)


class SlotRegistry(Generic[S]):
    """Maps each slot of a fixed enumeration to zero or one child.

    The registry is a plain store. It holds references only; adopting,
    dropping and disposing children is up to whoever fills the slots.

    Example:
        registry = SlotRegistry(PrototypeHeightSlot)
        registry.set_child(PrototypeHeightSlot.CONTENT, box)
        registry.child_for_slot(PrototypeHeightSlot.PROTOTYPE)  # None
    """

    def __init__(self, slot_type: type[S]) -> None:
        """Create an empty registry.

        Args:
            slot_type: Enum whose members are the available slots
        """
        self._slot_type = slot_type
        self._slots: tuple[S, ...] = tuple(slot_type)
        self._children: dict[S, RenderBox | None] = {slot: None for slot in self._slots}

    def _check_slot(self, slot: S) -> None:
        if not isinstance(slot, self._slot_type):
            raise ValueError(f"{slot!r} is not a {self._slot_type.__name__}")

    def all_slots(self) -> tuple[S, ...]:
        """Every slot, in declaration order."""
        return self._slots

    def child_for_slot(self, slot: S) -> RenderBox | None:
        """Return the child in slot, or None when the slot is empty.

        Raises:
            ValueError: If slot does not belong to this registry's enumeration
        """
        self._check_slot(slot)
        return self._children[slot]

    def set_child(self, slot: S, child: RenderBox | None) -> RenderBox | None:
        """Store child in slot.

        Returns:
            The child previously in the slot, or None
        """
        self._check_slot(slot)
        previous = self._children[slot]
        self._children[slot] = child
        return previous

    def children(self) -> Iterator[RenderBox]:
        """Occupied children in slot order."""
        for slot in self._slots:
            child = self._children[slot]
            if child is not None:
                yield child

    def slot_of(self, child: RenderBox) -> S | None:
        """Find which slot holds child (by identity)."""
        for slot in self._slots:
            if self._children[slot] is child:
                return slot
        return None

    def __len__(self) -> int:
        return sum(1 for _ in self.children())

    def __repr__(self) -> str:
        filled = ", ".join(
            f"{slot.name}={child.name if child is not None else None}"
            for slot, child in self._children.items()
        )
        return f"SlotRegistry({self._slot_type.__name__}: {filled})"
