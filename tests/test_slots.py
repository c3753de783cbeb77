"""Tests for the slot registry."""

from enum import Enum

import pytest

from protoheight.boxes.primitives import RenderSizedBox
from protoheight.layout.slots import PrototypeHeightSlot, SlotRegistry


class OtherSlot(Enum):
    SIDEBAR = "sidebar"


def test_slot_enumeration_is_fixed_and_ordered():
    registry = SlotRegistry(PrototypeHeightSlot)
    assert registry.all_slots() == (PrototypeHeightSlot.PROTOTYPE, PrototypeHeightSlot.CONTENT)
    assert len(PrototypeHeightSlot) == 2


def test_empty_slots_return_none():
    registry = SlotRegistry(PrototypeHeightSlot)
    for slot in registry.all_slots():
        assert registry.child_for_slot(slot) is None
    assert list(registry.children()) == []
    assert len(registry) == 0


def test_set_child_returns_previous():
    registry = SlotRegistry(PrototypeHeightSlot)
    first = RenderSizedBox(1, 1, name="first")
    second = RenderSizedBox(2, 2, name="second")

    assert registry.set_child(PrototypeHeightSlot.CONTENT, first) is None
    assert registry.set_child(PrototypeHeightSlot.CONTENT, second) is first
    assert registry.child_for_slot(PrototypeHeightSlot.CONTENT) is second
    assert registry.set_child(PrototypeHeightSlot.CONTENT, None) is second
    assert registry.child_for_slot(PrototypeHeightSlot.CONTENT) is None


def test_children_follow_slot_order_not_insertion_order():
    registry = SlotRegistry(PrototypeHeightSlot)
    content = RenderSizedBox(1, 1, name="content")
    prototype = RenderSizedBox(1, 1, name="prototype")
    registry.set_child(PrototypeHeightSlot.CONTENT, content)
    registry.set_child(PrototypeHeightSlot.PROTOTYPE, prototype)

    assert list(registry.children()) == [prototype, content]
    assert registry.slot_of(content) is PrototypeHeightSlot.CONTENT
    assert registry.slot_of(RenderSizedBox(1, 1)) is None


def test_registry_does_not_adopt_children():
    registry = SlotRegistry(PrototypeHeightSlot)
    child = RenderSizedBox(1, 1)
    registry.set_child(PrototypeHeightSlot.PROTOTYPE, child)
    assert child.parent is None


@pytest.mark.parametrize("bad_slot", [OtherSlot.SIDEBAR, "prototype", 0, None])
def test_foreign_slot_fails_fast(bad_slot):
    registry = SlotRegistry(PrototypeHeightSlot)
    with pytest.raises(ValueError):
        registry.child_for_slot(bad_slot)
    with pytest.raises(ValueError):
        registry.set_child(bad_slot, RenderSizedBox(1, 1))
