"""Tests for RenderPrototypeHeight layout."""

import math

import pytest

from protoheight.boxes.primitives import RenderSizedBox
from protoheight.core.geometry import BoxConstraints, Offset, Size
from protoheight.core.node import LayoutError
from protoheight.layout import PrototypeHeightSlot, RenderPrototypeHeight

BOUNDED = BoxConstraints(max_width=300, max_height=300)


def test_prototype_drives_height_content_drives_width(spy_box):
    """Prototype 40x60, content 200x100 under [0,300]x[0,300]."""
    prototype = spy_box(40, 60, name="prototype")
    content = spy_box(200, 100, name="content")
    node = RenderPrototypeHeight(prototype=prototype, content=content)

    node.layout(BOUNDED)

    assert prototype.layout_calls == [BoxConstraints()]
    assert prototype.size == Size(40, 60)
    assert node.child_offset(PrototypeHeightSlot.PROTOTYPE) == Offset(0, 0)

    assert content.layout_calls == [BoxConstraints(max_height=60)]
    assert content.size == Size(200, 60)

    assert node.children_union == Size(200, 60)
    assert node.size == Size(200, 60)


def test_node_width_clamped_but_content_width_untouched(spy_box):
    """Same children with max_width 150: only the node's own size is clamped."""
    content = spy_box(200, 100)
    node = RenderPrototypeHeight(prototype=spy_box(40, 60), content=content)

    node.layout(BoxConstraints(max_width=150, max_height=300))

    assert node.size == Size(150, 60)
    assert content.size.width == 200
    assert node.children_union == Size(200, 60)


def test_missing_prototype_forces_content_height_to_zero(spy_box):
    content = spy_box(80, 40)
    node = RenderPrototypeHeight(content=content)

    node.layout(BOUNDED)

    assert content.layout_calls == [BoxConstraints(max_height=0)]
    assert content.size == Size(80, 0)
    assert node.size == Size(80, 0)


@pytest.mark.parametrize("has_prototype", [True, False])
@pytest.mark.parametrize("has_content", [True, False])
@pytest.mark.parametrize(
    "constraints",
    [
        BoxConstraints(),
        BOUNDED,
        BoxConstraints(max_width=50, max_height=20),
        BoxConstraints(min_width=120, max_width=400, min_height=90, max_height=400),
        BoxConstraints.tight(Size(10, 10)),
    ],
)
def test_any_combination_of_children_lays_out(has_prototype, has_content, constraints):
    """Size is always clamp((content width or 0, prototype height or 0))."""
    prototype = RenderSizedBox(40, 60) if has_prototype else None
    content = RenderSizedBox(200, 100) if has_content else None
    node = RenderPrototypeHeight(prototype=prototype, content=content)

    node.layout(constraints)

    expected_width = 200 if has_content else 0
    expected_height = 60 if has_prototype else 0
    assert node.size == constraints.constrain(Size(expected_width, expected_height))
    assert constraints.is_satisfied_by(node.size)


@pytest.mark.parametrize("natural_height", [61, 100, 1000])
@pytest.mark.parametrize("fill_height", [True, False])
def test_content_never_taller_than_prototype(natural_height, fill_height):
    content = RenderSizedBox(30, natural_height, fill_height=fill_height)
    node = RenderPrototypeHeight(prototype=RenderSizedBox(10, 60), content=content)

    node.layout(BOUNDED)

    assert content.size.height == 60


def test_shorter_content_keeps_its_height():
    """The prototype height is a cap, not a fixed height."""
    content = RenderSizedBox(30, 20)
    node = RenderPrototypeHeight(prototype=RenderSizedBox(10, 60), content=content)

    node.layout(BOUNDED)

    assert content.size == Size(30, 20)
    assert node.size == Size(30, 60)


def test_greedy_content_fills_prototype_height():
    content = RenderSizedBox(30, 5, fill_height=True)
    node = RenderPrototypeHeight(prototype=RenderSizedBox(10, 60), content=content)

    node.layout(BOUNDED)

    assert content.size == Size(30, 60)


@pytest.mark.parametrize("max_width", [10, 150, 300, math.inf])
def test_content_width_ignores_node_max_width(max_width):
    content = RenderSizedBox(200, 10)
    node = RenderPrototypeHeight(prototype=RenderSizedBox(10, 60), content=content)

    node.layout(BoxConstraints(max_width=max_width))

    assert content.size.width == 200
    assert content.constraints.max_width == math.inf


def test_prototype_width_does_not_contribute():
    node = RenderPrototypeHeight(prototype=RenderSizedBox(500, 60), content=RenderSizedBox(20, 10))

    node.layout(BOUNDED)

    assert node.size == Size(20, 60)


def test_content_offset_is_origin_every_pass():
    content = RenderSizedBox(20, 10)
    node = RenderPrototypeHeight(prototype=RenderSizedBox(10, 60), content=content)

    node.layout(BOUNDED)
    assert node.child_offset(PrototypeHeightSlot.CONTENT) == Offset(0, 0)

    node.layout(BoxConstraints(max_width=5, max_height=5))
    assert node.child_offset(PrototypeHeightSlot.CONTENT) == Offset(0, 0)


def test_relayout_skipped_when_clean_and_constraints_unchanged(spy_box):
    prototype = spy_box(40, 60)
    node = RenderPrototypeHeight(prototype=prototype)

    node.layout(BOUNDED)
    node.layout(BOUNDED)

    assert len(prototype.layout_calls) == 1


def test_prototype_resize_updates_content_cap(spy_box):
    prototype = RenderSizedBox(40, 60)
    content = spy_box(200, 100)
    node = RenderPrototypeHeight(prototype=prototype, content=content)
    node.layout(BOUNDED)

    prototype.preferred_size = Size(40, 80)
    assert node.needs_layout
    node.layout(BOUNDED)

    assert content.layout_calls[-1] == BoxConstraints(max_height=80)
    assert node.size == Size(200, 80)


def test_size_before_layout_raises():
    node = RenderPrototypeHeight()
    with pytest.raises(LayoutError):
        node.size


def test_negative_child_size_is_a_layout_error(negative_box):
    node = RenderPrototypeHeight(prototype=negative_box())
    with pytest.raises(LayoutError, match="unusable size"):
        node.layout(BOUNDED)


def test_negative_content_size_is_a_layout_error(negative_box):
    node = RenderPrototypeHeight(prototype=RenderSizedBox(10, 60), content=negative_box())
    with pytest.raises(LayoutError):
        node.layout(BOUNDED)


def test_non_finite_node_size_is_a_layout_error():
    """A child with unbounded preferred width would make the node infinite."""

    class GreedyWidthBox(RenderSizedBox):
        def perform_layout(self):
            self.size = Size(self.constraints.max_width, 0)

    node = RenderPrototypeHeight(content=GreedyWidthBox(0, 0))
    with pytest.raises(LayoutError):
        node.layout(BOUNDED)


def test_configure_swaps_children():
    node = RenderPrototypeHeight()
    old = RenderSizedBox(10, 10)
    new = RenderSizedBox(30, 30)

    node.configure(content=old)
    assert node.content is old
    assert old.parent is node

    node.configure(content=new)
    assert node.content is new
    assert old.parent is None
    assert new.parent is node


def test_configure_partial_keeps_other_slots():
    prototype = RenderSizedBox(10, 60)
    node = RenderPrototypeHeight(background_color="white", prototype=prototype)

    node.configure(content=RenderSizedBox(5, 5))

    assert node.prototype is prototype
    assert node.background_color == (255, 255, 255, 255)


def test_configure_none_empties_slot():
    prototype = RenderSizedBox(10, 60)
    node = RenderPrototypeHeight(prototype=prototype)

    node.configure(prototype=None)

    assert node.prototype is None
    assert prototype.parent is None
    assert list(node.iter_nodes()) == [node]


def test_child_can_move_between_slots():
    box = RenderSizedBox(10, 60)
    node = RenderPrototypeHeight(prototype=box)

    node.set_child_for_slot(PrototypeHeightSlot.CONTENT, box)

    assert node.prototype is None
    assert node.content is box
    assert box.parent is node


def test_child_of_another_node_cannot_be_adopted():
    box = RenderSizedBox(10, 10)
    RenderPrototypeHeight(content=box)
    with pytest.raises(ValueError):
        RenderPrototypeHeight(content=box)


def test_slots_and_lookup():
    prototype = RenderSizedBox(1, 1)
    node = RenderPrototypeHeight(prototype=prototype)

    assert node.slots() == (PrototypeHeightSlot.PROTOTYPE, PrototypeHeightSlot.CONTENT)
    assert node.child_for_slot(PrototypeHeightSlot.PROTOTYPE) is prototype
    assert node.child_for_slot(PrototypeHeightSlot.CONTENT) is None
    with pytest.raises(ValueError):
        node.child_for_slot("content")


def test_invalid_background_rejected_before_layout():
    with pytest.raises(ValueError):
        RenderPrototypeHeight(background_color="definitely-not-a-color")

    node = RenderPrototypeHeight(background_color="white")
    with pytest.raises(ValueError):
        node.background_color = (300, 0, 0)
    assert node.background_color == (255, 255, 255, 255)


def test_rejected_swap_keeps_current_child():
    old = RenderSizedBox(10, 10)
    foreign = RenderSizedBox(20, 20)
    other = RenderPrototypeHeight(content=foreign)
    node = RenderPrototypeHeight(content=old)

    with pytest.raises(ValueError):
        node.configure(content=foreign)

    assert node.content is old
    assert old.parent is node
    assert foreign.parent is other

    with pytest.raises(ValueError):
        node.set_child_for_slot(PrototypeHeightSlot.CONTENT, foreign)
    assert node.content is old


def test_rejected_configure_changes_nothing():
    old = RenderSizedBox(10, 10)
    prototype = RenderSizedBox(5, 60)
    node = RenderPrototypeHeight(background_color="white", prototype=prototype, content=old)
    node.layout(BOUNDED)
    new = RenderSizedBox(30, 30)

    with pytest.raises(ValueError):
        node.configure(background_color="not-a-color", prototype=None, content=new)

    assert node.content is old
    assert node.prototype is prototype
    assert new.parent is None
    assert node.background_color == (255, 255, 255, 255)
    assert not node.needs_layout
