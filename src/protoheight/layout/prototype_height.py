"""Container whose content child is capped to the height of a prototype child."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Callable

from ..core.color import RGBA, ColorLike, parse_color
from ..core.geometry import BoxConstraints, Offset, Size
from ..core.hit_test import BoxHitTestResult
from ..core.node import LayoutError, RenderBox
from ..debug import debug_settings
from ..painting.overflow import OverflowRegion, overflow_regions, paint_overflow_indicator
from ..utils.logger import get_logger
from .slots import PrototypeHeightSlot, SlotRegistry

if TYPE_CHECKING:
    from ..painting.canvas import Canvas

LOGGER = get_logger(__name__)

_UNSET = object()


class RenderPrototypeHeight(RenderBox):
    """Two-slot container that sizes its content to a prototype's height.

    The prototype child is measured with no constraints at all, purely to
    find out how tall it wants to be. The content child is then laid out
    with unbounded width and a maximum height equal to that prototype
    height. The container itself wants to be as wide as the content and as
    tall as the prototype, clamped to its own incoming constraints.

    The prototype is laid out and placed at the origin but never painted
    and never hit-tested. Only the content child is visible, drawn at the
    origin over an optional background fill.

    Child offsets live here, keyed by slot, rather than on the children.

    Example:
        node = RenderPrototypeHeight(
            background_color="white",
            prototype=RenderSizedBox(40, 60),
            content=RenderSizedBox(200, 100, fill_height=True),
        )
        node.layout(BoxConstraints(max_width=300, max_height=300))
        node.size  # Size(200, 60)
    """

    def __init__(
        self,
        background_color: ColorLike | None = None,
        prototype: RenderBox | None = None,
        content: RenderBox | None = None,
        name: str | None = None,
    ) -> None:
        super().__init__(name)
        self._registry: SlotRegistry[PrototypeHeightSlot] = SlotRegistry(PrototypeHeightSlot)
        self._offsets: dict[PrototypeHeightSlot, Offset] = {
            slot: Offset.zero() for slot in self._registry.all_slots()
        }
        self._background_color: RGBA | None = (
            parse_color(background_color) if background_color is not None else None
        )
        # Size the children asked for before clamping; only read by the
        # debug overflow check during paint.
        self._children_union: Size | None = None
        self._reported_overflow: tuple[tuple[str, float], ...] | None = None

        if prototype is not None:
            self.set_child_for_slot(PrototypeHeightSlot.PROTOTYPE, prototype)
        if content is not None:
            self.set_child_for_slot(PrototypeHeightSlot.CONTENT, content)

    # CONFIGURATION

    @property
    def background_color(self) -> RGBA | None:
        return self._background_color

    @background_color.setter
    def background_color(self, value: ColorLike | None) -> None:
        color = parse_color(value) if value is not None else None
        if color == self._background_color:
            return
        self._background_color = color
        # Geometry is unaffected
        self.mark_needs_paint()

    def configure(
        self,
        background_color: ColorLike | None | object = _UNSET,
        prototype: RenderBox | None | object = _UNSET,
        content: RenderBox | None | object = _UNSET,
    ) -> None:
        """Apply a new configuration, touching only what changed.

        Arguments that are not passed keep their current value. A different
        background only schedules a repaint; a different child in either
        slot schedules a relayout.

        Args:
            background_color: New background, or None for no fill
            prototype: Node for the prototype slot, or None to empty it
            content: Node for the content slot, or None to empty it
        """
        # Validate everything up front so a rejected call changes nothing
        color: RGBA | None | object = _UNSET
        if background_color is not _UNSET:
            color = parse_color(background_color) if background_color is not None else None
        for candidate in (prototype, content):
            if isinstance(candidate, RenderBox):
                self._check_adoptable(candidate)

        if prototype is not _UNSET:
            self.set_child_for_slot(PrototypeHeightSlot.PROTOTYPE, prototype)
        if content is not _UNSET:
            self.set_child_for_slot(PrototypeHeightSlot.CONTENT, content)
        if color is not _UNSET:
            self.background_color = color

    # SLOTS

    def slots(self) -> tuple[PrototypeHeightSlot, ...]:
        return self._registry.all_slots()

    def child_for_slot(self, slot: PrototypeHeightSlot) -> RenderBox | None:
        return self._registry.child_for_slot(slot)

    def set_child_for_slot(self, slot: PrototypeHeightSlot, child: RenderBox | None) -> None:
        """Put child into slot, dropping whatever was there before.

        A child that currently sits in the other slot of this node is moved.
        """
        current = self._registry.child_for_slot(slot)
        if current is child:
            return
        if child is not None:
            self._check_adoptable(child)
        if current is not None:
            self._registry.set_child(slot, None)
            self.drop_child(current)
        if child is not None and child.parent is self:
            old_slot = self._registry.slot_of(child)
            if old_slot is not None:
                self._registry.set_child(old_slot, None)
                self._offsets[old_slot] = Offset.zero()
            self.drop_child(child)
        if child is not None:
            self.adopt_child(child)
        self._registry.set_child(slot, child)
        self._offsets[slot] = Offset.zero()

    def _check_adoptable(self, child: RenderBox) -> None:
        if child.parent is not None and child.parent is not self:
            raise ValueError(
                f"Cannot adopt '{child.name}': already a child of '{child.parent.name}'"
            )

    @property
    def prototype(self) -> RenderBox | None:
        return self._registry.child_for_slot(PrototypeHeightSlot.PROTOTYPE)

    @property
    def content(self) -> RenderBox | None:
        return self._registry.child_for_slot(PrototypeHeightSlot.CONTENT)

    def visit_children(self, visitor: Callable[[RenderBox], None]) -> None:
        for child in self._registry.children():
            visitor(child)

    def child_offset(self, slot: PrototypeHeightSlot) -> Offset:
        """Offset of the child in slot relative to this node's origin."""
        self._registry.child_for_slot(slot)
        return self._offsets[slot]

    @property
    def children_union(self) -> Size | None:
        """Size the children wanted in the last layout pass, before clamping."""
        return self._children_union

    # LAYOUT

    @staticmethod
    def _content_constraints(prototype_size: Size) -> BoxConstraints:
        # Width is free; height is capped (not fixed) to the prototype's
        return BoxConstraints(max_height=prototype_size.height)

    def _checked_child_size(self, child: RenderBox, size: Size, constraints: BoxConstraints) -> Size:
        if size.is_negative or not size.is_finite:
            raise LayoutError(f"Child '{child.name}' of '{self.name}' reported unusable size {size}")
        if not constraints.is_satisfied_by(size):
            raise LayoutError(
                f"Child '{child.name}' of '{self.name}' size {size} violates {constraints!r}"
            )
        return size

    def perform_layout(self) -> None:
        # Children are allowed to be as big as they want
        prototype_constraints = BoxConstraints()

        prototype_size = Size.zero()
        prototype = self.prototype
        if prototype is not None:
            prototype.layout(prototype_constraints, parent_uses_size=True)
            prototype_size = self._checked_child_size(prototype, prototype.size, prototype_constraints)
            self._offsets[PrototypeHeightSlot.PROTOTYPE] = Offset.zero()

        content_size = Size.zero()
        content = self.content
        if content is not None:
            content_constraints = self._content_constraints(prototype_size)
            content.layout(content_constraints, parent_uses_size=True)
            content_size = self._checked_child_size(content, content.size, content_constraints)
        # Content is always drawn flush with the origin
        self._offsets[PrototypeHeightSlot.CONTENT] = Offset.zero()

        self._children_union = Size(content_size.width, prototype_size.height)
        self.size = self.constraints.constrain(self._children_union)

    def compute_dry_layout(self, constraints: BoxConstraints) -> Size:
        prototype_constraints = BoxConstraints()
        prototype_size = Size.zero()
        prototype = self.prototype
        if prototype is not None:
            prototype_size = self._checked_child_size(
                prototype, prototype.get_dry_layout(prototype_constraints), prototype_constraints
            )

        content_size = Size.zero()
        content = self.content
        if content is not None:
            content_constraints = self._content_constraints(prototype_size)
            content_size = self._checked_child_size(
                content, content.get_dry_layout(content_constraints), content_constraints
            )

        return constraints.constrain(Size(content_size.width, prototype_size.height))

    # INTRINSICS

    # The incoming extent is ignored: both children are always measured
    # unconstrained. The results add both children along the queried axis,
    # which is more than perform_layout() ever uses.

    def _sum_children(self, measure: Callable[[RenderBox], float]) -> float:
        return sum((measure(child) for child in self._registry.children()), 0.0)

    def compute_min_intrinsic_width(self, height: float) -> float:
        return self._sum_children(lambda child: child.get_min_intrinsic_width(math.inf))

    def compute_max_intrinsic_width(self, height: float) -> float:
        return self._sum_children(lambda child: child.get_max_intrinsic_width(math.inf))

    def compute_min_intrinsic_height(self, width: float) -> float:
        return self._sum_children(lambda child: child.get_min_intrinsic_height(math.inf))

    def compute_max_intrinsic_height(self, width: float) -> float:
        return self._sum_children(lambda child: child.get_max_intrinsic_height(math.inf))

    # PAINT

    def paint(self, canvas: Canvas, offset: Offset) -> None:
        if self._background_color is not None:
            canvas.draw_rect(offset & self.size, self._background_color)

        content = self.content
        if content is not None:
            self.paint_child(content, canvas, self._offsets[PrototypeHeightSlot.CONTENT] + offset)

        if __debug__:
            if debug_settings.paint_overflow_indicators or debug_settings.log_overflow:
                self._debug_overflow(canvas, offset)

    def paint_child(self, child: RenderBox, canvas: Canvas, offset: Offset) -> None:
        child.paint(canvas, offset)

    def _debug_overflow(self, canvas: Canvas, offset: Offset) -> list[OverflowRegion]:
        """Mark and report overflow; _reported_overflow is log bookkeeping only, layout never reads it."""
        if self._children_union is None:
            return []
        container_rect = Offset.zero() & self.size
        child_rect = Offset.zero() & self._children_union
        if debug_settings.paint_overflow_indicators:
            regions = paint_overflow_indicator(canvas, offset, container_rect, child_rect)
        else:
            regions = overflow_regions(container_rect, child_rect, debug_settings.indicator_fraction)

        key = tuple((region.side.value, region.amount) for region in regions)
        if not regions:
            self._reported_overflow = None
        elif debug_settings.log_overflow and key != self._reported_overflow:
            LOGGER.warning(
                "'%s' overflowed: %s (constraints %r, children wanted %gx%g)",
                self.name,
                "; ".join(region.label for region in regions),
                self.constraints,
                self._children_union.width,
                self._children_union.height,
            )
            self._reported_overflow = key
        return regions

    # HIT TEST

    def hit_test_children(self, result: BoxHitTestResult, position: Offset) -> bool:
        content = self.content
        if content is None:
            return False
        return result.add_with_paint_offset(
            offset=self._offsets[PrototypeHeightSlot.CONTENT],
            position=position,
            hit_test=lambda result, transformed: content.hit_test(result, transformed),
        )
