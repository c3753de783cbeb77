"""Leaf and simple container boxes used to populate slots."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Callable, Sequence

from ..core.color import RGBA, ColorLike, parse_color
from ..core.geometry import BoxConstraints, Offset, Size
from ..core.hit_test import BoxHitTestResult
from ..core.node import RenderBox

if TYPE_CHECKING:
    from ..painting.canvas import Canvas


def _check_extent(name: str, value: float) -> float:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise ValueError(f"{name} must be a number, got {type(value).__name__}: {value!r}")
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"{name} must be finite and non-negative, got {value}")
    return float(value)


class RenderSizedBox(RenderBox):
    """A box with a preferred size and an optional solid color.

    The preferred size is clamped to the incoming constraints. With
    fill_height the box instead takes all of a bounded max_height, which
    is how greedy children (lists, expanded panels) behave.

    Attributes:
        fill_height: Take the full bounded height instead of the preferred one
    """

    def __init__(
        self,
        width: float,
        height: float,
        color: ColorLike | None = None,
        fill_height: bool = False,
        name: str | None = None,
    ) -> None:
        super().__init__(name)
        self._preferred = Size(_check_extent("width", width), _check_extent("height", height))
        self._color: RGBA | None = parse_color(color) if color is not None else None
        self.fill_height = fill_height

    @property
    def preferred_size(self) -> Size:
        return self._preferred

    @preferred_size.setter
    def preferred_size(self, value: Size) -> None:
        value = Size(_check_extent("width", value.width), _check_extent("height", value.height))
        if value == self._preferred:
            return
        self._preferred = value
        self.mark_needs_layout()

    @property
    def color(self) -> RGBA | None:
        return self._color

    @color.setter
    def color(self, value: ColorLike | None) -> None:
        color = parse_color(value) if value is not None else None
        if color == self._color:
            return
        self._color = color
        self.mark_needs_paint()

    def _size_for(self, constraints: BoxConstraints) -> Size:
        height = self._preferred.height
        if self.fill_height and constraints.has_bounded_height:
            height = constraints.max_height
        return constraints.constrain(Size(self._preferred.width, height))

    def perform_layout(self) -> None:
        self.size = self._size_for(self.constraints)

    def compute_dry_layout(self, constraints: BoxConstraints) -> Size:
        return self._size_for(constraints)

    def compute_min_intrinsic_width(self, height: float) -> float:
        return self._preferred.width

    def compute_max_intrinsic_width(self, height: float) -> float:
        return self._preferred.width

    def compute_min_intrinsic_height(self, width: float) -> float:
        return self._preferred.height

    def compute_max_intrinsic_height(self, width: float) -> float:
        return self._preferred.height

    def paint(self, canvas: Canvas, offset: Offset) -> None:
        if self._color is not None:
            canvas.draw_rect(offset & self.size, self._color)

    def hit_test_self(self, position: Offset) -> bool:
        return True


class RenderRow(RenderBox):
    """Lays children out left to right, centered vertically.

    Children get unbounded width and the row's own maximum height. The row
    is as wide as its children plus spacing and as tall as the tallest child.
    """

    def __init__(
        self,
        children: Sequence[RenderBox] = (),
        spacing: float = 0.0,
        name: str | None = None,
    ) -> None:
        super().__init__(name)
        self.spacing = _check_extent("spacing", spacing)
        self._children: list[RenderBox] = []
        self._offsets: list[Offset] = []
        for child in children:
            self.add(child)

    @property
    def children(self) -> tuple[RenderBox, ...]:
        return tuple(self._children)

    def add(self, child: RenderBox) -> None:
        self.adopt_child(child)
        self._children.append(child)
        self._offsets.append(Offset.zero())

    def remove(self, child: RenderBox) -> None:
        index = self._children.index(child)
        del self._children[index]
        del self._offsets[index]
        self.drop_child(child)

    def child_offset(self, index: int) -> Offset:
        return self._offsets[index]

    def visit_children(self, visitor: Callable[[RenderBox], None]) -> None:
        for child in self._children:
            visitor(child)

    def _gaps(self) -> float:
        return self.spacing * max(0, len(self._children) - 1)

    def _child_constraints(self, constraints: BoxConstraints) -> BoxConstraints:
        return BoxConstraints(max_height=constraints.max_height)

    def perform_layout(self) -> None:
        child_constraints = self._child_constraints(self.constraints)
        sizes = []
        for child in self._children:
            child.layout(child_constraints, parent_uses_size=True)
            sizes.append(child.size)

        height = max((s.height for s in sizes), default=0.0)
        x = 0.0
        for index, child_size in enumerate(sizes):
            self._offsets[index] = Offset(x, (height - child_size.height) / 2)
            x += child_size.width + self.spacing
        width = sum(s.width for s in sizes) + self._gaps()
        self.size = self.constraints.constrain(Size(width, height))

    def compute_dry_layout(self, constraints: BoxConstraints) -> Size:
        child_constraints = self._child_constraints(constraints)
        sizes = [child.get_dry_layout(child_constraints) for child in self._children]
        width = sum(s.width for s in sizes) + self._gaps()
        height = max((s.height for s in sizes), default=0.0)
        return constraints.constrain(Size(width, height))

    def compute_min_intrinsic_width(self, height: float) -> float:
        return sum(c.get_min_intrinsic_width(height) for c in self._children) + self._gaps()

    def compute_max_intrinsic_width(self, height: float) -> float:
        return sum(c.get_max_intrinsic_width(height) for c in self._children) + self._gaps()

    def compute_min_intrinsic_height(self, width: float) -> float:
        return max((c.get_min_intrinsic_height(math.inf) for c in self._children), default=0.0)

    def compute_max_intrinsic_height(self, width: float) -> float:
        return max((c.get_max_intrinsic_height(math.inf) for c in self._children), default=0.0)

    def paint(self, canvas: Canvas, offset: Offset) -> None:
        for child, child_offset in zip(self._children, self._offsets):
            child.paint(canvas, child_offset + offset)

    def hit_test_children(self, result: BoxHitTestResult, position: Offset) -> bool:
        # Topmost (last painted) first
        for child, child_offset in reversed(list(zip(self._children, self._offsets))):
            hit = result.add_with_paint_offset(
                offset=child_offset,
                position=position,
                hit_test=lambda result, transformed, child=child: child.hit_test(result, transformed),
            )
            if hit:
                return True
        return False
