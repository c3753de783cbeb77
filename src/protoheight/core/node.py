"""RenderBox base class for box-model layout, paint and hit testing."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Callable, Iterator

from .geometry import BoxConstraints, Offset, Size
from .hit_test import BoxHitTestResult, HitTestEntry

if TYPE_CHECKING:
    from ..painting.canvas import Canvas
    from .pipeline import PipelineOwner


class LayoutError(RuntimeError):
    """Raised when a layout pass produces geometry that cannot be used."""


class RenderBox:
    """A node in the render tree that lays itself out as a rectangle.

    Subclasses implement perform_layout() and, where they can answer
    without committing, compute_dry_layout() and the compute_*_intrinsic_*
    hooks. Callers go through the public layout(), get_dry_layout() and
    get_*_intrinsic_*() entry points, which add caching and consistency
    checks on top of the hooks.

    A node does not store its own position. Whoever owns a child decides
    where it goes and keeps that offset itself.

    Example:
        box = RenderSizedBox(40, 60)
        box.layout(BoxConstraints())
        assert box.size == Size(40, 60)
    """

    def __init__(self, name: str | None = None) -> None:
        self.name = name or self.__class__.__name__
        self.parent: RenderBox | None = None
        self.owner: PipelineOwner | None = None

        self._size: Size | None = None
        self._constraints: BoxConstraints | None = None
        self._needs_layout = True
        self._needs_paint = True

        self._intrinsic_cache: dict[tuple[str, float], float] = {}
        self._dry_layout_cache: dict[BoxConstraints, Size] = {}

    # TREE

    def visit_children(self, visitor: Callable[[RenderBox], None]) -> None:
        """Call visitor for every direct child. Leaf nodes have none."""

    def iter_nodes(self, include_self: bool = True) -> Iterator[RenderBox]:
        """Iterate over this node and all descendants (depth-first).

        Args:
            include_self: Whether to include this node in the iteration

        Yields:
            RenderBox instances
        """
        if include_self:
            yield self
        children: list[RenderBox] = []
        self.visit_children(children.append)
        for child in children:
            yield from child.iter_nodes(include_self=True)

    @property
    def depth(self) -> int:
        """Get the depth of this node in the tree (root = 0)."""
        if self.parent is None:
            return 0
        return self.parent.depth + 1

    @property
    def root(self) -> RenderBox:
        if self.parent is None:
            return self
        return self.parent.root

    def adopt_child(self, child: RenderBox) -> None:
        """Make this node the parent of child and schedule a relayout."""
        if child.parent is not None:
            raise ValueError(
                f"Cannot adopt '{child.name}': already a child of '{child.parent.name}'"
            )
        child.parent = self
        if self.owner is not None:
            child.attach(self.owner)
        self.mark_needs_layout()

    def drop_child(self, child: RenderBox) -> None:
        """Detach child from this node and schedule a relayout."""
        if child.parent is not self:
            raise ValueError(f"Cannot drop '{child.name}': not a child of '{self.name}'")
        child.parent = None
        child.detach()
        self.mark_needs_layout()

    def attach(self, owner: PipelineOwner) -> None:
        """Attach this subtree to a pipeline owner."""
        self.owner = owner
        self.visit_children(lambda child: child.attach(owner))

    def detach(self) -> None:
        self.owner = None
        self.visit_children(lambda child: child.detach())

    # LAYOUT

    @property
    def needs_layout(self) -> bool:
        return self._needs_layout

    @property
    def needs_paint(self) -> bool:
        return self._needs_paint

    @property
    def has_size(self) -> bool:
        return self._size is not None

    @property
    def size(self) -> Size:
        """The size chosen by the most recent layout pass."""
        if self._size is None:
            raise LayoutError(f"'{self.name}' has not been laid out yet")
        return self._size

    @size.setter
    def size(self, value: Size) -> None:
        self._size = value

    @property
    def constraints(self) -> BoxConstraints:
        """The constraints passed to the most recent layout pass."""
        if self._constraints is None:
            raise LayoutError(f"'{self.name}' has not received constraints yet")
        return self._constraints

    def layout(self, constraints: BoxConstraints, parent_uses_size: bool = False) -> None:
        """Lay this node out under the given constraints.

        Does nothing if the node is clean and the constraints are the same
        as last time. After perform_layout() returns, the new size is checked:
        it must be finite, non-negative and satisfy the constraints.

        Args:
            constraints: Constraints imposed by the parent
            parent_uses_size: Whether the parent reads the resulting size.
                Kept for call-site readability; every parent is relaid out
                when a child changes.

        Raises:
            LayoutError: If the node produced an unusable size
        """
        if not self._needs_layout and constraints == self._constraints:
            return
        self._constraints = constraints
        self.perform_layout()
        self._check_size(self.size, constraints)
        self._needs_layout = False
        self.mark_needs_paint()

    def perform_layout(self) -> None:
        """Compute self.size from self.constraints and lay out children."""
        raise NotImplementedError

    def _check_size(self, size: Size, constraints: BoxConstraints) -> None:
        if size.is_negative:
            raise LayoutError(f"'{self.name}' produced a negative size {size}")
        if not size.is_finite:
            raise LayoutError(f"'{self.name}' produced a non-finite size {size} under {constraints!r}")
        if not constraints.is_satisfied_by(size):
            raise LayoutError(f"'{self.name}' size {size} does not satisfy {constraints!r}")

    def mark_needs_layout(self) -> None:
        """Invalidate cached measurements and schedule a relayout.

        The request travels up to the root, so every ancestor is laid out
        again on the next frame.
        """
        self._intrinsic_cache.clear()
        self._dry_layout_cache.clear()
        was_dirty = self._needs_layout
        self._needs_layout = True
        if self.parent is not None:
            self.parent.mark_needs_layout()
        elif self.owner is not None and not was_dirty:
            self.owner.request_layout(self)

    # DRY LAYOUT AND INTRINSICS

    def get_dry_layout(self, constraints: BoxConstraints) -> Size:
        """Return the size layout() would produce, without committing it."""
        cached = self._dry_layout_cache.get(constraints)
        if cached is None:
            cached = self.compute_dry_layout(constraints)
            self._check_size(cached, constraints)
            self._dry_layout_cache[constraints] = cached
        return cached

    def compute_dry_layout(self, constraints: BoxConstraints) -> Size:
        raise NotImplementedError(f"{self.__class__.__name__} does not support dry layout")

    def get_min_intrinsic_width(self, height: float) -> float:
        return self._intrinsic("min_width", height, self.compute_min_intrinsic_width)

    def get_max_intrinsic_width(self, height: float) -> float:
        return self._intrinsic("max_width", height, self.compute_max_intrinsic_width)

    def get_min_intrinsic_height(self, width: float) -> float:
        return self._intrinsic("min_height", width, self.compute_min_intrinsic_height)

    def get_max_intrinsic_height(self, width: float) -> float:
        return self._intrinsic("max_height", width, self.compute_max_intrinsic_height)

    def _intrinsic(self, kind: str, extent: float, compute: Callable[[float], float]) -> float:
        if math.isnan(extent) or extent < 0:
            raise ValueError(f"Intrinsic {kind} query on '{self.name}' needs a non-negative extent, got {extent}")
        key = (kind, extent)
        if key not in self._intrinsic_cache:
            self._intrinsic_cache[key] = compute(extent)
        return self._intrinsic_cache[key]

    def compute_min_intrinsic_width(self, height: float) -> float:
        return 0.0

    def compute_max_intrinsic_width(self, height: float) -> float:
        return 0.0

    def compute_min_intrinsic_height(self, width: float) -> float:
        return 0.0

    def compute_max_intrinsic_height(self, width: float) -> float:
        return 0.0

    # PAINT

    def paint(self, canvas: Canvas, offset: Offset) -> None:
        """Paint this node with its top-left corner at offset. Default: nothing."""

    def mark_needs_paint(self) -> None:
        """Schedule a repaint without touching layout. Idempotent."""
        if self._needs_paint:
            return
        self._needs_paint = True
        if self.parent is not None:
            self.parent.mark_needs_paint()
        elif self.owner is not None:
            self.owner.request_paint(self)

    def mark_painted(self) -> None:
        self._needs_paint = False

    # HIT TEST

    def hit_test(self, result: BoxHitTestResult, position: Offset) -> bool:
        """Check whether position (in local coordinates) hits this node.

        Children are tested first; the node records itself only if a child
        or the node itself accepted the hit.
        """
        if self.size.contains(position):
            if self.hit_test_children(result, position) or self.hit_test_self(position):
                result.add(HitTestEntry(self, position))
                return True
        return False

    def hit_test_children(self, result: BoxHitTestResult, position: Offset) -> bool:
        return False

    def hit_test_self(self, position: Offset) -> bool:
        return False

    def __repr__(self) -> str:
        size_str = f", size=({self._size.width:g}x{self._size.height:g})" if self._size else ""
        return f"{self.__class__.__name__}({self.name!r}{size_str})"
