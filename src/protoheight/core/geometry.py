"""Value types for 2D box layout: offsets, sizes, rectangles and constraints.

Coordinates follow screen convention: x grows to the right, y grows downward,
and every node measures positions relative to its own top-left origin.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Offset:
    """A 2D displacement, also used as a point relative to some origin."""

    dx: float = 0.0
    dy: float = 0.0

    @classmethod
    def zero(cls) -> Offset:
        return cls(0.0, 0.0)

    def __add__(self, other: Offset) -> Offset:
        return Offset(self.dx + other.dx, self.dy + other.dy)

    def __sub__(self, other: Offset) -> Offset:
        return Offset(self.dx - other.dx, self.dy - other.dy)

    def __neg__(self) -> Offset:
        return Offset(-self.dx, -self.dy)

    def __and__(self, size: Size) -> Rect:
        """Build the rectangle with this offset as top-left corner."""
        return Rect.from_ltwh(self.dx, self.dy, size.width, size.height)


@dataclass(frozen=True)
class Size:
    """Width and height of a box."""

    width: float = 0.0
    height: float = 0.0

    @classmethod
    def zero(cls) -> Size:
        return cls(0.0, 0.0)

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.width) and math.isfinite(self.height)

    @property
    def is_negative(self) -> bool:
        """True if either extent is below zero (or NaN)."""
        return not (self.width >= 0.0 and self.height >= 0.0)

    def contains(self, position: Offset) -> bool:
        """Check whether a local position lies inside a box of this size.

        The test is half-open: the left/top edges are inside, the
        right/bottom edges are not.
        """
        return 0.0 <= position.dx < self.width and 0.0 <= position.dy < self.height


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its four edges."""

    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def from_ltwh(cls, left: float, top: float, width: float, height: float) -> Rect:
        return cls(left, top, left + width, top + height)

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def top_left(self) -> Offset:
        return Offset(self.left, self.top)

    @property
    def is_empty(self) -> bool:
        return self.left >= self.right or self.top >= self.bottom

    def shift(self, offset: Offset) -> Rect:
        """Return this rectangle translated by an offset."""
        return Rect(
            self.left + offset.dx,
            self.top + offset.dy,
            self.right + offset.dx,
            self.bottom + offset.dy,
        )

    def intersect(self, other: Rect) -> Rect:
        """Return the overlap of two rectangles (may be empty)."""
        return Rect(
            max(self.left, other.left),
            max(self.top, other.top),
            min(self.right, other.right),
            min(self.bottom, other.bottom),
        )


@dataclass(frozen=True)
class BoxConstraints:
    """Immutable layout constraints for a box.

    A size satisfies the constraints when
    ``min_width <= width <= max_width`` and
    ``min_height <= height <= max_height``. The default instance places no
    restriction at all: both minimums are zero and both maximums are infinite.

    Attributes:
        min_width: Smallest allowed width
        max_width: Largest allowed width (may be infinite)
        min_height: Smallest allowed height
        max_height: Largest allowed height (may be infinite)
    """

    min_width: float = 0.0
    max_width: float = math.inf
    min_height: float = 0.0
    max_height: float = math.inf

    def __post_init__(self) -> None:
        values = (self.min_width, self.max_width, self.min_height, self.max_height)
        if any(math.isnan(v) for v in values):
            raise ValueError(f"BoxConstraints must not contain NaN: {self}")
        if self.min_width < 0 or self.min_height < 0:
            raise ValueError(f"BoxConstraints minimums must be non-negative: {self}")
        if not math.isfinite(self.min_width) or not math.isfinite(self.min_height):
            raise ValueError(f"BoxConstraints minimums must be finite: {self}")
        if self.min_width > self.max_width or self.min_height > self.max_height:
            raise ValueError(f"BoxConstraints minimum exceeds maximum: {self}")

    @classmethod
    def tight(cls, size: Size) -> BoxConstraints:
        """Constraints that only allow exactly the given size."""
        return cls(size.width, size.width, size.height, size.height)

    @classmethod
    def loose(cls, size: Size) -> BoxConstraints:
        """Constraints that allow any size up to the given size."""
        return cls(0.0, size.width, 0.0, size.height)

    @property
    def has_bounded_width(self) -> bool:
        return math.isfinite(self.max_width)

    @property
    def has_bounded_height(self) -> bool:
        return math.isfinite(self.max_height)

    @property
    def is_tight(self) -> bool:
        return self.min_width >= self.max_width and self.min_height >= self.max_height

    @property
    def smallest(self) -> Size:
        return Size(self.min_width, self.min_height)

    def constrain_width(self, width: float) -> float:
        return min(max(width, self.min_width), self.max_width)

    def constrain_height(self, height: float) -> float:
        return min(max(height, self.min_height), self.max_height)

    def constrain(self, size: Size) -> Size:
        """Clamp each axis of a size into these constraints independently."""
        return Size(self.constrain_width(size.width), self.constrain_height(size.height))

    def is_satisfied_by(self, size: Size) -> bool:
        return (
            self.min_width <= size.width <= self.max_width
            and self.min_height <= size.height <= self.max_height
        )

    def __repr__(self) -> str:
        def fmt(v: float) -> str:
            return "inf" if math.isinf(v) else f"{v:.1f}"

        return (
            f"BoxConstraints(w={fmt(self.min_width)}..{fmt(self.max_width)}, "
            f"h={fmt(self.min_height)}..{fmt(self.max_height)})"
        )
