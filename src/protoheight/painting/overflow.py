"""Debug overlay marking where a node's children overflow its box.

Each overflowing side gets a strip of yellow/black hatching along the
inside edge of the container, plus a short label saying by how much the
content overflowed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np
from numpy.typing import NDArray

from ..core.geometry import Offset, Rect
from ..debug import DebugSettings, debug_settings
from .canvas import Canvas

# Translucent hatch colors
STRIPE_YELLOW = np.array([255, 255, 0, 191], dtype=np.uint8)
STRIPE_BLACK = np.array([0, 0, 0, 191], dtype=np.uint8)
LABEL_COLOR = (144, 0, 0, 255)
LABEL_PADDING = 1.0


class OverflowSide(Enum):
    """Edge of the container that the content spills past."""

    LEFT = "LEFT"
    TOP = "TOP"
    RIGHT = "RIGHT"
    BOTTOM = "BOTTOM"


@dataclass(frozen=True)
class OverflowRegion:
    """One overflowing side.

    Attributes:
        side: Which edge overflowed
        amount: How far the content extends past that edge, in pixels
        marker: Where to paint the hatching, in container-local coordinates
    """

    side: OverflowSide
    amount: float
    marker: Rect

    @property
    def label(self) -> str:
        return f"{self.side.value} OVERFLOWED BY {format_pixels(self.amount)} PIXELS"


def format_pixels(value: float) -> str:
    """Format an overflow amount with precision that shrinks as it grows."""
    if value > 10.0:
        return f"{value:.0f}"
    if value > 1.0:
        return f"{value:.1f}"
    return f"{value:.3g}"


def overflow_regions(
    container_rect: Rect,
    child_rect: Rect,
    fraction: float = 0.1,
) -> list[OverflowRegion]:
    """Work out which sides of container_rect child_rect spills over.

    The marker on each side sits just inside the container edge. Its
    thickness is a fraction of the container extent, but never more than
    the overflow gap itself (and at least one pixel so it stays visible).

    Args:
        container_rect: The node's own bounds
        child_rect: Bounds the children wanted
        fraction: Marker thickness relative to the container extent

    Returns:
        Overflowing sides in LEFT, TOP, RIGHT, BOTTOM order (may be empty)
    """
    overflow = {
        OverflowSide.LEFT: container_rect.left - child_rect.left,
        OverflowSide.TOP: container_rect.top - child_rect.top,
        OverflowSide.RIGHT: child_rect.right - container_rect.right,
        OverflowSide.BOTTOM: child_rect.bottom - container_rect.bottom,
    }

    def thickness(extent: float, gap: float) -> float:
        return min(extent, max(1.0, min(extent * fraction, gap)))

    regions = []
    for side, amount in overflow.items():
        if amount <= 0:
            continue
        c = container_rect
        if side is OverflowSide.LEFT:
            marker = Rect.from_ltwh(c.left, c.top, thickness(c.width, amount), c.height)
        elif side is OverflowSide.RIGHT:
            t = thickness(c.width, amount)
            marker = Rect.from_ltwh(c.right - t, c.top, t, c.height)
        elif side is OverflowSide.TOP:
            marker = Rect.from_ltwh(c.left, c.top, c.width, thickness(c.height, amount))
        else:
            t = thickness(c.height, amount)
            marker = Rect.from_ltwh(c.left, c.bottom - t, c.width, t)
        regions.append(OverflowRegion(side=side, amount=amount, marker=marker))
    return regions


def hatch_pattern(width: int, height: int, stripe_width: int) -> NDArray[np.uint8]:
    """Build a diagonal yellow/black stripe pattern.

    Returns:
        HxWx4 uint8 RGBA array
    """
    yy, xx = np.mgrid[0:height, 0:width]
    bands = ((xx + yy) // stripe_width) % 2
    return np.where(bands[..., None] == 0, STRIPE_YELLOW, STRIPE_BLACK).astype(np.uint8)


def paint_overflow_indicator(
    canvas: Canvas,
    offset: Offset,
    container_rect: Rect,
    child_rect: Rect,
    settings: DebugSettings | None = None,
) -> list[OverflowRegion]:
    """Paint overflow markers for a node painted at offset.

    Args:
        canvas: Surface to paint on
        offset: Paint offset of the node
        container_rect: Node bounds in node-local coordinates
        child_rect: Desired children bounds in node-local coordinates
        settings: Debug settings; the shared instance if omitted

    Returns:
        Every overflowing region; regions with an empty marker are not drawn
    """
    settings = settings or debug_settings
    regions = overflow_regions(container_rect, child_rect, settings.indicator_fraction)
    for region in regions:
        if region.marker.is_empty:
            # Zero-sized node: nothing inside it to mark
            continue
        marker = region.marker.shift(offset)
        width = max(1, round(marker.width) + 1)
        height = max(1, round(marker.height) + 1)
        canvas.draw_pattern(marker, hatch_pattern(width, height, settings.stripe_width))
        canvas.draw_text(
            marker.top_left + Offset(LABEL_PADDING, LABEL_PADDING),
            region.label,
            LABEL_COLOR,
        )
    return regions
