"""Painting surface and debug overlays."""

from .canvas import Canvas
from .overflow import OverflowRegion, OverflowSide, overflow_regions, paint_overflow_indicator

__all__ = ["Canvas", "OverflowRegion", "OverflowSide", "overflow_regions", "paint_overflow_indicator"]
