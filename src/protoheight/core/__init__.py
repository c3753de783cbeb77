"""Core render-tree components."""

from .color import parse_color
from .geometry import BoxConstraints, Offset, Rect, Size
from .hit_test import BoxHitTestResult, HitTestEntry
from .node import LayoutError, RenderBox
from .pipeline import PipelineOwner

__all__ = [
    "BoxConstraints",
    "Offset",
    "Rect",
    "Size",
    "BoxHitTestResult",
    "HitTestEntry",
    "LayoutError",
    "RenderBox",
    "PipelineOwner",
    "parse_color",
]
