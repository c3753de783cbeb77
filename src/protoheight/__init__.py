"""Protoheight - a two-slot layout node that borrows its height from a prototype."""

from .core import BoxConstraints, LayoutError, Offset, PipelineOwner, RenderBox, Size
from .layout import PrototypeHeightSlot, RenderPrototypeHeight, SlotRegistry

__version__ = "0.1.0"

__all__ = [
    "BoxConstraints",
    "LayoutError",
    "Offset",
    "PipelineOwner",
    "RenderBox",
    "Size",
    "PrototypeHeightSlot",
    "RenderPrototypeHeight",
    "SlotRegistry",
]
