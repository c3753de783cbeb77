"""Slotted prototype-height layout and declarative tree loading."""

from .loader import TreeLoader
from .prototype_height import RenderPrototypeHeight
from .slots import PrototypeHeightSlot, SlotRegistry

__all__ = ["PrototypeHeightSlot", "RenderPrototypeHeight", "SlotRegistry", "TreeLoader"]
