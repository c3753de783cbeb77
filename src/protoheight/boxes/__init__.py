"""Boxes that can fill a container's slots."""

from .primitives import RenderRow, RenderSizedBox

__all__ = ["RenderRow", "RenderSizedBox"]
