"""Raster painting surface backed by a Pillow image."""

from __future__ import annotations

from pathlib import Path

import numpy as np
from numpy.typing import NDArray
from PIL import Image, ImageDraw, ImageFont

from ..core.color import RGBA, ColorLike, parse_color
from ..core.geometry import Offset, Rect


class Canvas:
    """An RGBA drawing surface that render nodes paint onto.

    Coordinates are in logical pixels with the origin at the top-left.
    Fractional edges are rounded to the nearest pixel and everything is
    clipped to the canvas bounds, so nodes may paint partly off-screen.
    """

    def __init__(self, width: int, height: int, background: ColorLike | None = None) -> None:
        """Create a blank canvas.

        Args:
            width: Canvas width in pixels
            height: Canvas height in pixels
            background: Color used by clear(); transparent if omitted
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.background: RGBA = parse_color(background) if background is not None else (0, 0, 0, 0)
        self.image = Image.new("RGBA", (width, height), self.background)
        self._draw = ImageDraw.Draw(self.image, "RGBA")

    @property
    def bounds(self) -> Rect:
        return Rect(0, 0, self.width, self.height)

    def clear(self) -> None:
        """Reset every pixel to the background color."""
        self._draw.rectangle([0, 0, self.width, self.height], fill=self.background)

    def _pixel_box(self, rect: Rect) -> tuple[int, int, int, int] | None:
        """Round and clip a rectangle to integer pixel edges (right/bottom exclusive)."""
        clipped = rect.intersect(self.bounds)
        left, top = round(clipped.left), round(clipped.top)
        right, bottom = round(clipped.right), round(clipped.bottom)
        if left >= right or top >= bottom:
            return None
        return left, top, right, bottom

    def draw_rect(self, rect: Rect, color: ColorLike) -> None:
        """Fill a rectangle with a color, replacing the pixels underneath (alpha included)."""
        box = self._pixel_box(rect)
        if box is None:
            return
        left, top, right, bottom = box
        # Pillow treats the second corner as inclusive
        self._draw.rectangle([left, top, right - 1, bottom - 1], fill=parse_color(color))

    def draw_pattern(self, rect: Rect, pixels: NDArray[np.uint8]) -> None:
        """Alpha-composite an RGBA pixel pattern into a rectangle.

        The pattern is anchored at the rectangle's top-left corner and
        cropped to whatever part of the rectangle is visible.

        Args:
            rect: Destination rectangle
            pixels: HxWx4 uint8 array at least as large as the visible area
        """
        box = self._pixel_box(rect)
        if box is None:
            return
        left, top, right, bottom = box
        skip_x = left - round(rect.left)
        skip_y = top - round(rect.top)
        tile = pixels[skip_y:skip_y + bottom - top, skip_x:skip_x + right - left]
        if tile.size == 0:
            return
        self.image.alpha_composite(Image.fromarray(np.ascontiguousarray(tile)), dest=(left, top))

    def draw_text(self, position: Offset, text: str, color: ColorLike) -> None:
        """Draw a single line of text with its top-left corner at position."""
        font = ImageFont.load_default()
        self._draw.text((round(position.dx), round(position.dy)), text, fill=parse_color(color), font=font)

    def pixel(self, x: int, y: int) -> RGBA:
        return self.image.getpixel((x, y))

    def to_array(self) -> NDArray[np.uint8]:
        """Return the canvas as an HxWx4 uint8 array."""
        return np.array(self.image)

    def save(self, path: str | Path) -> None:
        """Write the canvas to an image file (format from the extension)."""
        self.image.save(str(path))
