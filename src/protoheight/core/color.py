"""Color parsing for node configuration."""

from __future__ import annotations

from PIL import ImageColor

RGBA = tuple[int, int, int, int]
ColorLike = str | tuple[int, ...]


def parse_color(value: ColorLike) -> RGBA:
    """Normalize a color value to an RGBA tuple.

    Args:
        value: Either a string Pillow understands ("#ff8800", "white",
            "rgb(10, 20, 30)") or a tuple of 3 or 4 integer channels in 0-255.

    Returns:
        (R, G, B, A) tuple of ints

    Raises:
        ValueError: If the value cannot be represented as a color
    """
    if isinstance(value, str):
        try:
            rgb = ImageColor.getrgb(value)
        except ValueError as exc:
            raise ValueError(f"Unknown color string: {value!r}") from exc
        return _with_alpha(rgb)

    if isinstance(value, (tuple, list)):
        if len(value) not in (3, 4):
            raise ValueError(f"Color tuple must have 3 or 4 channels, got {len(value)}: {value!r}")
        for channel in value:
            # bool is an int subclass but never a meaningful channel
            if isinstance(channel, bool) or not isinstance(channel, int):
                raise ValueError(f"Color channels must be integers, got {value!r}")
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channels must be within 0-255, got {value!r}")
        return _with_alpha(tuple(value))

    raise ValueError(f"Unsupported color value: {value!r}")


def _with_alpha(rgb: tuple[int, ...]) -> RGBA:
    if len(rgb) == 4:
        return (rgb[0], rgb[1], rgb[2], rgb[3])
    return (rgb[0], rgb[1], rgb[2], 255)
