"""Reference adjustment executor built on the :class:`Color` value type.

Slow but easy to audit: every pixel is decoded into a :class:`Color`, adjusted
through :func:`adjust_color` and written back.  The compiled executors are
tested against this path.
"""

from __future__ import annotations

import numpy as np

from ..color import Color


def adjust_color(
    color: Color,
    tint_degrees: float,
    saturation_factor: float,
    exposure_scale: float,
) -> Color:
    """Return *color* with tint, saturation and exposure applied in HSB space.

    The source alpha byte is preserved verbatim.
    """

    hue, saturation, brightness = color.to_hsb()
    hue += tint_degrees
    saturation *= saturation_factor
    brightness = min(1.0, brightness * exposure_scale)
    return Color.from_hsb(hue, saturation, brightness).with_alpha(color.a)


def apply_adjustment_fallback(
    buffer: np.ndarray,
    width: int,
    height: int,
    stride: int,
    tint_degrees: float,
    saturation_factor: float,
    exposure_scale: float,
) -> None:
    """Mutate the flat ``uint8`` *buffer* in place one :class:`Color` at a time."""

    for y in range(height):
        row_offset = y * stride
        for x in range(width):
            index = row_offset + x * 4
            colour = Color.from_bytes(
                int(buffer[index + 2]),
                int(buffer[index + 1]),
                int(buffer[index]),
                int(buffer[index + 3]),
            )
            colour = adjust_color(colour, tint_degrees, saturation_factor, exposure_scale)
            buffer[index] = colour.b
            buffer[index + 1] = colour.g
            buffer[index + 2] = colour.r
            buffer[index + 3] = colour.a
