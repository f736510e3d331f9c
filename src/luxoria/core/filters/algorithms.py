"""Scalar color-space math shared by every adjustment executor.

The helpers are compiled with Numba so the JIT kernel can inline them, while
remaining plain callables for the :class:`~luxoria.core.color.Color` value type
and the pure-Python fallback.  Everything operates on ``float64`` so all
executors agree bit-for-bit on the bytes they write.

Byte reconstruction from HSB rounds half-to-even, matching ``numpy.rint`` in
the vectorised executor.  Byte construction from normalised floats truncates
toward zero instead; the asymmetry is part of the export contract.
"""

from __future__ import annotations

import math

from numba import jit


@jit(nopython=True, cache=True)
def _clamp(value: float, minimum: float, maximum: float) -> float:
    # NaN fails every comparison and lands on the lower bound.
    if not value >= minimum:
        return minimum
    if value > maximum:
        return maximum
    return value


@jit(nopython=True, cache=True)
def _round_half_even(value: float) -> int:
    """Return *value* rounded to the nearest integer, ties going to even."""

    floor = math.floor(value)
    diff = value - floor
    if diff > 0.5:
        return int(floor) + 1
    if diff < 0.5:
        return int(floor)
    if floor % 2.0 == 0.0:
        return int(floor)
    return int(floor) + 1


@jit(nopython=True, cache=True)
def _float_to_byte(value: float) -> int:
    """Truncate a normalised channel to a byte, clamped into ``[0, 255]``."""

    scaled = value * 255.0
    if scaled != scaled:
        return 0
    if scaled <= 0.0:
        return 0
    if scaled >= 255.0:
        return 255
    return int(scaled)


@jit(nopython=True, cache=True)
def _hue_from_rgb(r: float, g: float, b: float, maximum: float, delta: float) -> float:
    """Return the hue in degrees for a chromatic colour.

    The ``maximum == r`` / ``maximum == g`` precedence decides ties between two
    maximal channels (yellow, cyan, magenta) and must stay in this order.
    """

    if maximum == r:
        hue = (g - b) / delta
        if g < b:
            hue += 6.0
    elif maximum == g:
        hue = (b - r) / delta + 2.0
    else:
        hue = (r - g) / delta + 4.0
    return hue / 6.0 * 360.0


@jit(nopython=True, cache=True)
def _rgb_to_hsb(red: int, green: int, blue: int) -> tuple[float, float, float]:
    """Return ``(hue, saturation, brightness)`` for 8-bit channels."""

    r = red / 255.0
    g = green / 255.0
    b = blue / 255.0
    maximum = max(r, max(g, b))
    minimum = min(r, min(g, b))
    delta = maximum - minimum

    saturation = 0.0 if maximum == 0.0 else delta / maximum
    if maximum == minimum:
        hue = 0.0
    else:
        hue = _hue_from_rgb(r, g, b, maximum, delta)
    return hue, saturation, maximum


@jit(nopython=True, cache=True)
def _rgb_to_hsl(red: int, green: int, blue: int) -> tuple[float, float, float]:
    """Return ``(hue, saturation, lightness)`` for 8-bit channels."""

    r = red / 255.0
    g = green / 255.0
    b = blue / 255.0
    maximum = max(r, max(g, b))
    minimum = min(r, min(g, b))
    lightness = (maximum + minimum) / 2.0

    if maximum == minimum:
        return 0.0, 0.0, lightness

    delta = maximum - minimum
    if lightness > 0.5:
        saturation = delta / (2.0 - maximum - minimum)
    else:
        saturation = delta / (maximum + minimum)
    return _hue_from_rgb(r, g, b, maximum, delta), saturation, lightness


@jit(nopython=True, cache=True)
def _sector_components(hue: float, chroma: float) -> tuple[float, float, float]:
    """Split *chroma* over the RGB channels for the 60° sector holding *hue*."""

    x = chroma * (1.0 - abs((hue / 60.0) % 2.0 - 1.0))
    if hue < 60.0:
        return chroma, x, 0.0
    if hue < 120.0:
        return x, chroma, 0.0
    if hue < 180.0:
        return 0.0, chroma, x
    if hue < 240.0:
        return 0.0, x, chroma
    if hue < 300.0:
        return x, 0.0, chroma
    return chroma, 0.0, x


@jit(nopython=True, cache=True)
def _hsb_to_rgb(hue: float, saturation: float, brightness: float) -> tuple[int, int, int]:
    """Return rounded 8-bit channels for an HSB triple.

    Hue is reduced with floor modulo so negative shifts land in ``[0, 360)``
    and a non-finite hue counts as ``0``; saturation and brightness are
    clamped into ``[0, 1]``.
    """

    if not math.isfinite(hue):
        hue = 0.0
    hue = hue % 360.0
    saturation = _clamp(saturation, 0.0, 1.0)
    brightness = _clamp(brightness, 0.0, 1.0)

    chroma = saturation * brightness
    m = brightness - chroma
    r, g, b = _sector_components(hue, chroma)
    return (
        _round_half_even((r + m) * 255.0),
        _round_half_even((g + m) * 255.0),
        _round_half_even((b + m) * 255.0),
    )


@jit(nopython=True, cache=True)
def _hsl_to_rgb(hue: float, saturation: float, lightness: float) -> tuple[int, int, int]:
    """Return truncated 8-bit channels for an HSL triple."""

    if not math.isfinite(hue):
        hue = 0.0
    hue = hue % 360.0
    saturation = _clamp(saturation, 0.0, 1.0)
    lightness = _clamp(lightness, 0.0, 1.0)

    chroma = (1.0 - abs(2.0 * lightness - 1.0)) * saturation
    m = lightness - chroma / 2.0
    r, g, b = _sector_components(hue, chroma)
    return (
        _float_to_byte(r + m),
        _float_to_byte(g + m),
        _float_to_byte(b + m),
    )


@jit(nopython=True, cache=True)
def _adjust_rgb(
    red: int,
    green: int,
    blue: int,
    tint_degrees: float,
    saturation_factor: float,
    exposure_scale: float,
) -> tuple[int, int, int]:
    """Apply tint, saturation and exposure to one pixel through HSB space.

    The hue shift is left unreduced and saturation unclamped here;
    :func:`_hsb_to_rgb` normalises both.  Exposure only ever scales
    brightness up to the explicit ``1.0`` ceiling.
    """

    hue, saturation, brightness = _rgb_to_hsb(red, green, blue)
    hue = hue + tint_degrees
    saturation = saturation * saturation_factor
    brightness = min(1.0, brightness * exposure_scale)
    return _hsb_to_rgb(hue, saturation, brightness)
