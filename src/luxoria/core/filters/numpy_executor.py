"""NumPy vectorised adjustment executor.

The executor mirrors :func:`luxoria.core.filters.algorithms._adjust_rgb`
operation by operation in ``float64`` so it writes exactly the same bytes as
the JIT kernel.  It is useful where Numba compilation is undesirable (cold
start in short-lived processes) and as an independent cross-check.
"""

from __future__ import annotations

import numpy as np
from numpy.lib.stride_tricks import as_strided


def _pixel_grid(buffer: np.ndarray, width: int, height: int, stride: int) -> np.ndarray:
    """Return a writable ``(height, width, 4)`` view skipping row padding."""

    return as_strided(
        buffer,
        shape=(height, width, 4),
        strides=(stride * buffer.strides[0], 4 * buffer.strides[0], buffer.strides[0]),
    )


def _np_rgb_to_hsb(
    r: np.ndarray, g: np.ndarray, b: np.ndarray
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    maximum = np.maximum(r, np.maximum(g, b))
    minimum = np.minimum(r, np.minimum(g, b))
    delta = maximum - minimum

    chromatic = delta > 0.0
    delta_safe = np.where(chromatic, delta, 1.0)
    saturation = np.where(maximum > 0.0, delta / np.where(maximum > 0.0, maximum, 1.0), 0.0)

    # Red wins ties over green, green over blue.
    is_red = maximum == r
    is_green = ~is_red & (maximum == g)
    hue_red = (g - b) / delta_safe + np.where(g < b, 6.0, 0.0)
    hue_green = (b - r) / delta_safe + 2.0
    hue_blue = (r - g) / delta_safe + 4.0
    hue = np.where(is_red, hue_red, np.where(is_green, hue_green, hue_blue))
    hue = np.where(chromatic, hue / 6.0 * 360.0, 0.0)
    return hue, saturation, maximum


def _np_hsb_to_rgb(
    hue: np.ndarray, saturation: np.ndarray, brightness: np.ndarray
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    hue = np.mod(np.where(np.isfinite(hue), hue, 0.0), 360.0)
    # NaN goes to the lower bound, as in the scalar clamp.
    saturation = np.clip(np.nan_to_num(saturation, nan=0.0), 0.0, 1.0)
    brightness = np.clip(np.nan_to_num(brightness, nan=0.0), 0.0, 1.0)

    chroma = saturation * brightness
    x = chroma * (1.0 - np.abs(np.mod(hue / 60.0, 2.0) - 1.0))
    m = brightness - chroma
    zero = np.zeros_like(chroma)

    conditions = [hue < 60.0, hue < 120.0, hue < 180.0, hue < 240.0, hue < 300.0]
    r = np.select(conditions, [chroma, x, zero, zero, x], default=chroma)
    g = np.select(conditions, [x, chroma, chroma, x, zero], default=zero)
    b = np.select(conditions, [zero, zero, x, chroma, chroma], default=x)

    # ``rint`` rounds half-to-even, the same rule as the scalar path.
    return (
        np.rint((r + m) * 255.0),
        np.rint((g + m) * 255.0),
        np.rint((b + m) * 255.0),
    )


def apply_adjustment_vectorized(
    buffer: np.ndarray,
    width: int,
    height: int,
    stride: int,
    tint_degrees: float,
    saturation_factor: float,
    exposure_scale: float,
) -> None:
    """Mutate the flat ``uint8`` *buffer* in place with whole-image array math."""

    if width <= 0 or height <= 0:
        return

    grid = _pixel_grid(buffer, width, height, stride)
    channels = grid[..., :3].astype(np.float64) / 255.0
    b = channels[..., 0]
    g = channels[..., 1]
    r = channels[..., 2]

    hue, saturation, brightness = _np_rgb_to_hsb(r, g, b)
    # Non-finite parameters (``0 * inf`` on grey pixels) are normalised below.
    with np.errstate(invalid="ignore"):
        hue = hue + float(tint_degrees)
        saturation = saturation * float(saturation_factor)
        brightness = np.minimum(1.0, brightness * float(exposure_scale))
        r_out, g_out, b_out = _np_hsb_to_rgb(hue, saturation, brightness)
    grid[..., 0] = b_out.astype(np.uint8)
    grid[..., 1] = g_out.astype(np.uint8)
    grid[..., 2] = r_out.astype(np.uint8)
