"""Run the adjustment engine over in-memory Pillow images.

Pillow decodes into RGBA; the engine consumes BGRA.  The adapter swaps the
channel order on the way in, lets Pillow's ``BGRA`` raw decoder swap it back
on the way out, and never touches the file system.
"""

from __future__ import annotations

from typing import Mapping

import numpy as np
from PIL import Image

from ..adjustment_resolver import AdjustmentParameters
from .facade import apply_adjustment_inplace


def pil_to_bgra(image: Image.Image) -> tuple[np.ndarray, int, int, int]:
    """Return ``(buffer, width, height, stride)`` for *image* as tightly packed BGRA."""

    rgba = np.asarray(image.convert("RGBA"), dtype=np.uint8)
    height, width = rgba.shape[:2]
    bgra = np.ascontiguousarray(rgba[..., [2, 1, 0, 3]])
    return bgra.reshape(-1), width, height, width * 4


def bgra_to_pil(buffer: bytes | bytearray | np.ndarray, width: int, height: int, stride: int) -> Image.Image:
    """Wrap a BGRA buffer into a detached RGBA :class:`PIL.Image.Image`."""

    data = buffer.tobytes() if isinstance(buffer, np.ndarray) else bytes(buffer)
    return Image.frombuffer(
        "RGBA",
        (width, height),
        data,
        "raw",
        "BGRA",
        stride,
        1,
    ).copy()


def apply_adjustment_to_pil(
    image: Image.Image,
    params: AdjustmentParameters | Mapping[str, float] | None = None,
    *,
    backend: str | None = None,
) -> Image.Image:
    """Return an adjusted RGBA copy of *image*; the input is left untouched."""

    buffer, width, height, stride = pil_to_bgra(image)
    apply_adjustment_inplace(buffer, width, height, stride, params, backend=backend)
    return bgra_to_pil(buffer, width, height, stride)
