"""Public entry points of the pixel adjustment engine.

The facade validates the buffer geometry, resolves the adjustment parameters
and dispatches to one of the executors:

``"jit"``
    Numba kernel, optionally row-parallel.  Default.
``"numpy"``
    Vectorised array math over a strided view of the pixels.
``"python"``
    Reference loop through :class:`~luxoria.core.color.Color`.

All executors write identical bytes.  The default can be changed with the
``LUXORIA_FILTER_BACKEND`` environment variable.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Mapping

from ..adjustment_resolver import AdjustmentParameters
from ..color import Color
from . import fallback_executor
from .jit_executor import apply_adjustment_jit
from .numpy_executor import apply_adjustment_vectorized
from .utils import _as_uint8_view, _validate_geometry

_LOGGER = logging.getLogger(__name__)

BACKENDS = ("jit", "numpy", "python")
DEFAULT_BACKEND = "jit"


def _resolve_backend(backend: str | None) -> str:
    if backend is None:
        backend = os.environ.get("LUXORIA_FILTER_BACKEND", "").strip().lower() or DEFAULT_BACKEND
    if backend not in BACKENDS:
        raise ValueError(f"Unknown filter backend {backend!r}; expected one of {BACKENDS}")
    return backend


def adjust_color(
    color: Color,
    params: AdjustmentParameters | Mapping[str, float] | None = None,
) -> Color:
    """Return *color* with *params* applied; the alpha byte is kept as is."""

    resolved = AdjustmentParameters.ensure(params)
    return fallback_executor.adjust_color(
        color,
        resolved.tint_degrees,
        resolved.saturation_factor,
        resolved.exposure_scale,
    )


def apply_adjustment_inplace(
    buffer: Any,
    width: int,
    height: int,
    stride: int,
    params: AdjustmentParameters | Mapping[str, float] | None = None,
    *,
    backend: str | None = None,
    parallel: bool = False,
) -> None:
    """Adjust the BGRA pixels of a writable *buffer* in place.

    *buffer* may be a ``bytearray``, a writable ``memoryview`` or a
    contiguous ``numpy.uint8`` array.  The pixel at column ``x`` of row ``y``
    starts at byte ``y * stride + x * 4``; bytes between ``width * 4`` and
    ``stride`` are left untouched.
    """

    backend_name = _resolve_backend(backend)
    resolved = AdjustmentParameters.ensure(params)
    pixels = _as_uint8_view(buffer, writable=True)
    _validate_geometry(pixels.size, width, height, stride)

    if width == 0 or height == 0:
        return

    _LOGGER.debug(
        "Adjusting %dx%d buffer (stride %d) with %s backend: %s%s",
        width,
        height,
        stride,
        backend_name,
        resolved,
        " (identity)" if resolved.is_identity else "",
    )

    args = (
        pixels,
        width,
        height,
        stride,
        resolved.tint_degrees,
        resolved.saturation_factor,
        resolved.exposure_scale,
    )
    if backend_name == "jit":
        apply_adjustment_jit(*args, parallel=parallel)
    elif backend_name == "numpy":
        apply_adjustment_vectorized(*args)
    else:
        fallback_executor.apply_adjustment_fallback(*args)


def apply_adjustment(
    buffer: Any,
    width: int,
    height: int,
    stride: int,
    params: AdjustmentParameters | Mapping[str, float] | None = None,
    *,
    backend: str | None = None,
    parallel: bool = False,
) -> bytearray:
    """Return an adjusted copy of the BGRA pixel *buffer*.

    The caller's buffer is only read.  The result has the same length, and
    row padding is copied across verbatim.
    """

    source = _as_uint8_view(buffer, writable=False)
    _validate_geometry(source.size, width, height, stride)
    output = bytearray(source.tobytes())
    apply_adjustment_inplace(
        output,
        width,
        height,
        stride,
        params,
        backend=backend,
        parallel=parallel,
    )
    return output


__all__ = [
    "BACKENDS",
    "DEFAULT_BACKEND",
    "adjust_color",
    "apply_adjustment",
    "apply_adjustment_inplace",
]
