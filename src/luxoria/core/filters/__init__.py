"""Pixel adjustment engine for BGRA buffers.

The package separates concerns the same way for every executor:
- algorithms: scalar HSB/HSL math compiled with Numba
- executors: JIT, NumPy, pure-Python reference and the Pillow adapter
- utils: buffer normalisation and geometry checks
- facade: the public entry points and backend selection
"""

from __future__ import annotations

from .facade import (
    BACKENDS,
    DEFAULT_BACKEND,
    adjust_color,
    apply_adjustment,
    apply_adjustment_inplace,
)

__all__ = [
    "BACKENDS",
    "DEFAULT_BACKEND",
    "adjust_color",
    "apply_adjustment",
    "apply_adjustment_inplace",
]
