"""luxoria: colour adjustment pipeline for photo previews and exports."""

from __future__ import annotations

from .core import (
    AdjustmentParameters,
    Color,
    adjust_color,
    apply_adjustment,
    apply_adjustment_inplace,
    load_adjustments,
    save_adjustments,
)
from .errors import (
    AdjustmentFileError,
    InvalidBufferError,
    InvalidFormatError,
    LuxoriaError,
)

__version__ = "0.1.0"

__all__ = [
    "AdjustmentFileError",
    "AdjustmentParameters",
    "Color",
    "InvalidBufferError",
    "InvalidFormatError",
    "LuxoriaError",
    "adjust_color",
    "apply_adjustment",
    "apply_adjustment_inplace",
    "load_adjustments",
    "save_adjustments",
]
