"""Colour value type and pixel adjustment engine."""

from __future__ import annotations

# ``filters`` must load before ``color``: the fallback executor imports
# ``Color`` while ``color`` itself imports the compiled math from ``filters``.
from .filters import adjust_color, apply_adjustment, apply_adjustment_inplace
from .adjustment_resolver import AdjustmentParameters, load_adjustments, save_adjustments
from .color import Color

__all__ = [
    "AdjustmentParameters",
    "Color",
    "adjust_color",
    "apply_adjustment",
    "apply_adjustment_inplace",
    "load_adjustments",
    "save_adjustments",
]
