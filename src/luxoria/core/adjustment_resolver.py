"""Adjustment parameters shared by the UI, sidecar files and the renderers."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from ..errors import AdjustmentFileError
from ..utils.jsonio import read_json, write_json

_LOGGER = logging.getLogger(__name__)

# Keys recognised in parameter mappings and sidecar files.
ADJUSTMENT_KEYS = ("Tint", "Saturation", "Exposure")

SATURATION_SLIDER_NEUTRAL = 50.0
"""Saturation slider position that maps to an unchanged saturation factor."""

_MAX_EXPOSURE_STOPS = 1023.0


@dataclass(frozen=True)
class AdjustmentParameters:
    """Immutable tint / saturation / exposure values for one render pass.

    None of the values are bounded: hue shifts wrap inside the HSB conversion
    and the effective saturation and brightness are clamped there as well,
    so transient slider values never fail.
    """

    tint_degrees: float = 0.0
    saturation_factor: float = 1.0
    exposure_stops: float = 0.0

    @property
    def exposure_scale(self) -> float:
        """Brightness multiplier ``2 ** exposure_stops``.

        Stops are capped at the largest finite power of two; brightness is
        clamped to ``1.0`` afterwards anyway.  NaN stops leave brightness
        unchanged.
        """

        if math.isnan(self.exposure_stops):
            return 1.0
        return 2.0 ** min(self.exposure_stops, _MAX_EXPOSURE_STOPS)

    @property
    def is_identity(self) -> bool:
        return (
            self.tint_degrees == 0.0
            and self.saturation_factor == 1.0
            and self.exposure_stops == 0.0
        )

    @classmethod
    def ensure(
        cls, params: AdjustmentParameters | Mapping[str, Any] | None
    ) -> AdjustmentParameters:
        """Return *params* as :class:`AdjustmentParameters`, filling defaults.

        Mappings are read by :data:`ADJUSTMENT_KEYS`; unknown keys are ignored.
        """

        if params is None:
            return cls()
        if isinstance(params, cls):
            return params
        return cls(
            tint_degrees=float(params.get("Tint", cls.tint_degrees)),
            saturation_factor=float(params.get("Saturation", cls.saturation_factor)),
            exposure_stops=float(params.get("Exposure", cls.exposure_stops)),
        )

    @classmethod
    def from_sliders(
        cls,
        saturation: float = SATURATION_SLIDER_NEUTRAL,
        tint: float = 0.0,
        exposure: float = 0.0,
    ) -> AdjustmentParameters:
        """Translate raw slider positions into adjustment parameters.

        The saturation slider is divided by fifty so its neutral position
        yields a factor of ``1.0``; the tint slider is already in degrees and
        the exposure slider already in stops.
        """

        return cls(
            tint_degrees=float(tint),
            saturation_factor=float(saturation) / SATURATION_SLIDER_NEUTRAL,
            exposure_stops=float(exposure),
        )

    def to_mapping(self) -> dict[str, float]:
        return {
            "Tint": self.tint_degrees,
            "Saturation": self.saturation_factor,
            "Exposure": self.exposure_stops,
        }


def load_adjustments(path: Path) -> AdjustmentParameters:
    """Read adjustment parameters from the JSON sidecar at *path*."""

    data = read_json(Path(path))
    try:
        return AdjustmentParameters.ensure(data)
    except (TypeError, ValueError) as exc:
        raise AdjustmentFileError(f"Invalid adjustment values in {path}") from exc


def save_adjustments(path: Path, params: AdjustmentParameters | Mapping[str, Any]) -> None:
    """Write *params* to the JSON sidecar at *path*."""

    resolved = AdjustmentParameters.ensure(params)
    write_json(Path(path), resolved.to_mapping())
    _LOGGER.debug("Saved adjustments %s to %s", resolved, path)


__all__ = [
    "ADJUSTMENT_KEYS",
    "SATURATION_SLIDER_NEUTRAL",
    "AdjustmentParameters",
    "load_adjustments",
    "save_adjustments",
]
