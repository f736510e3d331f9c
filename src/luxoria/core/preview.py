"""Qt integration for live previews of the adjustment pipeline.

``QImage.Format_ARGB32`` stores each pixel as a native-endian 32-bit integer,
which on little-endian hosts is the BGRA byte order the engine expects.  The
helpers here always work on a detached copy so the caller's image stays
untouched.
"""

from __future__ import annotations

from typing import Mapping

from PySide6.QtCore import Qt
from PySide6.QtGui import QImage

from ..utils.logging import get_logger
from .adjustment_resolver import AdjustmentParameters
from .filters.facade import apply_adjustment_inplace
from .filters.utils import _resolve_pixel_buffer

_LOGGER = get_logger()

DEFAULT_COMPRESSION_FACTOR = 10
"""Preview images are decoded at a tenth of the original size by default."""


def prepare_preview(image: QImage, compression_factor: int = DEFAULT_COMPRESSION_FACTOR) -> QImage:
    """Return a downscaled copy of *image* ready for repeated adjustment passes."""

    if compression_factor < 1:
        raise ValueError("compression_factor must be at least 1")
    if image.isNull():
        return QImage(image)

    width = max(1, image.width() // compression_factor)
    height = max(1, image.height() // compression_factor)
    scaled = image.scaled(
        width,
        height,
        Qt.AspectRatioMode.IgnoreAspectRatio,
        Qt.TransformationMode.SmoothTransformation,
    )
    if scaled.isNull():
        # Qt returns a null image when it cannot allocate the scaled buffer.
        _LOGGER.warning("Failed to scale %dx%d preview; using full size", image.width(), image.height())
        scaled = QImage(image)
    return scaled.convertToFormat(QImage.Format.Format_ARGB32)


def adjust_qimage(
    image: QImage,
    params: AdjustmentParameters | Mapping[str, float] | None = None,
    *,
    backend: str | None = None,
) -> QImage:
    """Return an adjusted copy of *image* in the engine's BGRA layout."""

    if image.isNull():
        return QImage(image)

    converted = image.convertToFormat(QImage.Format.Format_ARGB32)
    # ``convertToFormat`` may share data when no conversion is needed.
    result = converted.copy() if converted.cacheKey() == image.cacheKey() else converted

    view, guard = _resolve_pixel_buffer(result)
    _ = guard  # Keep the Qt wrapper alive while the view is in use.
    apply_adjustment_inplace(
        view,
        result.width(),
        result.height(),
        result.bytesPerLine(),
        params,
        backend=backend,
    )
    return result


__all__ = ["DEFAULT_COMPRESSION_FACTOR", "adjust_qimage", "prepare_preview"]
