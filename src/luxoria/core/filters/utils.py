"""Buffer helpers shared by the adjustment executors.

Executors operate on a flat ``numpy.uint8`` view of the caller's pixels.  The
helpers here normalise the different buffer flavours (``bytes``,
``bytearray``, ``memoryview``, NumPy arrays and Qt ``QImage`` bits) into that
view and check the declared geometry against the available bytes.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from ...errors import InvalidBufferError

BYTES_PER_PIXEL = 4
"""Every supported buffer stores one BGRA pixel in four bytes."""


def _required_size(width: int, height: int, stride: int) -> int:
    """Return the minimum byte count holding *height* rows of *width* pixels."""

    if width <= 0 or height <= 0:
        return 0
    return stride * (height - 1) + width * BYTES_PER_PIXEL


def _validate_geometry(size: int, width: int, height: int, stride: int) -> None:
    """Raise when *size* bytes cannot hold the declared pixel grid."""

    if width < 0 or height < 0:
        raise ValueError(f"Buffer dimensions must be non-negative, got {width}x{height}")
    if width == 0 or height == 0:
        return
    if stride < width * BYTES_PER_PIXEL:
        raise InvalidBufferError(
            f"Stride {stride} is smaller than one row of {width} BGRA pixels"
        )
    required = _required_size(width, height, stride)
    if size < required:
        raise InvalidBufferError(
            f"Pixel buffer holds {size} bytes but {width}x{height} with stride "
            f"{stride} needs {required}"
        )


def _as_uint8_view(buffer: Any, *, writable: bool) -> np.ndarray:
    """Return a flat ``uint8`` array sharing memory with *buffer*."""

    if isinstance(buffer, np.ndarray):
        if buffer.dtype != np.uint8:
            raise TypeError(f"Pixel arrays must use uint8, got {buffer.dtype}")
        if writable and not buffer.flags.writeable:
            raise BufferError("Pixel buffer is read-only")
        if writable and not buffer.flags.c_contiguous:
            raise BufferError("Pixel arrays must be C-contiguous to be adjusted in place")
        return buffer.reshape(-1)

    view = memoryview(buffer)
    if writable and view.readonly:
        raise BufferError("Pixel buffer is read-only")
    if view.nbytes == 0:
        return np.zeros(0, dtype=np.uint8)
    if view.ndim != 1 or view.format != "B":
        view = view.cast("B")
    return np.frombuffer(view, dtype=np.uint8)


def _resolve_pixel_buffer(image: Any) -> tuple[memoryview, object]:
    """Return a writable byte :class:`memoryview` over a ``QImage``'s pixels.

    The second element is the object returned by ``QImage.bits()``; callers
    must keep it referenced while the view is in use, otherwise the Qt
    wrapper can be collected and leave the view dangling.
    """

    expected_size = image.bytesPerLine() * image.height()
    guard: object = image.bits()

    if isinstance(guard, memoryview):
        view = guard
    else:
        # PyQt hands out a ``sip.voidptr`` that needs an explicit size first.
        try:
            view = memoryview(guard)
        except TypeError:
            if not hasattr(guard, "setsize"):
                raise RuntimeError("Unsupported QImage.bits() buffer wrapper") from None
            guard.setsize(expected_size)
            view = memoryview(guard)

    if view.ndim != 1 or view.format != "B":
        view = view.cast("B", (view.nbytes,))
    if len(view) > expected_size:
        view = view[:expected_size]
    return view, guard
