"""Exception hierarchy shared by the luxoria color pipeline."""

from __future__ import annotations


class LuxoriaError(Exception):
    """Base class for every error raised by :mod:`luxoria`."""


class InvalidFormatError(LuxoriaError, ValueError):
    """Raised when a textual color does not match a supported hex layout."""


class InvalidBufferError(LuxoriaError, BufferError):
    """Raised when a pixel buffer cannot hold the declared dimensions."""


class AdjustmentFileError(LuxoriaError):
    """Raised when an adjustment sidecar is missing or unreadable."""


__all__ = [
    "AdjustmentFileError",
    "InvalidBufferError",
    "InvalidFormatError",
    "LuxoriaError",
]
