"""Packed RGBA colour value with HSB and HSL conversions."""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..errors import InvalidFormatError
from .filters.algorithms import (
    _float_to_byte,
    _hsb_to_rgb,
    _hsl_to_rgb,
    _rgb_to_hsb,
    _rgb_to_hsl,
)

_HEX_PATTERN = re.compile(r"#?(?:[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})")

_MAX_PACKED = 0xFFFFFFFF


def _check_byte(name: str, value: int) -> int:
    value = int(value)
    if not 0 <= value <= 255:
        raise ValueError(f"{name} channel must be within [0, 255], got {value}")
    return value


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel colour packed as ``R << 24 | G << 16 | B << 8 | A``.

    Instances compare and hash by their packed value only.  Numeric
    constructors are total over their documented domain; only
    :meth:`from_hex` can fail on well-typed input.
    """

    rgba: int

    def __post_init__(self) -> None:
        if not 0 <= self.rgba <= _MAX_PACKED:
            raise ValueError(f"Packed colour must fit in 32 bits, got {self.rgba:#x}")

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def from_bytes(cls, r: int, g: int, b: int, a: int = 255) -> Color:
        """Pack four byte channels."""

        return cls(
            (_check_byte("red", r) << 24)
            | (_check_byte("green", g) << 16)
            | (_check_byte("blue", b) << 8)
            | _check_byte("alpha", a)
        )

    @classmethod
    def from_floats(cls, r: float, g: float, b: float, a: float = 1.0) -> Color:
        """Pack normalised channels, truncating ``channel * 255`` toward zero.

        Truncation (rather than rounding) mirrors a fixed-point byte cast, so
        ``0.999`` maps to ``254``.  Values outside ``[0, 1]`` saturate.
        """

        return cls.from_bytes(
            _float_to_byte(float(r)),
            _float_to_byte(float(g)),
            _float_to_byte(float(b)),
            _float_to_byte(float(a)),
        )

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """Parse ``RRGGBB`` or ``RRGGBBAA`` with an optional leading ``#``.

        Six-digit strings receive an opaque ``FF`` alpha.  Any other shape
        raises :class:`~luxoria.errors.InvalidFormatError`.
        """

        if not isinstance(text, str) or _HEX_PATTERN.fullmatch(text) is None:
            raise InvalidFormatError(f"Invalid hex color format: {text!r}")
        digits = text[1:] if text.startswith("#") else text
        if len(digits) == 6:
            digits += "FF"
        return cls(int(digits, 16))

    @classmethod
    def from_hsb(cls, h: float, s: float, b: float, alpha: float = 1.0) -> Color:
        """Build a colour from hue (degrees), saturation and brightness.

        Hue wraps modulo 360 (negative values included); ``s`` and ``b`` are
        clamped into ``[0, 1]``.  RGB channels are rounded half-to-even, the
        alpha byte is truncated like :meth:`from_floats`.
        """

        red, green, blue = _hsb_to_rgb(float(h), float(s), float(b))
        return cls.from_bytes(red, green, blue, _float_to_byte(float(alpha)))

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float, alpha: float = 1.0) -> Color:  # noqa: E741
        """Build a colour from hue (degrees), saturation and lightness.

        Channels are truncated rather than rounded, so a round trip through
        :meth:`to_hsl` may land one step below the source byte.
        """

        red, green, blue = _hsl_to_rgb(float(h), float(s), float(l))
        return cls.from_bytes(red, green, blue, _float_to_byte(float(alpha)))

    # ------------------------------------------------------------------
    # Channel access
    # ------------------------------------------------------------------
    @property
    def r(self) -> int:
        return (self.rgba >> 24) & 0xFF

    @property
    def g(self) -> int:
        return (self.rgba >> 16) & 0xFF

    @property
    def b(self) -> int:
        return (self.rgba >> 8) & 0xFF

    @property
    def a(self) -> int:
        return self.rgba & 0xFF

    def with_alpha(self, alpha: int) -> Color:
        """Return a copy carrying *alpha* as its alpha byte."""

        return Color((self.rgba & 0xFFFFFF00) | _check_byte("alpha", alpha))

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------
    def to_hsb(self) -> tuple[float, float, float]:
        """Return ``(hue, saturation, brightness)``.

        Hue lies in ``[0, 360)`` and is ``0`` for greys; saturation is ``0``
        for black.
        """

        return _rgb_to_hsb(self.r, self.g, self.b)

    def to_hsl(self) -> tuple[float, float, float]:
        """Return ``(hue, saturation, lightness)``."""

        return _rgb_to_hsl(self.r, self.g, self.b)

    def to_hex(self, include_alpha: bool = True) -> str:
        """Return ``#RRGGBBAA`` (or ``#RRGGBB``) in upper case."""

        if include_alpha:
            return f"#{self.rgba:08X}"
        return f"#{self.rgba >> 8:06X}"

    def to_tuple(self) -> tuple[int, int, int, int]:
        return self.r, self.g, self.b, self.a

    def __str__(self) -> str:
        return f"Color(R: {self.r}, G: {self.g}, B: {self.b}, A: {self.a})"


__all__ = ["Color"]
