"""Tests for the packed RGBA colour value type."""

import itertools
import math

import pytest

from luxoria.core.color import Color
from luxoria.errors import InvalidFormatError

CHANNEL_SAMPLES = range(0, 256, 17)


def test_from_bytes_packs_channels_in_rgba_order() -> None:
    colour = Color.from_bytes(0x12, 0x34, 0x56, 0x78)

    assert colour.rgba == 0x12345678
    assert colour.to_tuple() == (0x12, 0x34, 0x56, 0x78)


def test_from_bytes_defaults_to_opaque() -> None:
    assert Color.from_bytes(255, 0, 0).rgba == 0xFF0000FF


@pytest.mark.parametrize("channels", [(256, 0, 0, 0), (0, -1, 0, 0), (0, 0, 0, 300)])
def test_from_bytes_rejects_out_of_range_channels(channels) -> None:
    with pytest.raises(ValueError):
        Color.from_bytes(*channels)


@pytest.mark.parametrize("packed", [-1, 1 << 32])
def test_packed_value_must_fit_32_bits(packed: int) -> None:
    with pytest.raises(ValueError):
        Color(packed)


def test_from_floats_truncates_instead_of_rounding() -> None:
    colour = Color.from_floats(1.0, 0.5, 0.999, 1.0)

    # 0.5 * 255 == 127.5 and 0.999 * 255 == 254.745; both truncate.
    assert colour.to_tuple() == (255, 127, 254, 255)


def test_from_floats_saturates_out_of_range_values() -> None:
    assert Color.from_floats(1.5, -0.2, 0.0).to_tuple() == (255, 0, 0, 255)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("#FF8000", (255, 128, 0, 255)),
        ("ff8000", (255, 128, 0, 255)),
        ("#11223344", (0x11, 0x22, 0x33, 0x44)),
        ("aAbBcCdD", (0xAA, 0xBB, 0xCC, 0xDD)),
    ],
)
def test_from_hex_parses_six_and_eight_digit_forms(text: str, expected) -> None:
    assert Color.from_hex(text).to_tuple() == expected


@pytest.mark.parametrize(
    "text",
    ["#12345", "zzzzzz", "1234567", "", "#", "##123456", "#1234567890", "12345g", "123456\n", " 123456"],
)
def test_from_hex_rejects_malformed_strings(text: str) -> None:
    with pytest.raises(InvalidFormatError):
        Color.from_hex(text)


def test_invalid_format_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        Color.from_hex("not a colour")


@pytest.mark.parametrize("text", ["#a1b2c3", "A1B2C3", "#0f1e2d3c", "FFFFFF00"])
def test_hex_round_trip_preserves_channels(text: str) -> None:
    colour = Color.from_hex(text)
    digits = text.lstrip("#")

    reparsed = Color.from_hex(colour.to_hex(include_alpha=len(digits) == 8))

    assert reparsed == colour
    assert colour.to_hex(include_alpha=len(digits) == 8).lstrip("#") == digits.upper()


def test_to_hex_formats() -> None:
    colour = Color.from_bytes(0xAB, 0xCD, 0xEF, 0x12)

    assert colour.to_hex() == "#ABCDEF12"
    assert colour.to_hex(include_alpha=False) == "#ABCDEF"


def test_equality_and_hash_are_structural() -> None:
    first = Color(0x11223344)
    second = Color.from_bytes(0x11, 0x22, 0x33, 0x44)

    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second, Color(0)}) == 2
    assert first != Color(0x11223345)


def test_str_lists_channels() -> None:
    assert str(Color.from_bytes(1, 2, 3, 4)) == "Color(R: 1, G: 2, B: 3, A: 4)"


def test_with_alpha_replaces_only_alpha() -> None:
    colour = Color.from_bytes(10, 20, 30, 40).with_alpha(200)

    assert colour.to_tuple() == (10, 20, 30, 200)


@pytest.mark.parametrize(
    ("channels", "expected"),
    [
        ((255, 0, 0), (0.0, 1.0, 1.0)),
        ((0, 255, 0), (120.0, 1.0, 1.0)),
        ((0, 0, 255), (240.0, 1.0, 1.0)),
        ((255, 255, 0), (60.0, 1.0, 1.0)),
        ((0, 255, 255), (180.0, 1.0, 1.0)),
        ((255, 0, 255), (300.0, 1.0, 1.0)),
        ((0, 0, 0), (0.0, 0.0, 0.0)),
        ((255, 255, 255), (0.0, 0.0, 1.0)),
    ],
)
def test_to_hsb_reference_colours(channels, expected) -> None:
    hue, saturation, brightness = Color.from_bytes(*channels).to_hsb()

    assert hue == pytest.approx(expected[0], abs=1e-9)
    assert saturation == pytest.approx(expected[1], abs=1e-9)
    assert brightness == pytest.approx(expected[2], abs=1e-9)


def test_grey_is_achromatic() -> None:
    hue, saturation, brightness = Color.from_bytes(128, 128, 128, 255).to_hsb()

    assert hue == 0.0
    assert saturation == 0.0
    assert brightness == pytest.approx(128 / 255)


def test_hue_just_below_red_stays_below_360() -> None:
    hue, _, _ = Color.from_bytes(255, 0, 1).to_hsb()

    assert 359.0 < hue < 360.0


def test_hsb_round_trip_reproduces_bytes() -> None:
    for r, g, b in itertools.product(CHANNEL_SAMPLES, repeat=3):
        source = Color.from_bytes(r, g, b, 255)
        rebuilt = Color.from_hsb(*source.to_hsb())
        for before, after in zip(source.to_tuple(), rebuilt.to_tuple()):
            assert abs(before - after) <= 1, (source, rebuilt)


def test_from_hsb_wraps_hue() -> None:
    wrapped = Color.from_hsb(370.0, 0.5, 0.5)
    direct = Color.from_hsb(10.0, 0.5, 0.5)

    assert wrapped == direct
    hue, _, _ = wrapped.to_hsb()
    assert 0.0 <= hue < 360.0
    assert hue == direct.to_hsb()[0]


def test_from_hsb_normalises_negative_hue() -> None:
    assert Color.from_hsb(-10.0, 1.0, 1.0) == Color.from_hsb(350.0, 1.0, 1.0)
    assert Color.from_hsb(-360.0, 1.0, 1.0) == Color.from_hsb(0.0, 1.0, 1.0)


def test_from_hsb_clamps_saturation_and_brightness() -> None:
    assert Color.from_hsb(0.0, 2.0, 1.5) == Color.from_bytes(255, 0, 0)
    assert Color.from_hsb(0.0, -1.0, -0.5) == Color.from_bytes(0, 0, 0)


def test_from_hsb_rounds_while_from_floats_truncates() -> None:
    # (0.5 * 255) == 127.5 exactly: HSB reconstruction rounds half-to-even,
    # the float constructor truncates.
    assert Color.from_hsb(0.0, 0.0, 0.5).to_tuple()[:3] == (128, 128, 128)
    assert Color.from_floats(0.5, 0.5, 0.5).to_tuple()[:3] == (127, 127, 127)


def test_from_hsb_alpha_is_truncated() -> None:
    assert Color.from_hsb(0.0, 1.0, 1.0).a == 255
    assert Color.from_hsb(0.0, 1.0, 1.0, alpha=0.5).a == 127


@pytest.mark.parametrize(
    ("hsl", "expected"),
    [
        ((0.0, 1.0, 0.5), (255, 0, 0)),
        ((120.0, 1.0, 0.5), (0, 255, 0)),
        ((240.0, 1.0, 0.5), (0, 0, 255)),
        ((480.0, 1.0, 0.5), (0, 255, 0)),
        ((0.0, 0.0, 1.0), (255, 255, 255)),
        ((0.0, 0.0, 0.0), (0, 0, 0)),
    ],
)
def test_from_hsl_reference_colours(hsl, expected) -> None:
    assert Color.from_hsl(*hsl).to_tuple()[:3] == expected


def test_to_hsl_reference_values() -> None:
    hue, saturation, lightness = Color.from_bytes(255, 0, 0).to_hsl()
    assert (hue, saturation, lightness) == pytest.approx((0.0, 1.0, 0.5))

    hue, saturation, lightness = Color.from_bytes(128, 128, 128).to_hsl()
    assert hue == 0.0
    assert saturation == 0.0
    assert lightness == pytest.approx(128 / 255)


def test_hsl_round_trip_within_one_step() -> None:
    for r, g, b in itertools.product(CHANNEL_SAMPLES, repeat=3):
        source = Color.from_bytes(r, g, b, 255)
        rebuilt = Color.from_hsl(*source.to_hsl())
        for before, after in zip(source.to_tuple(), rebuilt.to_tuple()):
            assert abs(before - after) <= 1, (source, rebuilt)


def test_from_hsb_treats_non_finite_values_as_lower_bounds() -> None:
    assert Color.from_hsb(math.nan, 1.0, 1.0) == Color.from_bytes(255, 0, 0)
    assert Color.from_hsb(math.inf, 1.0, 1.0) == Color.from_bytes(255, 0, 0)
    assert Color.from_hsb(120.0, math.nan, 1.0) == Color.from_bytes(255, 255, 255)
    assert Color.from_hsb(120.0, 1.0, math.nan) == Color.from_bytes(0, 0, 0)
    assert Color.from_hsb(120.0, math.inf, math.inf) == Color.from_bytes(0, 255, 0)


def test_from_hsl_treats_non_finite_hue_as_zero() -> None:
    assert Color.from_hsl(-math.inf, 1.0, 0.5) == Color.from_bytes(255, 0, 0)
    assert Color.from_hsl(240.0, math.nan, 0.5).to_tuple()[:3] == (127, 127, 127)
