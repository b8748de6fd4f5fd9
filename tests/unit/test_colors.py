"""Tests for colour and numeric token parsing.

Covers:
- Named colours (case, spacing and separator insensitivity)
- Hex colours in 3, 4, 6 and 8 digit forms, with or without ``#``
- Rejection of malformed tokens and non-string values
- Numeric coercion from numbers and strings; opacity range checks
"""

from __future__ import annotations

import pytest

from geojson_layer.models.primitives import Color
from geojson_layer.styling.colors import (
    coerce_number,
    coerce_opacity,
    color_names,
    resolve_color,
)


class TestNamedColors:
    """Palette names resolve to their packed colour."""

    def test_basic_name(self) -> None:
        assert resolve_color("red") == Color.from_argb(0xFFF44336)

    @pytest.mark.parametrize("token", ["deepPurple", "deep-purple", "Deep Purple", "DEEP_PURPLE"])
    def test_name_variants(self, token: str) -> None:
        assert resolve_color(token) == Color.from_argb(0xFF673AB7)

    def test_grey_and_gray_are_equal(self) -> None:
        assert resolve_color("grey") == resolve_color("gray")

    def test_transparent_has_zero_alpha(self) -> None:
        color = resolve_color("transparent")
        assert color is not None
        assert color.alpha == 0.0

    def test_names_listing_is_sorted(self) -> None:
        names = color_names()
        assert names == sorted(names)
        assert "blue" in names


class TestHexColors:
    """Hex strings of every supported length."""

    def test_short_rgb_expands(self) -> None:
        assert resolve_color("#22e") == Color.from_argb(0xFF2222EE)

    def test_six_digit(self) -> None:
        assert resolve_color("#3388ff") == Color.from_argb(0xFF3388FF)

    def test_without_hash(self) -> None:
        assert resolve_color("3388FF") == Color.from_argb(0xFF3388FF)

    def test_eight_digit_carries_alpha(self) -> None:
        color = resolve_color("#2222ee80")
        assert color is not None
        assert (color.red, color.green, color.blue) == (0x22, 0x22, 0xEE)
        assert color.alpha == pytest.approx(0x80 / 255)

    def test_four_digit_short_alpha(self) -> None:
        color = resolve_color("#f008")
        assert color is not None
        assert color.red == 0xFF
        assert color.alpha == pytest.approx(0x88 / 255)

    def test_surrounding_whitespace_ignored(self) -> None:
        assert resolve_color("  #000  ") == Color.from_argb(0xFF000000)

    @pytest.mark.parametrize("token", ["#12", "#12345", "#1234567", "#ggg", "#", "notacolor", ""])
    def test_malformed_tokens(self, token: str) -> None:
        assert resolve_color(token) is None

    @pytest.mark.parametrize("value", [None, 0xFF0000, 1.5, True, ["red"], {"c": "red"}])
    def test_non_string_values(self, value: object) -> None:
        assert resolve_color(value) is None


class TestColorModel:
    """``Color`` packing helpers."""

    def test_argb_round_trip(self) -> None:
        assert Color.from_argb(0x80112233).argb == 0x80112233

    def test_opaque_threshold(self) -> None:
        assert Color(0, 0, 0, 1.0).is_opaque
        assert not Color(0, 0, 0, 0.5).is_opaque

    def test_to_hex(self) -> None:
        assert Color.from_argb(0xFF3388FF).to_hex() == "#3388ff"
        assert Color(0x33, 0x88, 0xFF, 0.0).to_hex() == "#3388ff00"


class TestCoerceNumber:
    """Numbers arrive as JSON numbers or numeric strings."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(3, 3.0), (2.5, 2.5), ("11", 11.0), (" 4.5 ", 4.5), (-1, -1.0), ("1e2", 100.0)],
    )
    def test_accepted(self, value: object, expected: float) -> None:
        assert coerce_number(value) == expected

    @pytest.mark.parametrize(
        "value", [None, True, False, "abc", "", "nan", "inf", [1], {"w": 1}, 10**400]
    )
    def test_rejected(self, value: object) -> None:
        assert coerce_number(value) is None


class TestCoerceOpacity:
    """Opacity must be a number within [0, 1]."""

    @pytest.mark.parametrize("value", [0, 0.0, 0.4, "0.75", 1])
    def test_in_range(self, value: object) -> None:
        assert coerce_opacity(value) is not None

    @pytest.mark.parametrize("value", [-0.1, 1.01, "2", None, "half"])
    def test_out_of_range_or_invalid(self, value: object) -> None:
        assert coerce_opacity(value) is None
