"""Tests for the color model and adjustment algebra."""

import pytest

from hexshift.core.color import (
    ZERO,
    Adjustment,
    Color,
    compose,
    negate,
    rotate_hue_fraction,
)

SAMPLE_HEXES = [
    "121111", "171616", "1F1C1C", "625B51", "FF2828", "74667C",
    "607181", "5c798a", "58858C", "968A71", "A9915B", "A6A6A6",
]


# ---------------------------------------------------------------------------
# Parsing and rendering
# ---------------------------------------------------------------------------


class TestParse:
    @pytest.mark.parametrize("hex_code", SAMPLE_HEXES)
    def test_round_trip(self, hex_code: str) -> None:
        color = Color.parse(hex_code)
        assert color is not None
        assert color.to_hex(False) == hex_code.lower()

    def test_hash_prefix_accepted(self) -> None:
        assert Color.parse("#A9915B") == Color(169, 145, 91)

    def test_shorthand_expands(self) -> None:
        assert Color.parse("#abc").to_hex() == "#aabbcc"
        assert Color.parse("F00") == Color(255, 0, 0)

    @pytest.mark.parametrize(
        "value",
        ["", "#", "12345", "1234567", "gggggg", "#12345g", "#FF0000FF",
         "Retro Block", " 121111", "##121111", None, 121111, ["121111"]],
    )
    def test_not_a_color(self, value) -> None:
        assert Color.parse(value) is None

    def test_to_hex_is_lowercase_and_prefixed_on_request(self) -> None:
        color = Color(0xAB, 0xCD, 0xEF)
        assert color.to_hex() == "#abcdef"
        assert color.to_hex(False) == "abcdef"

    def test_channel_range_checked(self) -> None:
        with pytest.raises(ValueError, match="channel r"):
            Color(256, 0, 0)


# ---------------------------------------------------------------------------
# Derived attributes
# ---------------------------------------------------------------------------


class TestDerived:
    def test_luma(self) -> None:
        assert Color(255, 255, 255).luma == pytest.approx(1.0)
        assert Color(0, 0, 0).luma == 0.0
        assert Color(255, 0, 0).luma == pytest.approx(0.299)

    def test_luma_is_not_hsb_brightness(self) -> None:
        blue = Color(0, 0, 255)
        assert blue.brightness == pytest.approx(100.0)
        assert blue.luma == pytest.approx(0.114)

    @pytest.mark.parametrize(
        "hex_code, hue",
        [("ff0000", 0), ("00ff00", 120), ("0000ff", 240), ("A9915B", 41), ("58858C", 188), ("5c798a", 202)],
    )
    def test_hue_degrees(self, hex_code: str, hue: int) -> None:
        assert Color.parse(hex_code).hue == hue

    @pytest.mark.parametrize(
        "rgb, hue",
        [((79, 85, 77), 105), ((105, 102, 106), 285), ((0, 3, 18), 230), ((18, 15, 0), 50)],
    )
    def test_integral_hue_is_not_truncated_down(self, rgb, hue: int) -> None:
        assert Color(*rgb).hue == hue

    def test_saturation_and_brightness_are_percentages(self) -> None:
        color = Color.parse("ff8080")
        assert color.brightness == pytest.approx(100.0)
        assert color.saturation == pytest.approx(100.0 * 127 / 255)

    def test_gray_has_no_hue_or_saturation(self) -> None:
        gray = Color.parse("A6A6A6")
        assert gray.hue == 0
        assert gray.saturation == 0.0


# ---------------------------------------------------------------------------
# Adjustment algebra
# ---------------------------------------------------------------------------


class TestAdjustment:
    def test_default_is_zero(self) -> None:
        assert Adjustment() == ZERO == Adjustment(0, 0.0, 0.0)
        assert ZERO.is_zero()

    def test_sum_is_componentwise(self) -> None:
        assert Adjustment(10, 5.0, -2.0) + Adjustment(-3, 1.5, 2.0) == Adjustment(7, 6.5, 0.0)

    def test_sum_is_commutative_and_associative(self) -> None:
        a, b, d = Adjustment(10, 5.0, -2.0), Adjustment(-3, 1.5, 2.0), Adjustment(90, -20.0, 7.5)
        assert a + b == b + a
        assert (a + b) + d == a + (b + d)
        assert compose(a, b, d) == a + b + d
        assert compose() == ZERO

    @pytest.mark.parametrize("adj", [Adjustment(10, 5.0, -2.0), Adjustment(-400, 250.0, -0.5), ZERO])
    def test_negation_cancels(self, adj: Adjustment) -> None:
        assert adj + (-adj) == ZERO
        assert compose(adj, negate(adj)) == ZERO
        assert adj - adj == ZERO

    def test_zero_is_identity(self) -> None:
        adj = Adjustment(12, -3.0, 4.0)
        assert adj + ZERO == adj


# ---------------------------------------------------------------------------
# Applying adjustments
# ---------------------------------------------------------------------------


class TestApply:
    @pytest.mark.parametrize("hex_code", SAMPLE_HEXES + ["000000", "ffffff", "ff0000", "010203"])
    def test_zero_is_identity(self, hex_code: str) -> None:
        color = Color.parse(hex_code)
        assert color.apply(ZERO) == color
        assert color + ZERO == color

    def test_hue_wraps_around(self) -> None:
        assert rotate_hue_fraction(0.99, 36) == pytest.approx(0.09)
        assert rotate_hue_fraction(0.5, 36) == pytest.approx(0.6)
        assert rotate_hue_fraction(0.1, -72) == pytest.approx(0.9)
        assert rotate_hue_fraction(0.25, 720) == pytest.approx(0.25)

    def test_hue_rotation_on_color(self) -> None:
        assert (Color.parse("ff0000") + Adjustment(hue=120)).to_hex() == "#00ff00"
        assert (Color.parse("0000ff") + Adjustment(hue=180)).to_hex() == "#ffff00"

    def test_subtraction_inverts_addition(self) -> None:
        assert (Color.parse("00ff00") - Adjustment(hue=120)).to_hex() == "#ff0000"

    def test_brightness_clamps_at_100(self) -> None:
        color = Color.parse("ff8000")
        brighter = color + Adjustment(brightness=10.0)
        assert brighter.brightness == pytest.approx(100.0)
        assert brighter == color

    def test_saturation_clamps_at_100(self) -> None:
        red = Color.parse("ff0000")
        assert red + Adjustment(saturation=50.0) == red

    def test_large_negative_deltas_clamp_at_0(self) -> None:
        result = Color.parse("808080") + Adjustment(0, -500.0, -500.0)
        assert result == Color(0, 0, 0)
        assert result.brightness == 0.0

    def test_values_are_immutable(self) -> None:
        color = Color.parse("121111")
        with pytest.raises(AttributeError):
            color.r = 0
        adj = Adjustment(1, 2.0, 3.0)
        with pytest.raises(AttributeError):
            adj.hue = 5
