#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexshift/core/color.py

from dataclasses import dataclass
from typing import Optional, Tuple

from . import config as c
from . import conversions as conv
from .luminance import get_luma
from hexshift.shared.clamping import _clamp01


@dataclass(frozen=True)
class Adjustment:
    """A signed hue/saturation/brightness delta. Degrees for hue, percent points otherwise."""

    hue: int = 0
    saturation: float = 0.0
    brightness: float = 0.0

    def __add__(self, other: "Adjustment") -> "Adjustment":
        if not isinstance(other, Adjustment):
            return NotImplemented
        return Adjustment(
            hue=self.hue + other.hue,
            saturation=self.saturation + other.saturation,
            brightness=self.brightness + other.brightness,
        )

    def __neg__(self) -> "Adjustment":
        return Adjustment(-self.hue, -self.saturation, -self.brightness)

    def __sub__(self, other: "Adjustment") -> "Adjustment":
        if not isinstance(other, Adjustment):
            return NotImplemented
        return self + (-other)

    def is_zero(self) -> bool:
        return self.hue == 0 and self.saturation == 0 and self.brightness == 0

    def as_tuple(self) -> Tuple[int, float, float]:
        return (self.hue, self.saturation, self.brightness)

    def __str__(self) -> str:
        return f"hue {self.hue:+d}deg, sat {self.saturation:+.2f}%, bri {self.brightness:+.2f}%"


ZERO = Adjustment()


def compose(*adjustments: Adjustment) -> Adjustment:
    """Sum any number of adjustments; the empty sum is ZERO."""
    total = ZERO
    for adj in adjustments:
        total = total + adj
    return total


def negate(adjustment: Adjustment) -> Adjustment:
    return -adjustment


def rotate_hue_fraction(hue_fraction: float, degrees: float) -> float:
    """Add a hue delta in degrees to a 0-1 hue fraction, wrapping around the circle."""
    total = hue_fraction + degrees / c.HUE_MAX
    if 0.0 <= total < c.UNIT:
        return total
    return total % c.UNIT


@dataclass(frozen=True)
class Color:
    """An 8-bit RGB color. Every other attribute is derived from the channels."""

    r: int
    g: int
    b: int

    def __post_init__(self):
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"channel {name} must be an integer in 0-255, got {value!r}")

    @classmethod
    def parse(cls, hex_code) -> Optional["Color"]:
        """Parse '#rrggbb', 'rrggbb' or the 3-digit shorthand. None when not a color."""
        rgb = conv.hex_to_rgb(hex_code)
        if rgb is None:
            return None
        return cls(*rgb)

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def hsb(self) -> Tuple[float, float, float]:
        """HSB as 0-1 fractions."""
        return conv.rgb_to_hsb_fractions(self.r, self.g, self.b)

    @property
    def hue(self) -> int:
        """Whole degrees, truncated. Taken from the degree value so band edges stay exact."""
        return int(conv.rgb_to_hsv(self.r, self.g, self.b)[0] + c.HUE_EPS)

    @property
    def saturation(self) -> float:
        return self.hsb[1] * c.PERCENT_TO_FACTOR

    @property
    def brightness(self) -> float:
        return self.hsb[2] * c.PERCENT_TO_FACTOR

    @property
    def luma(self) -> float:
        return get_luma(self.r, self.g, self.b)

    def to_hex(self, with_hash_prefix: bool = True) -> str:
        hx = conv.rgb_to_hex(self.r, self.g, self.b)
        return f"#{hx}" if with_hash_prefix else hx

    def apply(self, adjustment: Adjustment) -> "Color":
        h, s, b = self.hsb
        h = rotate_hue_fraction(h, adjustment.hue)
        s = _clamp01(s + adjustment.saturation / c.PERCENT_TO_FACTOR)
        b = _clamp01(b + adjustment.brightness / c.PERCENT_TO_FACTOR)
        return Color(*conv.hsb_fractions_to_rgb(h, s, b))

    def __add__(self, adjustment: Adjustment) -> "Color":
        if not isinstance(adjustment, Adjustment):
            return NotImplemented
        return self.apply(adjustment)

    def __sub__(self, adjustment: Adjustment) -> "Color":
        if not isinstance(adjustment, Adjustment):
            return NotImplemented
        return self.apply(-adjustment)

    def __str__(self) -> str:
        return self.to_hex()
