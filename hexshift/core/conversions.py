#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexshift/core/conversions.py

from typing import Optional, Tuple

from . import config as c
from hexshift.shared.clamping import _clamp01, _clamp_channel
from hexshift.shared.sanitizer import normalize_hex


def hex_to_rgb(hex_code: str) -> Optional[Tuple[int, int, int]]:
    """Convert hex string to RGB tuple, or None when it is not a hex color."""
    h = normalize_hex(hex_code)
    if not h:
        return None
    return tuple(int(h[i : i + 2], 16) for i in (0, 2, 4))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert RGB components to a lowercase 6-digit hex string."""
    return f"{_clamp_channel(r):02x}{_clamp_channel(g):02x}{_clamp_channel(b):02x}"


def rgb_to_hsv(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """Convert RGB to HSV. Hue in degrees, saturation and value in 0-1.

    The hue ratio is taken on the 0-255 channel differences, so colors with an
    integral hue come out exact instead of a hair below it.
    """
    cmax = max(r, g, b)
    cmin = min(r, g, b)
    delta = cmax - cmin
    v = cmax / c.RGB_MAX
    if delta == 0:
        h = 0.0
        s = 0.0
    else:
        s = delta / cmax
        if cmax == r:
            h = c.HUE_SECTOR * (((g - b) / delta) % c.HSV_HUE_MOD)
        elif cmax == g:
            h = c.HUE_SECTOR * ((b - r) / delta + c.HUE_SECTOR_GREEN)
        else:
            h = c.HUE_SECTOR * ((r - g) / delta + c.HUE_SECTOR_BLUE)
        h = (h + c.HUE_MAX) % c.HUE_MAX
    return (h, s, v)


def hsv_to_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """Convert HSV to RGB floats in 0-255. Hue in degrees."""
    h = h % c.HUE_MAX
    chroma = v * s
    x = chroma * (c.UNIT - abs(((h / c.HUE_SECTOR) % 2.0) - c.UNIT))
    m = v - chroma
    if 0 <= h < 60:
        r_p, g_p, b_p = chroma, x, 0
    elif 60 <= h < 120:
        r_p, g_p, b_p = x, chroma, 0
    elif 120 <= h < 180:
        r_p, g_p, b_p = 0, chroma, x
    elif 180 <= h < 240:
        r_p, g_p, b_p = 0, x, chroma
    elif 240 <= h < 300:
        r_p, g_p, b_p = x, 0, chroma
    else:
        r_p, g_p, b_p = chroma, 0, x
    r, g, b = (r_p + m), (g_p + m), (b_p + m)
    return _clamp01(r) * c.RGB_MAX, _clamp01(g) * c.RGB_MAX, _clamp01(b) * c.RGB_MAX


def rgb_to_hsb_fractions(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """RGB to HSB with every component, hue included, as a 0-1 fraction."""
    h, s, v = rgb_to_hsv(r, g, b)
    return (h / c.HUE_MAX, s, v)


def hsb_fractions_to_rgb(h: float, s: float, b: float) -> Tuple[int, int, int]:
    """Inverse of rgb_to_hsb_fractions, rounded to integer channels."""
    r_f, g_f, b_f = hsv_to_rgb(h * c.HUE_MAX, s, b)
    return _clamp_channel(r_f), _clamp_channel(g_f), _clamp_channel(b_f)
