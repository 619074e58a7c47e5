#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexshift/core/luminance.py

from . import config as c


def get_luma(r: int, g: int, b: int) -> float:
    """Perceptual luma of gamma-encoded RGB, normalized to 0-1."""
    return (
        c.LUMA_R * r +
        c.LUMA_G * g +
        c.LUMA_B * b
    ) / c.RGB_MAX
