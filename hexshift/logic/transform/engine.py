#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexshift/logic/transform/engine.py

from typing import Optional

from hexshift.core import config as c
from hexshift.core.color import Adjustment, Color
from hexshift.core.lut import DEFAULT_LUT, LookupTable
from .renderer import render_change

GLOBAL_BOOST = Adjustment(*c.GLOBAL_BOOST)


def process_color(
    color: Color,
    table: LookupTable = DEFAULT_LUT,
    boost: Adjustment = GLOBAL_BOOST,
    fused: bool = False,
) -> Color:
    """Shift a color by its table cell, then by the global boost.

    By default the two adjustments are applied one after the other, so
    saturation and brightness clamp twice. With fused=True they are summed
    first and applied in a single HSB round-trip.
    """
    cell = table.lookup(color.luma, color.hue)
    if fused:
        return color + (cell + boost)
    return color + cell + boost


def transform_hex(
    hex_code: str,
    hash_prefix_on_output: bool,
    table: LookupTable = DEFAULT_LUT,
    boost: Adjustment = GLOBAL_BOOST,
    fused: bool = False,
    report: bool = True,
    preview: bool = False,
) -> Optional[str]:
    """Transform a hex color string. None when the input is not a color."""
    color = Color.parse(hex_code)
    if color is None:
        return None
    result = process_color(color, table, boost, fused)
    new_hex = result.to_hex(hash_prefix_on_output)
    if report and new_hex != hex_code:
        render_change(hex_code, new_hex, result, preview)
    return new_hex


class ColorTransformer:
    """transform_hex bound to one table/boost/policy, counting what it touched."""

    def __init__(
        self,
        table: LookupTable = DEFAULT_LUT,
        boost: Adjustment = GLOBAL_BOOST,
        fused: bool = False,
        report: bool = True,
        preview: bool = False,
    ):
        self.table = table
        self.boost = boost
        self.fused = fused
        self.report = report
        self.preview = preview
        self.seen = 0
        self.changed = 0

    def __call__(self, hex_code: str, hash_prefix_on_output: bool) -> Optional[str]:
        new_hex = transform_hex(
            hex_code,
            hash_prefix_on_output,
            table=self.table,
            boost=self.boost,
            fused=self.fused,
            report=self.report,
            preview=self.preview,
        )
        if new_hex is not None:
            self.seen += 1
            if new_hex != hex_code:
                self.changed += 1
        return new_hex

    def reset(self) -> None:
        self.seen = 0
        self.changed = 0
