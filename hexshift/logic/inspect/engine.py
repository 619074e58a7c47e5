#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexshift/logic/inspect/engine.py

import argparse
from typing import Any, Dict, List

from hexshift.core.color import Color
from hexshift.core.lut import LookupTable, classify
from .renderer import render_inspect_rows


def get_color_data(hex_code: str, table: LookupTable) -> Dict[str, Any]:
    """Everything the lookup table sees about one color."""
    color = Color.parse(hex_code)
    luma_band, hue_band = classify(color.luma, color.hue)
    return {
        "hex": color.to_hex(),
        "rgb": color.rgb,
        "hue": color.hue,
        "saturation": color.saturation,
        "brightness": color.brightness,
        "luma": color.luma,
        "luma_band": luma_band,
        "hue_band": hue_band,
        "adjustment": table.lookup(color.luma, color.hue),
    }


def run(args: argparse.Namespace, table: LookupTable) -> List[Dict[str, Any]]:
    """Main execution engine for the inspect command"""
    rows = [get_color_data(hex_code, table) for hex_code in args.hex]
    render_inspect_rows(rows, show_swatch=not args.no_swatch)
    return rows
