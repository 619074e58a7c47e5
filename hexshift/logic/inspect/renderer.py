#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexshift/logic/inspect/renderer.py

from typing import Any, Dict, List

from hexshift.core import config as c
from hexshift.shared.formatting import format_colorspace
from hexshift.shared.preview import color_swatch


def render_inspect_rows(rows: List[Dict[str, Any]], show_swatch: bool = True) -> None:
    print()
    for row in rows:
        swatch = f"{color_swatch(row['hex'], 4)} " if show_swatch else ""
        cell = f"{row['luma_band'] or '-'}/{row['hue_band'] or '-'}"
        print(
            f"{swatch}{c.BOLD_WHITE}{row['hex']}{c.RESET}  "
            f"{format_colorspace('luma', row['luma'])}  "
            f"{format_colorspace('hsb', row['hue'], row['saturation'], row['brightness'])}  "
            f"{c.MSG_COLORS['info']}{cell}{c.RESET} "
            f"{format_colorspace('adjustment', *row['adjustment'].as_tuple())}"
        )
    print()
