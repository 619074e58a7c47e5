#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexshift/shared/preview.py

import re

from hexshift.core.conversions import hex_to_rgb
from hexshift.core import config as c

ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')


def get_visible_len(s: str) -> int:
    return len(ANSI_ESCAPE.sub('', s))


def color_swatch(hex_code: str, width: int = 16) -> str:
    rgb = hex_to_rgb(hex_code)
    if rgb is None:
        return " " * width
    r, g, b = rgb
    return f"\033[48;2;{r};{g};{b}m{' ' * width}{c.RESET}"


def print_color_block(hex_code: str, title: str = "color", end: str = "\n") -> None:
    vis_len = get_visible_len(title)
    padding = " " * max(0, 18 - vis_len)
    shown = hex_code if hex_code.startswith("#") else f"#{hex_code}"

    print(f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   {color_swatch(hex_code)}  {c.BOLD_WHITE}{shown}{c.RESET}", end=end)


def print_change_pair(old_hex: str, new_hex: str, end: str = "\n") -> None:
    """One-line before/after swatch pair."""
    print(f"  {color_swatch(old_hex, 6)} {old_hex:>8}  ->  {color_swatch(new_hex, 6)} {new_hex:>8}", end=end)
