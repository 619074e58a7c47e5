#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexshift/logic/transform/renderer.py

from hexshift.core import config as c
from hexshift.core.color import Color
from hexshift.shared.formatting import format_colorspace
from hexshift.shared.logger import log
from hexshift.shared.preview import print_change_pair, print_color_block


def _with_hash(hex_code: str) -> str:
    return hex_code if hex_code.startswith("#") else f"#{hex_code}"


def render_change(old_hex: str, new_hex: str, result: Color, preview: bool = False) -> None:
    """Report one rewritten color value."""
    log("info", f"{_with_hash(old_hex)} => {_with_hash(new_hex)} (luma: {result.luma:.4f}; hue: {result.hue})")
    if preview:
        print_change_pair(_with_hash(old_hex), _with_hash(new_hex))


def render_transform_info(original: Color, result: Color, adjustment_label: str, verbose: bool = False) -> None:
    """Before/after view used by the 'transform' subcommand."""
    print()
    print_color_block(original.to_hex(), f"{c.BOLD_WHITE}original{c.RESET}")
    print_color_block(result.to_hex(), f"{c.MSG_BOLD_COLORS['info']}transformed{c.RESET}")
    if verbose:
        print()
        for title, color in (("original", original), ("transformed", result)):
            print(
                f"{c.MSG_COLORS['info']}    {title:<12}{c.RESET}"
                f"{format_colorspace('rgb', *color.rgb)}  "
                f"{format_colorspace('hsb', color.hue, color.saturation, color.brightness)}  "
                f"{format_colorspace('luma', color.luma)}"
            )
        print(f"{c.MSG_COLORS['info']}    {'applied':<12}{c.RESET}{adjustment_label}")
    print()
