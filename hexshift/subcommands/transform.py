#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexshift/subcommands/transform.py

import argparse
import sys

from hexshift.core.color import Color
from hexshift.logic.transform.engine import GLOBAL_BOOST, process_color
from hexshift.logic.transform.renderer import render_transform_info
from hexshift.shared.logger import HexshiftArgumentParser
from hexshift.shared.sanitizer import INPUT_HANDLERS
from hexshift.shared.truecolor import ensure_truecolor
from ._common import add_lut_argument, resolve_lut_or_exit


def get_transform_parser() -> argparse.ArgumentParser:
    """Create argument parser for transform command."""
    parser = HexshiftArgumentParser(
        prog="hexshift transform",
        description="hexshift transform: run single colors through the theme pipeline",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-H",
        "--hex",
        action="append",
        required=True,
        type=INPUT_HANDLERS["hex"],
        help="use -H HEX multiple times for inputs",
    )
    parser.add_argument(
        "--fused",
        action="store_true",
        help="sum table and boost adjustments and apply them once",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="print only the resulting hex codes, one per line",
    )
    parser.add_argument(
        "-V",
        "--verbose",
        action="store_true",
        help="show HSB, luma and the applied adjustment",
    )
    add_lut_argument(parser)
    return parser


def main() -> None:
    """Main entry point for transform command."""
    parser = get_transform_parser()
    args = parser.parse_args(sys.argv[1:])
    table = resolve_lut_or_exit(args)
    if not args.plain:
        ensure_truecolor()

    for hex_code in args.hex:
        color = Color.parse(hex_code)
        result = process_color(color, table, fused=args.fused)
        if args.plain:
            print(result.to_hex())
            continue
        cell = table.lookup(color.luma, color.hue)
        policy = "fused" if args.fused else "sequential"
        render_transform_info(color, result, f"table {cell} + boost {GLOBAL_BOOST} ({policy})", args.verbose)


if __name__ == "__main__":
    main()
