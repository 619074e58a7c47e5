#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexshift/subcommands/lut.py

import argparse
import json
import sys

from hexshift.core import config as c
from hexshift.shared.logger import HexshiftArgumentParser
from ._common import add_lut_argument, resolve_lut_or_exit


def get_lut_parser() -> argparse.ArgumentParser:
    """Create argument parser for lut command."""
    parser = HexshiftArgumentParser(
        prog="hexshift lut",
        description="hexshift lut: print the lookup table as JSON, a template when no table is given",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    add_lut_argument(parser)
    parser.add_argument(
        "--bands",
        action="store_true",
        help="list luma and hue band ranges instead",
    )
    return parser


def print_bands() -> None:
    for band, low, high in c.LUMA_BANDS:
        hue_bands = c.HUE_BANDS_BY_LUMA.get(band, c.HUE_BANDS)
        print(f"{c.BOLD_WHITE}{band}{c.RESET}  luma [{low:.2f}, {high:.2f}{']' if high == 1.0 else ')'}")
        for hue_band, h_low, h_high in hue_bands:
            print(f"    {hue_band:<20} hue [{h_low}, {h_high}{']' if h_high == 360 else ')'}")


def main() -> None:
    """Main entry point for lut command."""
    parser = get_lut_parser()
    args = parser.parse_args(sys.argv[1:])
    if args.bands:
        print_bands()
        return
    table = resolve_lut_or_exit(args)
    print(json.dumps(table.to_dict(), indent=c.JSON_INDENT))


if __name__ == "__main__":
    main()
