#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexshift/subcommands/inspect.py

import argparse
import sys

from hexshift.logic.inspect import engine
from hexshift.shared.logger import HexshiftArgumentParser
from hexshift.shared.sanitizer import INPUT_HANDLERS
from hexshift.shared.truecolor import ensure_truecolor
from ._common import add_lut_argument, resolve_lut_or_exit


def get_inspect_parser() -> argparse.ArgumentParser:
    """Create argument parser for inspect command."""
    parser = HexshiftArgumentParser(
        prog="hexshift inspect",
        description="hexshift inspect: show luma, hue and lookup table cell of colors",
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
        "--no-swatch",
        action="store_true",
        help="do not print color swatches",
    )
    add_lut_argument(parser)
    return parser


def main() -> None:
    """Main entry point for inspect command."""
    parser = get_inspect_parser()
    args = parser.parse_args(sys.argv[1:])
    if not args.no_swatch and not ensure_truecolor():
        args.no_swatch = True
    engine.run(args, resolve_lut_or_exit(args))


if __name__ == "__main__":
    main()
