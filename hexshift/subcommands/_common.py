#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexshift/subcommands/_common.py

import argparse
import sys

from hexshift.core.errors import LutError
from hexshift.core.lut import DEFAULT_LUT, LookupTable, load_lut
from hexshift.shared.logger import log


def add_lut_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--lut",
        default=None,
        help="JSON lookup table (default: all cells zero)",
    )


def resolve_lut_or_exit(args: argparse.Namespace) -> LookupTable:
    if not args.lut:
        return DEFAULT_LUT
    try:
        return load_lut(args.lut)
    except LutError as e:
        log("error", str(e))
        sys.exit(2)
