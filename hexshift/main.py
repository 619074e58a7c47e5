#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexshift/main.py

import argparse
import sys

from hexshift import __version__
from hexshift.core import config as c
from hexshift.logic.run import engine
from hexshift.subcommands.command_registry import SUBCOMMANDS
from hexshift.shared.logger import log, set_quiet, HexshiftArgumentParser
from hexshift.shared.sanitizer import INPUT_HANDLERS
from hexshift.shared.truecolor import ensure_truecolor


def get_theme_parser() -> argparse.ArgumentParser:
    """Create argument parser for the main theme command."""
    parser = HexshiftArgumentParser(
        prog="hexshift",
        description="hexshift: remap every color of an editor color scheme and UI theme",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )

    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"hexshift {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "-hf",
        "--help-full",
        action="store_true",
        help="show full help message including subcommands",
    )

    # Input Group
    input_group = parser.add_argument_group("input files")
    input_group.add_argument(
        "-d",
        "--themes-dir",
        default=".",
        help="directory holding the theme files (default: current directory)",
    )
    input_group.add_argument(
        "-b",
        "--base-name",
        default=c.DEFAULT_BASE_NAME,
        help=f"base file name: <BASE>{c.SCHEME_EXT} and <BASE>{c.THEME_EXT} (default: {c.DEFAULT_BASE_NAME})",
    )
    input_group.add_argument(
        "-x",
        "--scheme",
        default=None,
        help="path to the XML color scheme (overrides -d/-b)",
    )
    input_group.add_argument(
        "-j",
        "--theme",
        default=None,
        help="path to the JSON theme (overrides -d/-b)",
    )
    input_group.add_argument(
        "--only",
        choices=["scheme", "theme"],
        default=None,
        help="process just one of the two documents",
    )

    # Output Group
    output_group = parser.add_argument_group("output")
    output_group.add_argument(
        "-S",
        "--suffix",
        type=INPUT_HANDLERS["suffix"],
        default=c.DEFAULT_SUFFIX,
        help=f"suffix for output file names and display names (default: {c.DEFAULT_SUFFIX})",
    )
    output_group.add_argument(
        "-n",
        "--display-name",
        type=INPUT_HANDLERS["display_name"],
        default=None,
        help="display name before the suffix (default: the input's own name)",
    )
    output_group.add_argument(
        "-o",
        "--out-dir",
        default=None,
        help="write outputs here instead of next to the inputs",
    )
    output_group.add_argument(
        "--dry-run",
        action="store_true",
        help="process and report, but write nothing",
    )

    # Pipeline Group
    pipeline_group = parser.add_argument_group("color pipeline")
    pipeline_group.add_argument(
        "--lut",
        default=None,
        help="JSON lookup table with per-band adjustments (see 'hexshift lut')",
    )
    pipeline_group.add_argument(
        "--fused",
        action="store_true",
        help="sum table and boost adjustments and apply them once",
    )

    # Reporting Group
    report_group = parser.add_argument_group("reporting")
    report_group.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="only report summaries and errors",
    )
    report_group.add_argument(
        "-p",
        "--preview",
        action="store_true",
        help="show before/after swatches for every changed color",
    )

    parser.add_argument(
        "command",
        nargs="?",
        help=argparse.SUPPRESS,
    )
    return parser


def handle_theme_command(args: argparse.Namespace) -> None:
    """Entry point for the core theme command."""
    parser = get_theme_parser()

    if args.help_full:
        parser.print_help()
        for name, module in SUBCOMMANDS.items():
            print("\n" * 2)
            try:
                getter = getattr(module, f"get_{name}_parser")
                getter().print_help()
            except AttributeError:
                log("info", f"help for '{name}' not available")
        sys.exit(0)

    # Routing Validation (if a command was passed in the wrong place)
    if args.command:
        if args.command.lower() in SUBCOMMANDS:
            log("error", f"the '{args.command}' command must be the first argument")
        else:
            log("error", f"unrecognized command or argument: '{args.command}'")
        sys.exit(2)

    set_quiet(args.quiet)
    if args.preview:
        ensure_truecolor()

    # Execution
    engine.run(args, parser)


def main() -> None:
    """Main entry point for hexshift CLI"""
    # Subcommand Routing (Global behavior)
    if len(sys.argv) > 1:
        cmd = sys.argv[1].lower()
        if cmd in SUBCOMMANDS:
            sys.argv.pop(1)
            SUBCOMMANDS[cmd].main()
            sys.exit(0)

    parser = get_theme_parser()
    args = parser.parse_args()
    handle_theme_command(args)


if __name__ == "__main__":
    main()
