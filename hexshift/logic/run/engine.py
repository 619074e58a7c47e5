#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexshift/logic/run/engine.py

import argparse
import sys

from hexshift.core.errors import HexshiftError, LutError
from hexshift.core.lut import DEFAULT_LUT, load_lut
from hexshift.logic.scheme.engine import process_scheme_file
from hexshift.logic.theme.engine import process_theme_file
from hexshift.logic.transform.engine import ColorTransformer
from hexshift.shared.logger import log
from .resolver import ThemeJob, resolve_theme_job
from .renderer import render_document_done, render_document_header, render_run_summary


def run_job(job: ThemeJob, transformer: ColorTransformer) -> int:
    """Process both documents of a job independently. Returns the number that failed."""
    steps = []
    if job.process_scheme:
        steps.append(("XML scheme", job.scheme_path, process_scheme_file))
    if job.process_theme:
        steps.append(("JSON theme", job.theme_path, process_theme_file))

    done = failed = 0
    for kind, path, process in steps:
        render_document_header(kind, path)
        transformer.reset()
        try:
            output = process(job, transformer)
        except HexshiftError as e:
            log("error", str(e))
            failed += 1
            continue
        except OSError as e:
            log("error", f"{kind}: cannot write output: {e.strerror or e}")
            failed += 1
            continue
        render_document_done(kind, output, transformer.seen, transformer.changed, job.dry_run)
        done += 1

    render_run_summary(done, failed)
    return failed


def run(args: argparse.Namespace, parser: argparse.ArgumentParser = None) -> None:
    """Main execution engine for the theme command"""
    job = resolve_theme_job(args)

    try:
        table = load_lut(args.lut) if args.lut else DEFAULT_LUT
    except LutError as e:
        log("error", str(e))
        sys.exit(2)

    transformer = ColorTransformer(
        table=table,
        fused=args.fused,
        preview=args.preview and not args.quiet,
    )
    if run_job(job, transformer):
        sys.exit(1)
