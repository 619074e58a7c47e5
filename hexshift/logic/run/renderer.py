#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexshift/logic/run/renderer.py

from hexshift.core import config as c
from hexshift.shared.logger import log


def render_document_header(kind: str, path) -> None:
    log("info", f"{c.BOLD_WHITE}--------------- processing {kind}: {path} ---------------{c.RESET}")


def render_document_done(kind: str, output, seen: int, changed: int, dry_run: bool) -> None:
    verb = "would write" if dry_run else "wrote"
    log("success", f"{kind}: {changed} of {seen} colors changed, {verb} {output}")


def render_run_summary(done: int, failed: int) -> None:
    if failed:
        log("error", f"{failed} document(s) failed, {done} processed")
    elif done:
        log("success", f"{done} document(s) processed")
    else:
        log("warning", "nothing to process")
