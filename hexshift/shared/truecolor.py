#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexshift/shared/truecolor.py

import os
import sys


def ensure_truecolor() -> bool:
    """Set COLORTERM to truecolor so swatches render; False when stdout is not a terminal."""
    if sys.platform == "win32":
        return sys.stdout.isatty()
    if os.environ.get("COLORTERM") != "truecolor":
        os.environ["COLORTERM"] = "truecolor"
    return sys.stdout.isatty()
