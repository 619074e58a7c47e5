#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexshift/shared/sanitizer.py

import argparse
import re
from typing import Optional

HEX_REGEX = re.compile(r"#?([0-9A-Fa-f]{6}|[0-9A-Fa-f]{3})")
SUFFIX_REGEX = re.compile(r"[A-Za-z0-9_.-]+")


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def normalize_hex(value) -> Optional[str]:
    """
    Strictly normalizes a hex color into 6 lowercase digits.

    Accepts an optional leading '#' and either 6 digits or the 3-digit
    shorthand (e.g. 'abc' becomes 'aabbcc'). Anything else, including
    non-string values, yields None.
    """
    if not isinstance(value, str):
        return None
    match = HEX_REGEX.fullmatch(value)
    if match is None:
        return None
    digits = match.group(1).lower()
    if len(digits) == 3:
        return "".join(ch * 2 for ch in digits)
    return digits


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_hex(v: str) -> str:
    """Validator for hex string CLI arguments."""
    cleaned = normalize_hex(str(v).strip())
    if not cleaned:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid hex value: '{raw}'")
    return cleaned


def handle_suffix(v: str) -> str:
    """Validator for the name suffix; it ends up in file names, so keep it path-safe."""
    cleaned = str(v).strip()
    if not SUFFIX_REGEX.fullmatch(cleaned):
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid suffix: '{raw}' (use letters, digits, '-', '_' or '.')")
    return cleaned


def handle_display_name(v: str) -> str:
    """Validator for display names: collapses whitespace, rejects empty names."""
    cleaned = _sanitize_for_log(v)
    if not cleaned:
        raise argparse.ArgumentTypeError("display name must not be empty")
    return cleaned


# ==========================================
# Central Mapping for Argparse types
# ==========================================

INPUT_HANDLERS = {
    "hex": handle_hex,
    "suffix": handle_suffix,
    "display_name": handle_display_name,
}
