#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexshift/logic/theme/engine.py

import json
from pathlib import Path

from hexshift.core import config as c
from hexshift.core.errors import ThemeDocumentError
from hexshift.shared.output import write_bytes_atomic
from .walker import map_strings, rename_theme


def load_theme(path) -> dict:
    """Read a JSON theme; the top level must be an object."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            theme = json.load(f)
    except OSError as e:
        raise ThemeDocumentError(path, f"cannot read theme: {e.strerror or e}") from e
    except json.JSONDecodeError as e:
        raise ThemeDocumentError(path, f"invalid JSON: {e.msg} (line {e.lineno}, column {e.colno})") from e
    except UnicodeDecodeError as e:
        raise ThemeDocumentError(path, f"theme is not UTF-8: {e.reason}") from e
    except RecursionError as e:
        raise ThemeDocumentError(path, "unexpected shape: JSON nested too deeply") from e

    if not isinstance(theme, dict):
        raise ThemeDocumentError(path, f"invalid JSON file: expected an object, got {type(theme).__name__}")
    return theme


def write_theme(theme: dict, path) -> None:
    text = json.dumps(theme, indent=c.JSON_INDENT, ensure_ascii=False) + "\n"
    write_bytes_atomic(path, text.encode("utf-8"))


def process_theme_file(job, transformer) -> Path:
    """Rename, recolor and write the JSON theme of a job. Returns the output path."""
    theme = load_theme(job.theme_path)
    original_name = theme.get("name")
    display_name = job.display_name or (original_name if isinstance(original_name, str) else "")
    display_name = display_name or Path(job.theme_path).name.partition(".")[0]
    theme = rename_theme(theme, job.new_name(display_name), job.scheme_output.name)
    try:
        theme = map_strings(theme, lambda value: transformer(value, True))
    except RecursionError as e:
        raise ThemeDocumentError(job.theme_path, "unexpected shape: JSON nested too deeply") from e
    if not job.dry_run:
        write_theme(theme, job.theme_output)
    return job.theme_output
