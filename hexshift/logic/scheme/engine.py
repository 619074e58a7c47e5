#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexshift/logic/scheme/engine.py

import xml.etree.ElementTree as ET
from pathlib import Path

from hexshift.core.errors import ThemeDocumentError
from hexshift.shared.output import write_bytes_atomic
from .walker import recolor_scheme, rename_scheme


def load_scheme(path) -> ET.Element:
    """Parse a scheme file, keeping comments. Any failure is a ThemeDocumentError."""
    parser = ET.XMLParser(target=ET.TreeBuilder(insert_comments=True))
    try:
        with open(path, "rb") as f:
            return ET.parse(f, parser=parser).getroot()
    except OSError as e:
        raise ThemeDocumentError(path, f"cannot read scheme: {e.strerror or e}") from e
    except ET.ParseError as e:
        raise ThemeDocumentError(path, f"invalid XML: {e}") from e


def scheme_display_name(root: ET.Element, path) -> str:
    return root.get("name") or Path(path).stem


def write_scheme(root: ET.Element, path) -> None:
    data = ET.tostring(root, encoding="utf-8", xml_declaration=True)
    write_bytes_atomic(path, data)


def process_scheme_file(job, transformer) -> Path:
    """Rename, recolor and write the XML scheme of a job. Returns the output path."""
    root = load_scheme(job.scheme_path)
    display_name = job.display_name or scheme_display_name(root, job.scheme_path)
    root = rename_scheme(root, job.new_name(display_name))
    root = recolor_scheme(root, lambda value: transformer(value, False))
    if not job.dry_run:
        write_scheme(root, job.scheme_output)
    return job.scheme_output
