#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexshift/logic/theme/walker.py

import posixpath
from typing import Any, Callable, Optional


def map_strings(node: Any, transform: Callable[[str], Optional[str]]) -> Any:
    """Rebuild a JSON value, passing every string value (never keys) through transform.

    transform returns the replacement, or None to keep the original string.
    Objects keep their key order.
    """
    if isinstance(node, dict):
        return {key: map_strings(value, transform) for key, value in node.items()}
    if isinstance(node, list):
        return [map_strings(item, transform) for item in node]
    if isinstance(node, str):
        new_value = transform(node)
        return node if new_value is None else new_value
    return node


def rename_theme(theme: dict, name: str, scheme_file: str) -> dict:
    """Copy of the theme with its display name and editor scheme reference updated.

    Both fields are only rewritten when present. The scheme reference keeps its
    directory and points at scheme_file.
    """
    result = dict(theme)
    if "name" in result:
        result["name"] = name
    if "editorScheme" in result:
        old = result["editorScheme"]
        directory = posixpath.dirname(old) if isinstance(old, str) else ""
        result["editorScheme"] = posixpath.join(directory, scheme_file) if directory else scheme_file
    return result
