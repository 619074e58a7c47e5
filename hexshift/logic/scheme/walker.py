#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexshift/logic/scheme/walker.py

"""
Color-bearing leaves of an XML editor color scheme.

A scheme keeps plain colors under ``<colors><option name=".." value=".."/>``
and text attributes one level deeper, as
``<attributes><option name=".."><value><option name="FOREGROUND" value=".."/>``.
Attribute values there also hold font types and effect codes, so only
6-character values are taken as colors.
"""

import copy
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Tuple


@dataclass(frozen=True)
class ColorPath:
    """Element path from the scheme root to elements whose attribute holds a color."""

    steps: Tuple[str, ...]
    attribute: str = "value"
    length: Optional[int] = None

    @property
    def xpath(self) -> str:
        return "/".join(self.steps)

    def accepts(self, value: str) -> bool:
        return self.length is None or len(value) == self.length


SCHEME_COLOR_PATHS = (
    ColorPath(("colors", "option")),
    ColorPath(("attributes", "option", "value", "option"), length=6),
)


def iter_color_leaves(
    root: ET.Element, paths: Tuple[ColorPath, ...] = SCHEME_COLOR_PATHS
) -> Iterator[Tuple[ET.Element, ColorPath, str]]:
    """Yield (element, path, value) for each candidate color, path by path in document order."""
    for path in paths:
        for element in root.iterfind(path.xpath):
            value = element.get(path.attribute)
            if value is not None and path.accepts(value):
                yield element, path, value


def recolor_scheme(
    root: ET.Element,
    transform: Callable[[str], Optional[str]],
    paths: Tuple[ColorPath, ...] = SCHEME_COLOR_PATHS,
) -> ET.Element:
    """Return a copy of the scheme with every color leaf passed through transform.

    transform returns the replacement value, or None to leave it as is.
    """
    result = copy.deepcopy(root)
    for element, path, value in iter_color_leaves(result, paths):
        new_value = transform(value)
        if new_value is not None:
            element.set(path.attribute, new_value)
    return result


def rename_scheme(root: ET.Element, name: str) -> ET.Element:
    result = copy.deepcopy(root)
    result.set("name", name)
    return result
