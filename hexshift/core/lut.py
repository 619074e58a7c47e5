#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexshift/core/lut.py

"""
Luma/hue lookup table.

The table partitions (luma, hue) space into cells. Each luma band carries a
base adjustment plus one adjustment per hue band; a lookup returns their sum.
Every cell ships as zero: the per-cell tuning belongs to whoever deploys the
table and is loaded from JSON:

    {
      "bands": {
        "keywords": {
          "base": [0, 5.0, 0.0],
          "cells": {"light_green_teal": [-4, 0.0, 8.0]}
        }
      }
    }

Triples are [hue degrees, saturation %, brightness %]. Omitted bands and
cells stay zero.
"""

import json
from typing import Dict, Iterable, Optional, Tuple

from . import config as c
from .color import Adjustment, ZERO
from .errors import LutError


def _in_band(value: float, low: float, high: float, last: bool) -> bool:
    if last:
        return low <= value <= high
    return low <= value < high


def _find_band(value: float, bands: Tuple[Tuple[str, float, float], ...]) -> Optional[str]:
    for i, (name, low, high) in enumerate(bands):
        if _in_band(value, low, high, i == len(bands) - 1):
            return name
    return None


def hue_bands_for(luma_band: str) -> Tuple[Tuple[str, int, int], ...]:
    return c.HUE_BANDS_BY_LUMA.get(luma_band, c.HUE_BANDS)


def classify(luma: float, hue: float) -> Tuple[Optional[str], Optional[str]]:
    """Return the (luma band, hue band) names a color falls into; None outside the table."""
    luma_band = _find_band(luma, c.LUMA_BANDS)
    if luma_band is None:
        return None, None
    return luma_band, _find_band(hue, hue_bands_for(luma_band))


class LookupTable:
    """Maps (luma, hue) to an Adjustment. Immutable once built."""

    def __init__(
        self,
        bases: Optional[Dict[str, Adjustment]] = None,
        cells: Optional[Dict[Tuple[str, str], Adjustment]] = None,
    ):
        bases = dict(bases or {})
        cells = dict(cells or {})
        for band in bases:
            self._check_luma_band(band)
        for band, hue_band in cells:
            self._check_hue_band(band, hue_band)
        self._bases = bases
        self._cells = cells

    @staticmethod
    def _check_luma_band(band: str) -> None:
        if band not in [name for name, _, _ in c.LUMA_BANDS]:
            raise LutError(f"unknown luma band '{band}'")

    @classmethod
    def _check_hue_band(cls, band: str, hue_band: str) -> None:
        cls._check_luma_band(band)
        if hue_band not in [name for name, _, _ in hue_bands_for(band)]:
            raise LutError(f"unknown hue band '{hue_band}' in luma band '{band}'")

    def base(self, band: str) -> Adjustment:
        return self._bases.get(band, ZERO)

    def cell(self, band: str, hue_band: str) -> Adjustment:
        return self._cells.get((band, hue_band), ZERO)

    def lookup(self, luma: float, hue: float) -> Adjustment:
        """Adjustment for a color's luma (0-1) and hue (0-360). Zero outside those ranges."""
        luma_band, hue_band = classify(luma, hue)
        if luma_band is None or hue_band is None:
            return ZERO
        return self.base(luma_band) + self.cell(luma_band, hue_band)

    def __call__(self, luma: float, hue: float) -> Adjustment:
        return self.lookup(luma, hue)

    def is_zero(self) -> bool:
        return all(adj.is_zero() for adj in self._bases.values()) and all(
            adj.is_zero() for adj in self._cells.values()
        )

    def iter_cells(self) -> Iterable[Tuple[str, str, Adjustment]]:
        """Every (luma band, hue band, total adjustment) in table order."""
        for band, _, _ in c.LUMA_BANDS:
            for hue_band, _, _ in hue_bands_for(band):
                yield band, hue_band, self.base(band) + self.cell(band, hue_band)

    def to_dict(self) -> dict:
        bands = {}
        for band, _, _ in c.LUMA_BANDS:
            bands[band] = {
                "base": list(self.base(band).as_tuple()),
                "cells": {
                    hue_band: list(self.cell(band, hue_band).as_tuple())
                    for hue_band, _, _ in hue_bands_for(band)
                },
            }
        return {"bands": bands}

    @classmethod
    def from_dict(cls, data) -> "LookupTable":
        if not isinstance(data, dict) or not isinstance(data.get("bands", {}), dict):
            raise LutError("lookup table must be an object with a 'bands' object")
        bases = {}
        cells = {}
        for band, spec in data.get("bands", {}).items():
            cls._check_luma_band(band)
            if not isinstance(spec, dict):
                raise LutError(f"luma band '{band}' must be an object")
            if "base" in spec:
                bases[band] = _parse_triple(spec["base"], f"{band}.base")
            band_cells = spec.get("cells", {})
            if not isinstance(band_cells, dict):
                raise LutError(f"'{band}.cells' must be an object")
            for hue_band, triple in band_cells.items():
                cls._check_hue_band(band, hue_band)
                cells[(band, hue_band)] = _parse_triple(triple, f"{band}.cells.{hue_band}")
        return cls(bases, cells)


def _parse_triple(value, where: str) -> Adjustment:
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise LutError(f"'{where}' must be a [hue, saturation, brightness] triple")
    hue, sat, bri = value
    if isinstance(hue, bool) or not isinstance(hue, int):
        raise LutError(f"'{where}' hue must be an integer number of degrees")
    for part in (sat, bri):
        if isinstance(part, bool) or not isinstance(part, (int, float)):
            raise LutError(f"'{where}' saturation and brightness must be numbers")
    return Adjustment(hue, float(sat), float(bri))


def load_lut(path) -> LookupTable:
    """Read a lookup table from a JSON file."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise LutError(f"cannot read lookup table '{path}': {e.strerror or e}") from e
    except json.JSONDecodeError as e:
        raise LutError(f"invalid lookup table '{path}': {e.msg} (line {e.lineno})") from e
    except UnicodeDecodeError as e:
        raise LutError(f"lookup table '{path}' is not UTF-8: {e.reason}") from e
    except RecursionError as e:
        raise LutError(f"invalid lookup table '{path}': nested too deeply") from e
    return LookupTable.from_dict(data)


DEFAULT_LUT = LookupTable()
