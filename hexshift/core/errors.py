#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexshift/core/errors.py


class HexshiftError(Exception):
    """Base class for errors that abort a hexshift run."""


class ThemeDocumentError(HexshiftError):
    """An input document could not be read, parsed, or has an unexpected shape."""

    def __init__(self, path, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")


class LutError(HexshiftError):
    """A lookup table definition is malformed."""
