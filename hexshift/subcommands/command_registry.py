#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexshift/subcommands/command_registry.py

from . import (
    inspect,
    transform,
    lut,
)

SUBCOMMANDS = {
    'inspect': inspect,
    'transform': transform,
    'lut': lut,
}
