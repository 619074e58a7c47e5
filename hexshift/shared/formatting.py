#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexshift/shared/formatting.py


def format_colorspace(fmt: str, *args) -> str:
    if fmt == 'rgb':
        return f"rgb({args[0]}, {args[1]}, {args[2]})"
    elif fmt == 'hsb':
        h, s, b = args
        return f"hsb({h}deg, {s:.2f}%, {b:.2f}%)"
    elif fmt == 'luma':
        return f"luma({args[0]:.4f})"
    elif fmt == 'adjustment':
        h, s, b = args
        return f"({h:+d}deg, {s:+.2f}%, {b:+.2f}%)"

    return ""
