#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexshift/shared/output.py

import os
import tempfile
from pathlib import Path

from hexshift.core import config as c


def derive_output_path(path, suffix: str, out_dir=None) -> Path:
    """Insert '-<suffix>' before the first dot of the file name.

    'retro-block.theme.json' with suffix 'high' becomes 'retro-block-high.theme.json'.
    """
    path = Path(path)
    stem, dot, rest = path.name.partition(".")
    name = f"{stem}{c.FILE_SEPARATOR}{suffix}{dot}{rest}"
    parent = Path(out_dir) if out_dir is not None else path.parent
    return parent / name


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def write_bytes_atomic(path, data: bytes) -> None:
    """Write through a sibling temp file so a failed write never leaves a partial file."""
    path = Path(path)
    fd, tmp = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.chmod(tmp, c.FILE_MODE & ~_current_umask())
        os.replace(tmp, path)
    except BaseException:
        try:
            os.unlink(tmp)
        except FileNotFoundError:
            pass
        raise
