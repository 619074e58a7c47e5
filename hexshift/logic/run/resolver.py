#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexshift/logic/run/resolver.py

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from hexshift.core import config as c
from hexshift.shared.output import derive_output_path


@dataclass(frozen=True)
class ThemeJob:
    """Everything a run needs to know about its inputs and outputs."""

    scheme_path: Path
    theme_path: Path
    suffix: str = c.DEFAULT_SUFFIX
    display_name: Optional[str] = None
    out_dir: Optional[Path] = None
    dry_run: bool = False
    process_scheme: bool = True
    process_theme: bool = True

    @property
    def scheme_output(self) -> Path:
        return derive_output_path(self.scheme_path, self.suffix, self.out_dir)

    @property
    def theme_output(self) -> Path:
        return derive_output_path(self.theme_path, self.suffix, self.out_dir)

    def new_name(self, display_name: str) -> str:
        return f"{display_name}{c.NAME_SEPARATOR}{self.suffix}"


def resolve_theme_job(args: argparse.Namespace) -> ThemeJob:
    """Turn parsed CLI arguments into a ThemeJob.

    Explicit -x/-j paths win; otherwise both files are looked up in the themes
    directory from the base name.
    """
    themes_dir = Path(args.themes_dir)
    scheme = Path(args.scheme) if args.scheme else themes_dir / f"{args.base_name}{c.SCHEME_EXT}"
    theme = Path(args.theme) if args.theme else themes_dir / f"{args.base_name}{c.THEME_EXT}"
    only = getattr(args, "only", None)

    return ThemeJob(
        scheme_path=scheme,
        theme_path=theme,
        suffix=args.suffix,
        display_name=args.display_name,
        out_dir=Path(args.out_dir) if args.out_dir else None,
        dry_run=args.dry_run,
        process_scheme=only in (None, "scheme"),
        process_theme=only in (None, "theme"),
    )
