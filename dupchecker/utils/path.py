#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Path utility functions for the image dupchecker.
"""

from pathlib import Path


def ensure_dir(p: Path) -> None:
    """Ensure directory exists, creating it if necessary."""
    p.mkdir(parents=True, exist_ok=True)


def unique_target(directory: Path, name: str) -> Path:
    """Return directory/name, or directory/stem_N.ext for the first free N."""
    target = directory / name
    if not target.exists():
        return target
    stem, suffix = Path(name).stem, Path(name).suffix
    n = 1
    while True:
        candidate = directory / f"{stem}_{n}{suffix}"
        if not candidate.exists():
            return candidate
        n += 1
