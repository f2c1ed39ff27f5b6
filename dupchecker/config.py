#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Global defaults and run configuration for the image dupchecker.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, Iterable, Optional, Set

# File type categories
IMAGE_EXT: Set[str] = {".jpg", ".jpeg"}

# Index defaults
DEFAULT_DB_NAME = "images.db"
INDEX_TABLE = "hashes"

# Hashing defaults
DEFAULT_HASH_SIZE = 8

# Processing defaults
DEFAULT_WORKERS = os.cpu_count() or 1


def normalize_extensions(extensions: Iterable[str]) -> FrozenSet[str]:
    """Lower-case extensions and make sure each one carries a leading dot."""
    normalized = set()
    for ext in extensions:
        ext = ext.strip().lower()
        if not ext:
            continue
        if not ext.startswith("."):
            ext = "." + ext
        normalized.add(ext)
    return frozenset(normalized)


@dataclass
class RunConfig:
    """Everything a single dedup run needs, passed in explicitly."""
    root: Path
    db_path: Path = Path(DEFAULT_DB_NAME)
    destination: Optional[Path] = None
    extensions: FrozenSet[str] = field(default_factory=lambda: frozenset(IMAGE_EXT))
    workers: int = DEFAULT_WORKERS
    hash_size: int = DEFAULT_HASH_SIZE
    delete_corrupt: bool = True
    show_progress: bool = True

    def __post_init__(self):
        self.root = Path(self.root)
        self.db_path = Path(self.db_path)
        if self.destination is not None:
            self.destination = Path(self.destination)
        self.extensions = normalize_extensions(self.extensions)
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")
        if self.hash_size < 2:
            raise ValueError(f"hash_size must be at least 2, got {self.hash_size}")

    def to_dict(self) -> dict:
        return {
            "root": str(self.root),
            "db_path": str(self.db_path),
            "destination": str(self.destination) if self.destination else None,
            "extensions": sorted(self.extensions),
            "workers": self.workers,
            "hash_size": self.hash_size,
            "delete_corrupt": self.delete_corrupt,
        }
