#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
File discovery logic for the image dupchecker.
Handles recursive scanning of directories to find candidate images.
"""

import logging
import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from ..config import IMAGE_EXT, normalize_extensions
from ..utils.time import utc_now_str

logger = logging.getLogger(__name__)


@dataclass
class DiscoveryStats:
    entries_scanned: int = 0
    files_found: int = 0
    errors: int = 0
    elapsed: float = 0.0


class FileDiscovery:
    """Walks a directory tree and yields files with a matching extension."""

    def __init__(self, extensions: Optional[Iterable[str]] = None):
        self.extensions = normalize_extensions(extensions if extensions is not None else IMAGE_EXT)
        self.stats = DiscoveryStats()

    def discover_files(self, root: Path) -> List[Path]:
        """
        Discover candidate image files under root.

        Args:
            root: Directory to scan

        Returns:
            List of discovered file paths, in walk order
        """
        print(f"[{utc_now_str()}] Discovering images in {root}...")
        start_time = time.perf_counter()

        candidates = list(self.iter_files(root))

        self.stats.elapsed = time.perf_counter() - start_time
        self._print_discovery_summary()
        return candidates

    def iter_files(self, root: Path) -> Iterator[Path]:
        """Lazily yield candidate files; unreadable entries are skipped."""
        self.stats = DiscoveryStats()
        yield from self._scan_recursive(Path(root))

    def _scan_recursive(self, path: Path) -> Iterator[Path]:
        try:
            with os.scandir(path) as entries:
                for entry in entries:
                    self.stats.entries_scanned += 1
                    try:
                        if entry.is_dir(follow_symlinks=False):
                            yield from self._scan_recursive(Path(entry.path))
                        elif entry.is_file() and self._is_candidate(entry.name):
                            self.stats.files_found += 1
                            yield Path(entry.path)
                    except OSError as e:
                        self.stats.errors += 1
                        logger.debug("Skipping %s: %s", entry.path, e)
        except OSError as e:
            self.stats.errors += 1
            logger.debug("Cannot read directory %s: %s", path, e)

    def _is_candidate(self, filename: str) -> bool:
        return Path(filename).suffix.lower() in self.extensions

    def _print_discovery_summary(self):
        elapsed = self.stats.elapsed or 1e-9
        print(f"[{utc_now_str()}] Discovery complete: {self.stats.files_found:,} images")
        print(f"  - Total scanned: {self.stats.entries_scanned:,} items in {self.stats.elapsed:.1f}s "
              f"({self.stats.entries_scanned / elapsed:.0f} items/s)")
        if self.stats.errors > 0:
            print(f"  - Skipped entries: {self.stats.errors:,}")
