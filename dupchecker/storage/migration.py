#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Moves indexed survivors into a single destination directory.
"""

import logging
import os
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List

from ..models.index_entry import DedupIndexEntry
from ..utils.path import ensure_dir, unique_target
from ..utils.time import utc_now_str

logger = logging.getLogger(__name__)


@dataclass
class MigrationFailure:
    path: str
    reason: str


@dataclass
class MigrationReport:
    moved: int = 0
    missing: int = 0
    already_in_place: int = 0
    renamed: int = 0
    failures: List[MigrationFailure] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "moved": self.moved,
            "missing": self.missing,
            "already_in_place": self.already_in_place,
            "renamed": self.renamed,
            "failed": len(self.failures),
            "failures": [{"path": f.path, "reason": f.reason} for f in self.failures],
        }


class SurvivorMigration:
    """
    Relocates every indexed file that still exists into `destination`.

    Files keep their name. An existing file is never overwritten: a name
    clash with a different file moves the survivor to `stem_N.ext` instead.
    """

    def __init__(self, destination: Path):
        self.destination = Path(destination)

    def migrate(self, entries: Iterable[DedupIndexEntry]) -> MigrationReport:
        ensure_dir(self.destination)
        report = MigrationReport()
        print(f"[{utc_now_str()}] Migrating survivors to {self.destination}...")

        for entry in entries:
            self._migrate_one(Path(entry.path), report)

        print(f"  - Moved {report.moved:,} files"
              + (f" ({report.renamed:,} renamed)" if report.renamed else ""))
        if report.missing:
            print(f"  - Missing on disk: {report.missing:,}")
        if report.failures:
            print(f"  - Failed moves: {len(report.failures):,}")
        return report

    def _migrate_one(self, src: Path, report: MigrationReport) -> None:
        if not src.is_file():
            report.missing += 1
            logger.debug("Not on disk, skipping: %s", src)
            return

        target = self.destination / src.name
        try:
            if target.exists() and os.path.samefile(src, target):
                report.already_in_place += 1
                return
            if target.exists():
                target = unique_target(self.destination, src.name)
                report.renamed += 1
                logger.info("Name clash for %s, using %s", src.name, target.name)
            shutil.move(str(src), str(target))
        except OSError as e:
            report.failures.append(MigrationFailure(str(src), str(e)))
            logger.error("Failed to move %s: %s", src, e)
            return

        report.moved += 1
        logger.debug("Moved %s -> %s", src, target)
