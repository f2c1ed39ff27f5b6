#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Run command: discovery, hashing, index commit, triage and migration.
"""

import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..config import RunConfig
from ..database.manager import DedupIndex
from ..errors import StorageFatalError
from ..scanning.discovery import FileDiscovery
from ..scanning.hasher import ImageHasher
from ..scanning.pipeline import PipelineCoordinator
from ..scanning.triage import CorruptFileTriage, TriageOutcome
from ..storage.migration import MigrationReport, SurvivorMigration
from ..utils.time import utc_now_str

logger = logging.getLogger(__name__)


@dataclass
class RunSummary:
    elapsed: float = 0.0
    discovered: int = 0
    processed: int = 0
    hashed: int = 0
    errors: int = 0
    inserted: int = 0
    duplicates: int = 0
    deleted: int = 0
    skipped: int = 0
    interrupted: bool = False
    migration: Optional[MigrationReport] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "elapsed_seconds": round(self.elapsed, 3),
            "discovered": self.discovered,
            "processed": self.processed,
            "hashed": self.hashed,
            "errors": self.errors,
            "inserted": self.inserted,
            "duplicates": self.duplicates,
            "deleted": self.deleted,
            "skipped": self.skipped,
            "interrupted": self.interrupted,
            "migration": self.migration.to_dict() if self.migration else None,
        }


class RunCommand:
    """
    One complete dedup run over `config.root`.

    The index is opened and its schema ensured in the constructor, so a
    broken index fails the run before any file is touched.
    """

    def __init__(self, config: RunConfig, cancel_event: Optional[threading.Event] = None):
        self.config = config
        self.index = DedupIndex(config.db_path)
        try:
            self.index.ensure_schema()
        except StorageFatalError:
            self.index.close()
            raise
        self.discovery = FileDiscovery(config.extensions)
        self.pipeline = PipelineCoordinator(
            hasher=ImageHasher(config.hash_size),
            workers=config.workers,
            show_progress=config.show_progress,
            cancel_event=cancel_event,
        )
        self.triage = CorruptFileTriage(delete_corrupt=config.delete_corrupt)

    def close(self) -> None:
        self.index.close()

    def execute(self) -> RunSummary:
        start = time.perf_counter()
        summary = RunSummary()
        self._print_run_header()

        # Stage 1: Discovery
        candidates = self.discovery.discover_files(self.config.root)
        summary.discovered = len(candidates)

        # Stage 2: Decode + hash (parallel)
        result = self.pipeline.run(candidates)
        summary.processed = result.processed
        summary.hashed = len(result.successes)
        summary.errors = len(result.failures)
        summary.skipped = result.skipped
        summary.interrupted = result.interrupted

        # Stage 3: Commit, after the pool has drained
        batch = self.index.commit_batch(result.successes)
        summary.inserted = batch.inserted
        summary.duplicates = batch.duplicates

        # Stage 4: Triage of decode failures
        for record in result.failures:
            if self.triage.triage(record.error) is TriageOutcome.DELETED:
                summary.deleted += 1

        # Stage 5: Migration, only once the commit is durable
        if self.config.destination is not None:
            if summary.interrupted:
                logger.warning("Run was interrupted; skipping migration")
            else:
                migration = SurvivorMigration(self.config.destination)
                summary.migration = migration.migrate(self.index.all_entries())

        summary.elapsed = time.perf_counter() - start
        self._print_summary(summary)
        return summary

    def _print_run_header(self):
        cfg = self.config
        print("=" * 80)
        print(f"IMAGE DUPCHECKER RUN - {utc_now_str()}")
        print("=" * 80)
        print(f"Source: {cfg.root}")
        print(f"Index: {cfg.db_path}")
        print(f"Destination: {cfg.destination or '(migration disabled)'}")
        print(f"Extensions: {', '.join(sorted(cfg.extensions))}")
        print(f"Workers: {cfg.workers}, hash size: {cfg.hash_size}")
        print(f"Delete corrupt files: {cfg.delete_corrupt}")
        print()

    def _print_summary(self, summary: RunSummary):
        print("=" * 80)
        print(f"Done. Elapsed time: {summary.elapsed:.2f}s")
        print(f"  - Processed: {summary.processed:,} of {summary.discovered:,} files")
        print(f"  - Errors: {summary.errors:,} ({summary.deleted:,} deleted)")
        print(f"  - New fingerprints: {summary.inserted:,}, duplicates: {summary.duplicates:,}")
        if summary.interrupted:
            print(f"  - Interrupted, {summary.skipped:,} files not processed")
        print("=" * 80)
