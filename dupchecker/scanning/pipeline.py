#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Parallel decode + hash stage for the image dupchecker.

Workers only compute; the calling thread is the single consumer of their
results, so the success and failure buffers are never shared.
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from tqdm import tqdm

from ..config import DEFAULT_WORKERS
from ..models.image_record import ImageRecord
from ..utils.time import utc_now_str
from .hasher import ImageHasher

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    successes: List[ImageRecord] = field(default_factory=list)
    failures: List[ImageRecord] = field(default_factory=list)
    skipped: int = 0
    interrupted: bool = False

    @property
    def processed(self) -> int:
        return len(self.successes) + len(self.failures)


class PipelineCoordinator:
    """Runs ImageHasher.process over many paths with a bounded thread pool."""

    def __init__(self, hasher: Optional[ImageHasher] = None, workers: int = DEFAULT_WORKERS,
                 show_progress: bool = True, cancel_event: Optional[threading.Event] = None):
        self.hasher = hasher or ImageHasher()
        self.workers = max(1, workers)
        self.show_progress = show_progress
        self.cancel_event = cancel_event or threading.Event()

    def cancel(self) -> None:
        """Ask the pipeline to stop before starting any further file."""
        self.cancel_event.set()

    def _process_one(self, path: Path) -> Optional[ImageRecord]:
        if self.cancel_event.is_set():
            return None
        logger.debug("Processing: %s", path)
        return self.hasher.process(path)

    def run(self, paths: Sequence[Path]) -> PipelineResult:
        """Hash every path; returns once the pool has fully drained."""
        result = PipelineResult()
        collected = set()
        print(f"[{utc_now_str()}] Hashing {len(paths):,} files with {self.workers} workers...")

        with tqdm(total=len(paths), unit="file", disable=not self.show_progress) as progress:
            with ThreadPoolExecutor(max_workers=self.workers) as executor:
                futures = [executor.submit(self._process_one, p) for p in paths]
                try:
                    for future in as_completed(futures):
                        collected.add(future)
                        self._collect(future.result(), result)
                        progress.update(1)
                except KeyboardInterrupt:
                    logger.warning("Interrupted; finishing files already in progress")
                    self.cancel()
                    for future in futures:
                        future.cancel()

            # Futures running at interrupt time have finished once the executor exits
            for future in futures:
                if future in collected:
                    continue
                if future.cancelled():
                    result.skipped += 1
                else:
                    self._collect(future.result(), result)

        result.interrupted = self.cancel_event.is_set()
        logger.info("Hashing done: %d hashed, %d failed, %d skipped",
                    len(result.successes), len(result.failures), result.skipped)
        return result

    def _collect(self, record: Optional[ImageRecord], result: PipelineResult) -> None:
        if record is None:
            result.skipped += 1
        elif record.ok:
            result.successes.append(record)
        else:
            result.failures.append(record)
            logger.error("Error processing %s: %s", Path(record.path).name, record.error.cause)
