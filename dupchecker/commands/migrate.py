#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Standalone migration over an existing index.
"""

import contextlib
import logging
import sys
from pathlib import Path

from ..database.manager import DedupIndex
from ..jsonio import success
from ..storage.migration import SurvivorMigration


def cmd_migrate(index: DedupIndex, destination: Path, as_json: bool = False) -> int:
    """Move every indexed file that still exists into destination."""
    logger = logging.getLogger(__name__)
    entries = index.all_entries()
    logger.info("Migrating %d indexed entries to %s", len(entries), destination)

    migration = SurvivorMigration(destination)
    if not as_json:
        migration.migrate(entries)
        return 0

    with contextlib.redirect_stdout(sys.stderr):
        report = migration.migrate(entries)
    return success("migrate", report.to_dict())
