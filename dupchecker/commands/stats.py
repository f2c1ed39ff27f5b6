#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Statistics command for the image dupchecker.
"""

import logging
from pathlib import Path
from typing import Any, Dict

from ..database.manager import DedupIndex
from ..jsonio import success


def cmd_show_stats(index: DedupIndex, detailed: bool = False, as_json: bool = False) -> Dict[str, Any]:
    """Show index statistics.

    Args:
        index: Open DedupIndex.
        detailed: If True, also check which indexed paths still exist on disk.
        as_json: If True, emit a single JSON object to stdout instead of logs.

    Returns:
        A dict of computed statistics (returned regardless of output mode).
    """
    logger = logging.getLogger(__name__)

    results: Dict[str, Any] = {"db_path": str(index.db_path), "entries": index.count()}

    if detailed:
        present = sum(1 for entry in index.all_entries() if Path(entry.path).is_file())
        results["present_on_disk"] = present
        results["missing_on_disk"] = results["entries"] - present

    if as_json:
        success("stats", results)
        return results

    logger.info("Index: %s", results["db_path"])
    logger.info("Fingerprints: %d", results["entries"])
    if detailed:
        logger.info("Present on disk: %d", results["present_on_disk"])
        logger.info("Missing on disk: %d", results["missing_on_disk"])
    return results
