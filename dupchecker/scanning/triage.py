#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Corrupt-file triage: decides whether a file that failed to decode is removed.
"""

import logging
import os
from enum import Enum
from typing import FrozenSet

from ..errors import DecodeError, DecodeErrorKind

logger = logging.getLogger(__name__)

# Only failures that say the bytes themselves are bad
DELETABLE_KINDS: FrozenSet[DecodeErrorKind] = frozenset({
    DecodeErrorKind.TRUNCATED,
    DecodeErrorKind.INVALID_SIGNATURE,
})


class TriageOutcome(Enum):
    DELETED = "deleted"
    KEPT = "kept"
    DELETE_FAILED = "delete_failed"


class CorruptFileTriage:
    """Applies the deletion policy to decode failures."""

    def __init__(self, delete_corrupt: bool = True):
        self.delete_corrupt = delete_corrupt

    def should_delete(self, error: DecodeError) -> bool:
        return self.delete_corrupt and error.kind in DELETABLE_KINDS

    def triage(self, error: DecodeError) -> TriageOutcome:
        if not self.should_delete(error):
            logger.warning("Keeping unreadable file %s (%s): %s",
                           error.path, error.kind.value, error.cause)
            return TriageOutcome.KEPT

        logger.warning("Deleting corrupt file %s (%s): %s",
                       error.path, error.kind.value, error.cause)
        try:
            os.remove(error.path)
        except OSError as e:
            logger.warning("Could not delete %s: %s", error.path, e)
            return TriageOutcome.DELETE_FAILED
        return TriageOutcome.DELETED
