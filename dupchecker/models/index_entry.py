#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Durable index rows for the image dupchecker.
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict


class InsertOutcome(Enum):
    INSERTED = "inserted"
    ALREADY_PRESENT = "already_present"


@dataclass(frozen=True)
class DedupIndexEntry:
    """One fingerprint and the path recorded when it was first seen."""
    id: int
    fingerprint: str
    path: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert entry to dictionary for serialization."""
        return asdict(self)
