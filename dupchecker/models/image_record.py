#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Per-file pipeline results for the image dupchecker.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..errors import DecodeError


class Outcome(Enum):
    HASHED = "hashed"
    DECODE_FAILED = "decode_failed"


@dataclass(frozen=True)
class ImageRecord:
    """Immutable result of processing one discovered file."""
    path: str
    outcome: Outcome
    fingerprint: Optional[str] = None
    error: Optional[DecodeError] = None

    @classmethod
    def hashed(cls, path: str, fingerprint: str) -> 'ImageRecord':
        return cls(path=path, outcome=Outcome.HASHED, fingerprint=fingerprint)

    @classmethod
    def failed(cls, error: DecodeError) -> 'ImageRecord':
        return cls(path=error.path, outcome=Outcome.DECODE_FAILED, error=error)

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.HASHED
