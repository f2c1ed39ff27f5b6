#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Exception types for the image dupchecker.
"""

from enum import Enum


class DupCheckerError(Exception):
    """Base class for all dupchecker errors."""


class DecodeErrorKind(Enum):
    """Closed set of reasons an image could not be decoded."""
    TRUNCATED = "truncated"
    INVALID_SIGNATURE = "invalid_signature"
    UNREADABLE = "unreadable"
    OTHER = "other"


class DecodeError(DupCheckerError):
    """An image could not be decoded or hashed."""

    def __init__(self, path: str, kind: DecodeErrorKind, cause: str):
        super().__init__(f"{path}: {kind.value}: {cause}")
        self.path = path
        self.kind = kind
        self.cause = cause


class StorageFatalError(DupCheckerError):
    """The dedup index cannot be opened, created or written."""
