#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Database schema definitions for the image dupchecker.
"""

from ..config import INDEX_TABLE

PRAGMAS = (
    "PRAGMA journal_mode=WAL;",
    "PRAGMA synchronous=NORMAL;",
)

# Fingerprint -> first path seen. UNIQUE carries the dedup decision.
INDEX_SCHEMA = f"""
CREATE TABLE IF NOT EXISTS {INDEX_TABLE} (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    fingerprint TEXT NOT NULL UNIQUE,
    path TEXT NOT NULL
);
"""
