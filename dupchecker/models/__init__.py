"""Data models for the image dupchecker."""

from .image_record import ImageRecord, Outcome
from .index_entry import DedupIndexEntry, InsertOutcome

__all__ = ['ImageRecord', 'Outcome', 'DedupIndexEntry', 'InsertOutcome']
