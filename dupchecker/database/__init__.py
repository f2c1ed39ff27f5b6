"""Durable dedup index for the image dupchecker."""

from .manager import DedupIndex, BatchResult
from .init import init_db_if_needed

__all__ = ['DedupIndex', 'BatchResult', 'init_db_if_needed']
