"""Utility functions for the image dupchecker."""

from .time import utc_now_str
from .path import ensure_dir, unique_target

__all__ = ['utc_now_str', 'ensure_dir', 'unique_target']
