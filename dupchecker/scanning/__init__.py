"""Scanning and processing modules for the image dupchecker."""

from .discovery import FileDiscovery, DiscoveryStats
from .hasher import ImageHasher
from .triage import CorruptFileTriage, TriageOutcome
from .pipeline import PipelineCoordinator, PipelineResult

__all__ = [
    'FileDiscovery',
    'DiscoveryStats',
    'ImageHasher',
    'CorruptFileTriage',
    'TriageOutcome',
    'PipelineCoordinator',
    'PipelineResult',
]
