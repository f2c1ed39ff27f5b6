"""Image dupchecker - perceptual-hash deduplication with a durable index."""

__version__ = "1.0.0"
__author__ = "Dupchecker Team"

# Import key classes for convenient top-level access
from .config import RunConfig
from .commands import RunCommand, RunSummary
from .database import DedupIndex
from .errors import DupCheckerError, DecodeError, DecodeErrorKind, StorageFatalError
from .scanning import FileDiscovery, ImageHasher, CorruptFileTriage, PipelineCoordinator
from .storage import SurvivorMigration
from .models import ImageRecord, Outcome, DedupIndexEntry, InsertOutcome

__all__ = [
    # Core classes
    'RunConfig',
    'RunCommand',
    'RunSummary',
    'DedupIndex',

    # Pipeline components
    'FileDiscovery',
    'ImageHasher',
    'CorruptFileTriage',
    'PipelineCoordinator',
    'SurvivorMigration',

    # Data models
    'ImageRecord',
    'Outcome',
    'DedupIndexEntry',
    'InsertOutcome',

    # Errors
    'DupCheckerError',
    'DecodeError',
    'DecodeErrorKind',
    'StorageFatalError',

    # Package metadata
    '__version__',
    '__author__'
]
