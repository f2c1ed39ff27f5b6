"""Survivor relocation for the image dupchecker."""

from .migration import SurvivorMigration, MigrationReport, MigrationFailure

__all__ = ['SurvivorMigration', 'MigrationReport', 'MigrationFailure']
