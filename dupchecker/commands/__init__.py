"""Command implementations for the image dupchecker."""

from .run import RunCommand, RunSummary
from .migrate import cmd_migrate
from .stats import cmd_show_stats

__all__ = ['RunCommand', 'RunSummary', 'cmd_migrate', 'cmd_show_stats']
