"""Command-line interface for Confluence note sync.

This package provides the `confluence-note-sync` CLI tool that pushes local
Markdown notes to Confluence pages and manages the note-to-page connections
and connection settings.
"""

from .sync_command import SyncCommand
from .connect_command import ConnectCommand
from .models import ExitCode
from .errors import CLIError, ConnectionInputError

__all__ = [
    'SyncCommand',
    'ConnectCommand',
    'ExitCode',
    'CLIError',
    'ConnectionInputError',
]
