"""Note store for Confluence note sync.

This package provides access to markdown notes in the local vault, the
YAML frontmatter codec, and the stable uniqueId assigned to each note.
"""

from .models import Note
from .errors import NoteStoreError, FilesystemError, FrontmatterError
from .frontmatter_handler import FrontmatterHandler
from .note_repository import NoteRepository
from .identifier_store import IdentifierStore

__all__ = [
    'Note',
    'NoteStoreError',
    'FilesystemError',
    'FrontmatterError',
    'FrontmatterHandler',
    'NoteRepository',
    'IdentifierStore',
]
