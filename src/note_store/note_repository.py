"""Reading and writing note files in the local vault."""

import logging
import os
import shutil
import tempfile

from .errors import FilesystemError
from .models import Note

logger = logging.getLogger(__name__)

# Maximum note file size (10 MB) to prevent memory exhaustion
MAX_FILE_SIZE = 10 * 1024 * 1024


class NoteRepository:
    """Loads and saves Note objects from markdown files.

    Saves are atomic: the new text is written to a temporary file in the
    same directory and then moved over the original, so an interrupted
    write never leaves a truncated note.

    Example:
        >>> repo = NoteRepository()
        >>> note = repo.load("notes/Meeting.md")
        >>> note.title
        'Meeting'
    """

    def __init__(self, max_file_size: int = MAX_FILE_SIZE):
        self.max_file_size = max_file_size

    def _validate_file_size(self, file_path: str) -> None:
        """Validate that a file size is within acceptable limits.

        Raises:
            FilesystemError: If file size exceeds maximum allowed size
        """
        try:
            file_size = os.path.getsize(file_path)
        except OSError as e:
            raise FilesystemError(file_path, 'stat', str(e))

        if file_size > self.max_file_size:
            raise FilesystemError(
                file_path,
                'read',
                f'File size ({file_size} bytes) exceeds maximum allowed size '
                f'({self.max_file_size} bytes)'
            )

    def load(self, file_path: str) -> Note:
        """Read a note from disk.

        Args:
            file_path: Path to the markdown file

        Returns:
            Note with the full file text

        Raises:
            FilesystemError: If the file is missing, too large, or unreadable
        """
        if not os.path.isfile(file_path):
            raise FilesystemError(file_path, 'read', 'Note not found')

        self._validate_file_size(file_path)

        try:
            # newline='' keeps line endings exactly as stored
            with open(file_path, 'r', encoding='utf-8', newline='') as f:
                content = f.read()
        except PermissionError:
            raise FilesystemError(file_path, 'read', 'Permission denied')
        except (OSError, UnicodeDecodeError) as e:
            raise FilesystemError(file_path, 'read', str(e))

        return Note(file_path=file_path, content=content)

    def save(self, note: Note) -> None:
        """Write a note's content back to its file atomically.

        Raises:
            FilesystemError: If the file cannot be written
        """
        directory = os.path.dirname(os.path.abspath(note.file_path))
        temp_path = None
        try:
            fd, temp_path = tempfile.mkstemp(
                prefix='.', suffix='.tmp', dir=directory
            )
            with os.fdopen(fd, 'w', encoding='utf-8', newline='') as f:
                f.write(note.content)
            if os.path.exists(note.file_path):
                # mkstemp creates 0600 files; keep the note's own mode
                shutil.copymode(note.file_path, temp_path)
            os.replace(temp_path, note.file_path)
            temp_path = None
        except PermissionError:
            raise FilesystemError(note.file_path, 'write', 'Permission denied')
        except OSError as e:
            raise FilesystemError(note.file_path, 'write', str(e))
        finally:
            if temp_path is not None and os.path.exists(temp_path):
                try:
                    os.remove(temp_path)
                except OSError as e:
                    logger.warning(f"Failed to remove temp file {temp_path}: {e}")

        logger.debug(f"Wrote {note.file_path}")
