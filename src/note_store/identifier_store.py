"""Assignment of stable unique identifiers to notes.

A note's uniqueId lives in its frontmatter, so it follows the note through
renames and moves. It is created lazily the first time a note is synced or
connected and is never regenerated afterwards.
"""

import logging
import uuid

from src.settings.mapping_store import MappingStore
from .frontmatter_handler import FrontmatterHandler
from .models import Note
from .note_repository import NoteRepository

logger = logging.getLogger(__name__)


class IdentifierStore:
    """Reads or creates the uniqueId of a note.

    Creating an identifier always opens an empty slot in the mapping, so
    every identified note has a mapping entry even before it is connected.
    """

    def __init__(self, note_repository: NoteRepository, mapping_store: MappingStore):
        self.note_repository = note_repository
        self.mapping_store = mapping_store

    @staticmethod
    def generate_unique_id() -> str:
        return str(uuid.uuid4())

    def ensure_unique_id(self, note: Note) -> str:
        """Return the note's uniqueId, assigning one if it has none.

        A note that already has a uniqueId is not modified. Otherwise a new
        UUID-v4 is written into the frontmatter (the note object and its
        file are both updated) and an empty mapping entry is persisted.

        Args:
            note: The note to identify

        Returns:
            The note's uniqueId

        Raises:
            FrontmatterError: If the existing frontmatter is malformed
            FilesystemError: If the note cannot be written
            SettingsFilesystemError: If settings cannot be written
        """
        unique_id = FrontmatterHandler.get_unique_id(note.content, note.file_path)
        if unique_id:
            return unique_id

        unique_id = self.generate_unique_id()
        note.content = FrontmatterHandler.set_field(
            note.content,
            FrontmatterHandler.UNIQUE_ID_KEY,
            unique_id,
            note.file_path
        )
        self.note_repository.save(note)
        logger.info(f"Assigned uniqueId {unique_id} to {note.file_path}")

        self.mapping_store.register(unique_id)
        return unique_id
