"""Persisted mapping from note uniqueId to Confluence page ID."""

import logging
from typing import Optional

from .settings_repository import SettingsRepository

logger = logging.getLogger(__name__)


class MappingStore:
    """Key-value table of uniqueId -> page ID backed by the settings file.

    An entry with an empty value means the note has an identifier but has
    not been connected to a page yet. Every write is persisted right away.
    Access is single-process and sequential; there is no locking.

    Example:
        >>> store = MappingStore(SettingsRepository.load())
        >>> store.set("0b6f3f7e-...", "12345")
        >>> store.get("0b6f3f7e-...")
        '12345'
    """

    def __init__(self, repository: SettingsRepository):
        self.repository = repository

    def get(self, unique_id: str) -> Optional[str]:
        """Return the page ID for a uniqueId, or None if there is no entry."""
        return self.repository.settings.mapping.get(unique_id)

    def set(self, unique_id: str, page_id: str) -> None:
        """Record the page ID for a uniqueId and persist settings.

        Raises:
            SettingsFilesystemError: If settings cannot be written
        """
        self.repository.settings.mapping[unique_id] = page_id
        logger.info(f"Mapped {unique_id} -> {page_id or '(not connected)'}")
        self.repository.save()

    def register(self, unique_id: str) -> None:
        """Create an empty slot for a new uniqueId.

        An existing value is never overwritten.
        """
        if unique_id in self.repository.settings.mapping:
            return
        self.set(unique_id, "")

    def is_connected(self, unique_id: str) -> bool:
        return bool(self.get(unique_id))
