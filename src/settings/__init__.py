"""Persisted settings for note sync.

This package owns the settings record (Confluence host, access token,
timeout) and the uniqueId -> page ID mapping stored alongside it.
"""

from .models import Settings
from .errors import SettingsError, InvalidSettingsError, SettingsFilesystemError
from .settings_repository import SettingsRepository
from .mapping_store import MappingStore

__all__ = [
    'Settings',
    'SettingsError',
    'InvalidSettingsError',
    'SettingsFilesystemError',
    'SettingsRepository',
    'MappingStore',
]
