"""Sync command orchestration for CLI.

This module provides the SyncCommand class that pushes the text of one note
to the Confluence page it is connected to. It coordinates the note store,
the mapping store, the Confluence API wrapper and the OutputHandler.
"""

import logging
from typing import Optional

from src.cli.models import ExitCode
from src.cli.output import OutputHandler
from src.confluence_client.api_wrapper import APIWrapper
from src.confluence_client.auth import Authenticator
from src.confluence_client.errors import (
    APIAccessError,
    APIUnreachableError,
    InvalidCredentialsError,
    InvalidPageIdError,
    PageNotFoundError,
)
from src.note_store.errors import NoteStoreError
from src.note_store.frontmatter_handler import FrontmatterHandler
from src.note_store.identifier_store import IdentifierStore
from src.note_store.note_repository import NoteRepository
from src.settings.errors import SettingsError
from src.settings.mapping_store import MappingStore
from src.settings.settings_repository import SettingsRepository

logger = logging.getLogger(__name__)

NO_CONNECTION_MESSAGE = "No confluence connection found for this page! Create a connection first."


class SyncCommand:
    """Pushes a note's content to its connected Confluence page.

    The sync workflow:
        1. Do nothing if no note was given
        2. Load the note and ensure it has a uniqueId
        3. Look up the page ID mapped to that uniqueId
        4. Stop with a notice if the note is not connected
        5. Strip the uniqueId from the note's frontmatter
        6. Replace the page body (GET current version, PUT version + 1)
        7. Report success or failure and return the exit code

    Example:
        >>> settings = SettingsRepository.load()
        >>> sync_cmd = SyncCommand(settings, output_handler=OutputHandler(verbosity=1))
        >>> exit_code = sync_cmd.run("notes/Meeting.md")
    """

    def __init__(
        self,
        settings_repository: SettingsRepository,
        note_repository: Optional[NoteRepository] = None,
        mapping_store: Optional[MappingStore] = None,
        identifier_store: Optional[IdentifierStore] = None,
        api_wrapper: Optional[APIWrapper] = None,
        output_handler: Optional[OutputHandler] = None,
    ):
        """Initialize sync command with dependencies.

        Args:
            settings_repository: Loaded settings (host, token, mapping)
            note_repository: NoteRepository for reading/writing notes (optional)
            mapping_store: MappingStore for uniqueId -> page ID lookups (optional)
            identifier_store: IdentifierStore for uniqueId assignment (optional)
            api_wrapper: APIWrapper for Confluence calls (optional, created on first use)
            output_handler: OutputHandler for terminal output (optional)
        """
        self.settings_repository = settings_repository
        self.note_repository = note_repository or NoteRepository()
        self.mapping_store = mapping_store or MappingStore(settings_repository)
        self.identifier_store = identifier_store or IdentifierStore(
            self.note_repository, self.mapping_store
        )
        self.api_wrapper = api_wrapper
        self.output_handler = output_handler or OutputHandler()

    def _get_api_wrapper(self) -> APIWrapper:
        if self.api_wrapper is None:
            self.api_wrapper = APIWrapper(Authenticator(self.settings_repository))
        return self.api_wrapper

    def run(self, note_path: Optional[str]) -> ExitCode:
        """Sync one note to Confluence.

        Args:
            note_path: Path to the note to sync (None = no active note, nothing to do)

        Returns:
            ExitCode indicating success or specific failure type
        """
        if not note_path:
            logger.debug("No note given, nothing to sync")
            return ExitCode.SUCCESS

        try:
            note = self.note_repository.load(note_path)
            unique_id = self.identifier_store.ensure_unique_id(note)

            page_id = self.mapping_store.get(unique_id)
            if not page_id:
                logger.info(f"No page mapped for {note_path} ({unique_id})")
                self.output_handler.warning(NO_CONNECTION_MESSAGE)
                self.output_handler.info(
                    f"Run 'confluence-note-sync connect {note_path}' to connect it to a page"
                )
                return ExitCode.NOT_CONNECTED

            self.output_handler.print("Syncing to confluence!")
            content = FrontmatterHandler.strip_identifier(note.content)

            logger.info(f"Syncing {note_path} to page {page_id}")
            with self.output_handler.spinner(f"Updating Confluence page {page_id}..."):
                synced = self._get_api_wrapper().replace_document(page_id, content, note.title)

            if synced:
                self.output_handler.success(f"Synced '{note.title}' to Confluence page {page_id}")
                return ExitCode.SUCCESS

            self.output_handler.error(
                f"Sync failed: Confluence rejected the update of page {page_id}"
            )
            return ExitCode.SYNC_FAILED

        except InvalidCredentialsError as e:
            logger.error(f"Authentication failed: {e}")
            self.output_handler.error(f"Authentication failed: {e}")
            self.output_handler.info(
                "Check the Confluence host and personal access token (confluence-note-sync configure)"
            )
            return ExitCode.AUTH_ERROR

        except (PageNotFoundError, InvalidPageIdError) as e:
            logger.error(f"Invalid connection: {e}")
            self.output_handler.error(f"Sync failed: {e}")
            self.output_handler.info(
                f"Fix the connection with 'confluence-note-sync connect {note_path}'"
            )
            return ExitCode.GENERAL_ERROR

        except (APIUnreachableError, APIAccessError) as e:
            logger.error(f"API error: {e}")
            self.output_handler.error(f"Sync failed: {e}")
            self.output_handler.info("Check your network connection and try again")
            return ExitCode.NETWORK_ERROR

        except (NoteStoreError, SettingsError) as e:
            logger.error(f"Local error: {e}")
            self.output_handler.error(f"Error: {e}")
            return ExitCode.GENERAL_ERROR

        except Exception as e:
            logger.exception("Unexpected error during sync")
            self.output_handler.error(f"Unexpected error: {e}")
            return ExitCode.GENERAL_ERROR
