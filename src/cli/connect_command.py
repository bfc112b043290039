"""ConnectCommand for linking a note to a Confluence page.

This module implements the connect command: it makes sure the note has a
uniqueId and records the Confluence page ID the user entered for it. The
page itself is not contacted; a wrong ID surfaces on the next sync.
"""

import logging
import re
from typing import Optional

from src.cli.errors import ConnectionInputError
from src.cli.models import ExitCode
from src.cli.output import OutputHandler
from src.note_store.errors import NoteStoreError
from src.note_store.identifier_store import IdentifierStore
from src.note_store.note_repository import NoteRepository
from src.settings.errors import SettingsError
from src.settings.mapping_store import MappingStore
from src.settings.settings_repository import SettingsRepository

logger = logging.getLogger(__name__)


class ConnectCommand:
    """Binds a note's uniqueId to a Confluence page ID.

    Example:
        >>> connect = ConnectCommand(SettingsRepository.load())
        >>> connect.run("notes/Meeting.md", "12345")
    """

    # Page URLs: .../pages/PAGE_ID[/title] and .../viewpage.action?pageId=PAGE_ID
    URL_WITH_PAGE_PATH = re.compile(r'^https?://\S*?/pages/(\d+)(?:[/?#]\S*)?$')
    URL_WITH_PAGE_PARAM = re.compile(r'^https?://\S*?[?&]pageId=(\d+)(?:[&#]\S*)?$')

    def __init__(
        self,
        settings_repository: SettingsRepository,
        note_repository: Optional[NoteRepository] = None,
        mapping_store: Optional[MappingStore] = None,
        identifier_store: Optional[IdentifierStore] = None,
        output_handler: Optional[OutputHandler] = None,
    ):
        self.settings_repository = settings_repository
        self.note_repository = note_repository or NoteRepository()
        self.mapping_store = mapping_store or MappingStore(settings_repository)
        self.identifier_store = identifier_store or IdentifierStore(
            self.note_repository, self.mapping_store
        )
        self.output_handler = output_handler or OutputHandler()

    @classmethod
    def parse_page_reference(cls, page_ref: Optional[str]) -> str:
        """Turn the user's input into the value stored in the mapping.

        A Confluence page URL is reduced to its numeric page ID. Anything
        else is kept as entered (surrounding whitespace removed).

        Raises:
            ConnectionInputError: If the input is empty
        """
        value = (page_ref or "").strip()
        if not value:
            raise ConnectionInputError()

        for pattern in (cls.URL_WITH_PAGE_PATH, cls.URL_WITH_PAGE_PARAM):
            match = pattern.match(value)
            if match:
                return match.group(1)
        return value

    def run(self, note_path: Optional[str], page_ref: Optional[str]) -> ExitCode:
        """Connect a note to a Confluence page.

        Args:
            note_path: Path to the note (None = no active note, nothing to do)
            page_ref: Page ID or page URL entered by the user

        Returns:
            ExitCode indicating success or failure
        """
        if not note_path:
            logger.debug("No note given, nothing to connect")
            return ExitCode.SUCCESS

        try:
            page_id = self.parse_page_reference(page_ref)

            note = self.note_repository.load(note_path)
            unique_id = self.identifier_store.ensure_unique_id(note)

            previous = self.mapping_store.get(unique_id)
            self.mapping_store.set(unique_id, page_id)

            if previous and previous != page_id:
                self.output_handler.info(f"Replaced previous connection to page {previous}")
            self.output_handler.success(f"Connected '{note.title}' to Confluence page {page_id}")
            self.output_handler.debug(f"uniqueId: {unique_id}")
            return ExitCode.SUCCESS

        except ConnectionInputError as e:
            self.output_handler.error(str(e))
            return ExitCode.GENERAL_ERROR

        except (NoteStoreError, SettingsError) as e:
            logger.error(f"Connect failed: {e}")
            self.output_handler.error(f"Error: {e}")
            return ExitCode.GENERAL_ERROR

        except Exception as e:
            logger.exception("Unexpected error during connect")
            self.output_handler.error(f"Unexpected error: {e}")
            return ExitCode.GENERAL_ERROR
