"""Data models for CLI operations."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for CLI operations.

    These exit codes provide meaningful feedback about the operation result:
    - SUCCESS (0): Operation completed successfully (or nothing to do)
    - GENERAL_ERROR (1): General error (note or settings issues, bad page ID)
    - AUTH_ERROR (3): Authentication or authorization failure
    - NETWORK_ERROR (4): Network connectivity or API availability issues
    - NOT_CONNECTED (5): The note has no Confluence connection yet
    - SYNC_FAILED (6): Confluence rejected the page update

    Example:
        >>> exit_code = ExitCode.SUCCESS
        >>> sys.exit(exit_code)
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    AUTH_ERROR = 3
    NETWORK_ERROR = 4
    NOT_CONNECTED = 5
    SYNC_FAILED = 6
