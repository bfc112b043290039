"""Main CLI entry point for confluence-note-sync command.

This module provides the Typer application that serves as the entry point
for the confluence-note-sync command-line tool. Each user action of the
tool is a subcommand: sync a note, connect a note to a page, and edit the
connection settings.
"""

import logging
import sys
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from src.cli.connect_command import ConnectCommand
from src.cli.models import ExitCode
from src.cli.output import OutputHandler
from src.cli.sync_command import SyncCommand
from src.settings.errors import SettingsError
from src.settings.settings_repository import SettingsRepository

VERSION = "0.1.0"

app = typer.Typer(
    name="confluence-note-sync",
    help="""Push Markdown notes to Confluence pages.

QUICK START:
  confluence-note-sync configure --host <url> --token <pat>   # Connection settings
  confluence-note-sync connect <note.md> <page_id>           # Link a note to a page
  confluence-note-sync sync <note.md>                        # Push the note""",
    add_completion=False,
    rich_markup_mode=None,  # Disable Rich markup to avoid compatibility issues
)

# Module logger
logger = logging.getLogger(__name__)

GETTING_STARTED_MESSAGE = """configure --host <url> --token <pat>   # Set Confluence host and personal access token
connect <note.md> [page_id]            # Connect a note to a Confluence page
sync <note.md>                         # Push the note's content to its page
--help                                 # Show all options

Example:
  confluence-note-sync connect notes/Meeting.md 123456
  confluence-note-sync sync notes/Meeting.md"""


@dataclass
class CLIState:
    """Global options shared by all subcommands."""
    settings_path: str
    output: OutputHandler


def _configure_logging(verbosity: int, logdir: Optional[str] = None) -> None:
    """Configure logging based on verbosity level.

    Configures only the 'src' namespace logger to avoid affecting third-party
    libraries. The root logger is left unchanged.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
        logdir: Optional directory for log files (creates timestamped log file)
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:  # verbosity >= 2
        level = logging.DEBUG

    # Configure app-specific logger (not root) to avoid affecting libraries
    app_logger = logging.getLogger("src")
    app_logger.setLevel(level)

    log_format = "%(asctime)s [%(levelname)8s] %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(log_format, datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    app_logger.addHandler(console_handler)

    if logdir:
        log_path = Path(logdir)
        log_path.mkdir(parents=True, exist_ok=True)

        # Timestamped filename in local time
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"confluence-note-sync_{timestamp}.log"

        file_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        file_formatter = logging.Formatter(file_format, datefmt=date_format)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(file_formatter)
        app_logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")


def _load_settings(state: CLIState) -> SettingsRepository:
    """Load the settings file or exit with a readable error."""
    try:
        return SettingsRepository.load(state.settings_path)
    except SettingsError as e:
        logger.error(f"Failed to load settings: {e}")
        state.output.error(f"Failed to load settings: {e}")
        raise typer.Exit(ExitCode.GENERAL_ERROR)


def _mask_token(token: str) -> str:
    if not token:
        return "(not set)"
    if len(token) <= 8:
        return "****"
    return f"****{token[-4:]}"


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    settings_path: str = typer.Option(
        SettingsRepository.DEFAULT_SETTINGS_PATH,
        "--settings",
        help="Path to the settings file",
        metavar="PATH",
    ),
    logdir: Optional[str] = typer.Option(
        None,
        "--logdir",
        help="Directory for log files (creates timestamped log file)",
    ),
    verbosity: int = typer.Option(
        0,
        "--verbosity",
        "-v",
        help="Verbosity level: 0=summary, 1=info, 2=debug",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
    ),
) -> None:
    """Push Markdown notes to Confluence pages.

    \b
    QUICK START:
      confluence-note-sync configure --host <url> --token <pat>
      confluence-note-sync connect <note.md> <page_id>
      confluence-note-sync sync <note.md>

    \b
    NOTE:
      - A note keeps its connection when renamed or moved (it is tracked by
        the uniqueId stored in its frontmatter)
      - CONFLUENCE_HOST and CONFLUENCE_PERSONAL_TOKEN (environment or .env)
        are used when the settings file leaves them empty
    """
    if version:
        typer.echo(f"confluence-note-sync version {VERSION}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        typer.echo(GETTING_STARTED_MESSAGE)
        raise typer.Exit()

    _configure_logging(verbosity, logdir)
    ctx.obj = CLIState(
        settings_path=settings_path,
        output=OutputHandler(verbosity=verbosity, no_color=no_color),
    )


@app.command("sync")
def sync_command(
    ctx: typer.Context,
    note: Optional[str] = typer.Argument(
        None,
        help="Note to sync (the active note)",
        metavar="NOTE",
    ),
) -> None:
    """Sync contents of a note to its Confluence page."""
    state: CLIState = ctx.obj
    settings = _load_settings(state)

    sync_cmd = SyncCommand(settings, output_handler=state.output)
    exit_code = sync_cmd.run(note)

    raise typer.Exit(exit_code)


@app.command("connect")
def connect_command(
    ctx: typer.Context,
    note: Optional[str] = typer.Argument(
        None,
        help="Note to connect (the active note)",
        metavar="NOTE",
    ),
    page: Optional[str] = typer.Argument(
        None,
        help="Confluence page ID or page link (prompted for when omitted)",
        metavar="PAGE",
    ),
) -> None:
    """Create a new Confluence connection for a note."""
    state: CLIState = ctx.obj
    settings = _load_settings(state)

    if note and page is None:
        page = typer.prompt("Confluence page ID or link")

    connect_cmd = ConnectCommand(settings, output_handler=state.output)
    exit_code = connect_cmd.run(note, page)

    raise typer.Exit(exit_code)


@app.command("configure")
def configure_command(
    ctx: typer.Context,
    host: Optional[str] = typer.Option(
        None,
        "--host",
        help="Host URL for Confluence",
        metavar="URL",
    ),
    token: Optional[str] = typer.Option(
        None,
        "--token",
        help="Personal Access Token for Confluence",
        metavar="TOKEN",
    ),
    timeout: Optional[int] = typer.Option(
        None,
        "--timeout",
        min=1,
        help="Request timeout in seconds",
    ),
) -> None:
    """Show or change the Confluence connection settings."""
    state: CLIState = ctx.obj
    output = state.output
    settings = _load_settings(state)

    try:
        if host is not None:
            settings.update(confluence_host=host)
            output.success(f"Confluence host set to {settings.settings.confluence_host or '(empty)'}")
        if token is not None:
            settings.update(personal_access_token=token)
            output.success("Personal access token updated")
        if timeout is not None:
            settings.update(timeout=timeout)
            output.success(f"Request timeout set to {timeout}s")
    except SettingsError as e:
        logger.error(f"Failed to save settings: {e}")
        output.error(f"Failed to save settings: {e}")
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    if host is None and token is None and timeout is None:
        current = settings.settings
        connected = sum(1 for page_id in current.mapping.values() if page_id)
        output.print(f"Settings file:         {settings.settings_path}")
        output.print(f"Confluence host:       {current.confluence_host or '(not set)'}")
        output.print(f"Personal access token: {_mask_token(current.personal_access_token)}")
        output.print(f"Request timeout:       {current.timeout}s")
        output.print(f"Connected notes:       {connected} of {len(current.mapping)}")

    raise typer.Exit(ExitCode.SUCCESS)


def main() -> None:
    """Main entry point for the CLI application.

    This function is called when the module is executed directly or
    when the console script is invoked.
    """
    app()


# Allow running as: python -m src.cli.main
if __name__ == "__main__":
    main()
