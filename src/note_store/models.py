"""Data models for local notes."""

import os
from dataclasses import dataclass


@dataclass
class Note:
    """A Markdown note in the local vault.

    The note is owned by the user; this tool only rewrites its front-matter
    block to store the uniqueId.

    Attributes:
        file_path: Path to the markdown file
        content: Full file text, including any front-matter block
    """
    file_path: str
    content: str = ""

    @property
    def title(self) -> str:
        """File name without directory or extension; used as the page title."""
        return os.path.splitext(os.path.basename(self.file_path))[0]
