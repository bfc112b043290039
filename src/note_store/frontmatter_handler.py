"""YAML frontmatter parsing and generation for markdown notes.

This module reads and writes the YAML frontmatter block at the top of a
note. The block carries the note's uniqueId, the stable key that links a
note to its Confluence page regardless of the file's name or location.

Parsing and serialization are a matched pair: splitting a note yields the
frontmatter dict and the text after the closing delimiter, and joining
them back reproduces the note. The newline that follows the closing
delimiter belongs to the remainder, so removing a block leaves the rest
of the note byte-for-byte unchanged.
"""

from typing import Any, Dict, Optional, Tuple
import re
import yaml

from .errors import FrontmatterError


class FrontmatterHandler:
    """Handles YAML frontmatter operations for markdown notes.

    Frontmatter format:
        ---
        uniqueId: 0b6f3f7e-5c1a-4a55-9d7b-3f1f2e0f9c11
        tags: [work]
        ---
        # Note body

    Only a block at the very start of the note is recognized. Fields other
    than uniqueId belong to the user and are always preserved.
    """

    UNIQUE_ID_KEY = 'uniqueId'

    # Opening delimiter on the first line, closing delimiter on its own line
    FRONTMATTER_PATTERN = re.compile(
        r'\A---[ \t]*\r?\n(.*?)^---[ \t]*(?=\r?$)',
        re.DOTALL | re.MULTILINE
    )

    # Maximum allowed depth for YAML structures to prevent DoS attacks
    MAX_YAML_DEPTH = 10

    @classmethod
    def _validate_yaml_depth(cls, obj, current_depth: int = 0, max_depth: int = MAX_YAML_DEPTH) -> None:
        """Validate that YAML structure depth doesn't exceed maximum.

        Prevents YAML bomb DoS attacks from deeply nested structures.

        Raises:
            FrontmatterError: If depth exceeds maximum
        """
        if current_depth > max_depth:
            raise FrontmatterError(
                "<yaml>",
                f"YAML structure exceeds maximum depth of {max_depth}. "
                f"This may indicate a YAML bomb attack or overly complex frontmatter."
            )

        if isinstance(obj, dict):
            for value in obj.values():
                cls._validate_yaml_depth(value, current_depth + 1, max_depth)
        elif isinstance(obj, list):
            for item in obj:
                cls._validate_yaml_depth(item, current_depth + 1, max_depth)

    @classmethod
    def split(cls, content: str, file_path: str = "<unknown>") -> Tuple[Optional[Dict[str, Any]], str]:
        """Split a note into its frontmatter dict and the remaining text.

        Args:
            content: Full note text
            file_path: Path used in error messages

        Returns:
            Tuple of (frontmatter_dict, remainder). frontmatter_dict is None
            when the note has no frontmatter block; remainder then is the
            whole content.

        Raises:
            FrontmatterError: If the block holds invalid YAML or is not a dictionary
        """
        match = cls.FRONTMATTER_PATTERN.match(content)
        if not match:
            return None, content

        frontmatter_str = match.group(1)
        remainder = content[match.end():]

        try:
            frontmatter = yaml.safe_load(frontmatter_str)
        except yaml.YAMLError as e:
            raise FrontmatterError(
                file_path,
                f"Invalid YAML syntax: {str(e)}"
            )

        if frontmatter is None:
            frontmatter = {}

        if not isinstance(frontmatter, dict):
            raise FrontmatterError(
                file_path,
                f"Frontmatter must be a YAML dictionary, got {type(frontmatter).__name__}"
            )

        try:
            cls._validate_yaml_depth(frontmatter)
        except FrontmatterError as e:
            # Re-raise with correct file path
            raise FrontmatterError(file_path, e.message)

        return frontmatter, remainder

    @classmethod
    def join(cls, frontmatter: Dict[str, Any], remainder: str) -> str:
        """Serialize a frontmatter dict in front of the remaining note text.

        Args:
            frontmatter: Fields to write; an empty dict writes no block
            remainder: Text following the block, as returned by split()

        Returns:
            Full note text
        """
        if not frontmatter:
            return remainder

        yaml_str = yaml.safe_dump(
            frontmatter,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False
        )
        return f"---\n{yaml_str}---{remainder}"

    @classmethod
    def get_unique_id(cls, content: str, file_path: str = "<unknown>") -> Optional[str]:
        """Return the uniqueId stored in the note's frontmatter.

        Returns:
            The uniqueId as a string, or None if absent or empty

        Raises:
            FrontmatterError: If the frontmatter block is malformed
        """
        frontmatter, _ = cls.split(content, file_path)
        if not frontmatter:
            return None

        unique_id = frontmatter.get(cls.UNIQUE_ID_KEY)
        if unique_id is None or str(unique_id).strip() == "":
            return None
        return str(unique_id).strip()

    @classmethod
    def set_field(cls, content: str, key: str, value: Any, file_path: str = "<unknown>") -> str:
        """Set one frontmatter field, creating the block if needed.

        Existing fields keep their order; a new key is appended.

        Raises:
            FrontmatterError: If the existing block is malformed (it is never
                overwritten blindly)
        """
        frontmatter, remainder = cls.split(content, file_path)

        if frontmatter is None:
            # New block goes above the untouched note text
            frontmatter = {}
            remainder = f"\n{content}"

        frontmatter[key] = value
        return cls.join(frontmatter, remainder)

    @classmethod
    def strip_identifier(cls, content: str) -> str:
        """Remove the uniqueId from a note's text before it is pushed.

        When uniqueId is the only field, the whole block is dropped and the
        text after the closing delimiter is returned as is. Other fields are
        kept in a re-serialized block. Notes without a block, without a
        uniqueId, or with malformed frontmatter are returned unchanged.

        Example:
            >>> FrontmatterHandler.strip_identifier("---\\nuniqueId: abc123\\n---\\n# Title\\nbody")
            '\\n# Title\\nbody'
        """
        try:
            frontmatter, remainder = cls.split(content)
        except FrontmatterError:
            return content

        if frontmatter is None or cls.UNIQUE_ID_KEY not in frontmatter:
            return content

        frontmatter.pop(cls.UNIQUE_ID_KEY)
        return cls.join(frontmatter, remainder)
