"""
Atomic file writer for generated Java units.

Ensures that file writes are atomic to prevent half-written units
from interrupted operations.
"""

from __future__ import annotations

import logging
import re
import tempfile
from collections.abc import Callable
from pathlib import Path

from ..errors import GeneratedCodeError

logger = logging.getLogger(__name__)

# String/char literals and line comments, which may hold unbalanced braces
_NON_CODE = re.compile(r'"(?:\\.|[^"\\])*"|\'(?:\\.|[^\'\\])*\'|//[^\n]*')
_TYPE_DECLARATION = re.compile(r"\b(class|enum|interface)\s+\w+")


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file

    This ensures that an interrupted write operation never leaves
    the target file in an incomplete state.
    """

    def __init__(self, validate_java: Callable[[str], None] | None = None):
        """Initialize the atomic writer.

        Args:
            validate_java: Optional validation function for Java code
        """
        self._validate_java = validate_java or self._default_validate_java

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Raises:
            GeneratedCodeError: If validation fails
            OSError: If file operations fail
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )
        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)

            if validate:
                self.validate(content)

            temp_path.replace(path)
            logger.debug(f"Wrote {path}")

        except BaseException:
            temp_path.unlink(missing_ok=True)
            raise

    def write_if_not_exists(self, path: Path, content: str, validate: bool = True) -> bool:
        """Write content only if the file doesn't exist.

        Returns:
            True once the file is written

        Raises:
            FileExistsError: If the file already exists
            GeneratedCodeError: If validation fails
        """
        if path.exists():
            raise FileExistsError(f"Output file already exists: {path}. Use force mode to overwrite.")

        self.write(path, content, validate)
        return True

    def validate(self, content: str) -> None:
        """Run the configured Java validation on content.

        Raises:
            GeneratedCodeError: If validation fails
        """
        self._validate_java(content)

    @staticmethod
    def _default_validate_java(content: str) -> None:
        """Structural check of a generated Java unit.

        Raises:
            GeneratedCodeError: If the unit has no type declaration or unbalanced braces
        """
        code = _NON_CODE.sub("", content)

        if not _TYPE_DECLARATION.search(code):
            raise GeneratedCodeError("Generated Java code has no type definitions")

        open_braces = code.count("{")
        close_braces = code.count("}")
        if open_braces != close_braces:
            raise GeneratedCodeError(f"Generated Java code has unbalanced braces: {open_braces} open, {close_braces} close")
