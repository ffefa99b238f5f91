"""
Atomic file writer for schema documents.

Ensures that file writes are atomic to prevent data corruption
from interrupted operations.
"""

from __future__ import annotations

import json
import logging
import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import Any

from ..checker import check_schema
from ..errors import InvalidSchemaError

logger = logging.getLogger(__name__)


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file

    This ensures that an interrupted write operation never leaves
    the target file in an incomplete state.
    """

    def __init__(self, validate_schema: Callable[[dict[str, Any]], None] | None = None):
        """Initialize the atomic writer.

        Args:
            validate_schema: Optional validation function for the decoded document
        """
        self._validate_schema = validate_schema or check_schema

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: JSON text to write
            validate: Whether to validate before finalizing

        Raises:
            InvalidSchemaError: If validation fails
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
                self._validate_content(content)

            temp_path.replace(path)
            logger.debug("Wrote %s", path)

        except Exception:
            if temp_path.exists():
                try:
                    temp_path.unlink()
                except OSError:
                    logger.warning("Could not remove temporary file %s", temp_path)
            raise

    def write_if_not_exists(self, path: Path, content: str, validate: bool = True) -> bool:
        """Write content only if the file doesn't exist.

        Args:
            path: Target file path
            content: JSON text to write
            validate: Whether to validate before finalizing

        Returns:
            True once the file is written

        Raises:
            FileExistsError: If the file already exists
            InvalidSchemaError: If validation fails
        """
        if path.exists():
            raise FileExistsError(f"Output file already exists: {path}. Use force mode to overwrite.")

        self.write(path, content, validate)
        return True

    def _validate_content(self, content: str) -> None:
        """Decode the JSON text and run the schema validation on it.

        Raises:
            InvalidSchemaError: If the text is not JSON or the document is rejected
        """
        try:
            document = json.loads(content)
        except json.JSONDecodeError as e:
            raise InvalidSchemaError(f"Output is not valid JSON: {e}") from e

        self._validate_schema(document)
