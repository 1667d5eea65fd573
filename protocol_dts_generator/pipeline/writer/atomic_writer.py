"""
Atomic file writer for generated declaration files.

Ensures that file writes are atomic so that an interrupted run never
leaves a half-written declaration file behind.
"""

from __future__ import annotations

import os
import stat
import tempfile
from collections.abc import Callable
from pathlib import Path

from ..errors import GenerationError


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def __init__(self, validate: Callable[[str], None] | None = None):
        """Initialize the atomic writer.

        Args:
            validate: Optional validation function for declaration text
        """
        self._validate = validate or validate_declarations

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Raises:
            GenerationError: If validation fails
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
            with open(temp_fd, "w", encoding="utf-8", newline="") as f:
                f.write(content)

            if validate:
                self._validate(content)

            # mkstemp creates the file owner-only
            os.chmod(temp_path, _target_mode(path))
            temp_path.replace(path)

        except Exception:
            temp_path.unlink(missing_ok=True)
            raise


def _target_mode(path: Path) -> int:
    """Mode of the existing target, or the mode a newly created file gets under the current umask."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_plain(path: Path, content: str) -> None:
    """Write content directly, without a temporary file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)


def validate_declarations(content: str) -> None:
    """Default validation of declaration text.

    Raises:
        GenerationError: If braces are unbalanced or the module has no default export
    """
    # Descriptions are free text, only count braces outside comment blocks
    code_lines = [line for line in content.splitlines() if not line.lstrip().startswith(("/*", "*"))]
    open_braces = sum(line.count("{") for line in code_lines)
    close_braces = sum(line.count("}") for line in code_lines)
    if open_braces != close_braces:
        raise GenerationError(f"Generated declarations have unbalanced braces: {open_braces} open, {close_braces} close")

    if "export default " not in content:
        raise GenerationError("Generated declarations are missing a default export")
