"""Line-level access to note files on the filesystem."""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from collections.abc import Callable
from pathlib import Path

logger = logging.getLogger(__name__)

LineTransform = Callable[[str], str]


def _split_ending(line: str) -> tuple[str, str]:
    """Split a line into its content and its original line ending."""
    for ending in ("\r\n", "\n"):
        if line.endswith(ending):
            return line[: -len(ending)], ending
    return line, ""


def split_lines(content: str) -> list[str]:
    """Split text on "\\n" only, keeping endings.

    Numbering matches ripgrep: form feeds, U+2028 and other characters that
    ``str.splitlines`` treats as breaks stay inside their line.
    """
    lines = [f"{line}\n" for line in content.split("\n")]
    last = lines.pop()[:-1]
    if last:
        lines.append(last)
    return lines


class NoteRepository:
    """
    Repository for markdown notes that are edited in place.

    Files are shared with external editors. Nothing is locked; a rewrite goes
    through a temporary file in the same directory followed by an atomic
    rename, so readers never observe a truncated note. A concurrent external
    write between our read and our rename is lost.
    """

    ENCODING = "utf-8"

    def read_lines(self, path: Path) -> list[str]:
        """Read a note as lines with their endings preserved."""
        with path.open(encoding=self.ENCODING, newline="") as f:
            return split_lines(f.read())

    def apply_line_transform(
        self, path: Path, line_number: int, transform: LineTransform
    ) -> bool:
        """
        Rewrite a single line of a note.

        Args:
            path: The note file
            line_number: 1-based line to replace
            transform: Pure function from the line's text (without its line
                ending) to the replacement text

        Returns True if the file now holds the transformed line. On any
        failure the file is left untouched and False is returned.
        """
        try:
            lines = self.read_lines(path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read %s: %s", path, e)
            return False

        if line_number < 1 or line_number > len(lines):
            logger.warning(
                "Line %d out of range for %s (%d lines)", line_number, path, len(lines)
            )
            return False

        index = line_number - 1
        content, ending = _split_ending(lines[index])
        try:
            updated = transform(content)
        except Exception:
            logger.warning(
                "Transform failed for %s:%d, line left unchanged",
                path,
                line_number,
                exc_info=True,
            )
            return False

        if updated == content:
            logger.debug("No change for %s:%d", path, line_number)
            return True

        lines[index] = updated + ending
        try:
            self._write_atomic(path, "".join(lines))
        except OSError as e:
            logger.warning("Could not write %s: %s", path, e)
            return False

        logger.debug("Rewrote %s:%d", path, line_number)
        return True

    def _write_atomic(self, path: Path, content: str) -> None:
        """Write content to a sibling temp file and rename it over path."""
        fd, temp_name = tempfile.mkstemp(
            dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
        )
        temp_path = Path(temp_name)
        try:
            with os.fdopen(fd, "w", encoding=self.ENCODING, newline="") as f:
                f.write(content)
            shutil.copymode(path, temp_path)
            os.replace(temp_path, path)
        except BaseException:
            temp_path.unlink(missing_ok=True)
            raise
