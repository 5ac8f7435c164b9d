"""Line matcher protocol for locating candidate task lines."""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


@dataclass(frozen=True)
class LineMatch:
    """One matching line reported by a line matcher."""

    relative_path: str
    line_number: int  # 1-based
    text: str


class LineMatcherUnavailable(Exception):
    """The line matcher cannot run at all (e.g. its executable is missing)."""


class LineMatcherProtocol(Protocol):
    """Interface for full-text line search backends.

    Implementations search every file under ``root`` for lines matching
    ``pattern`` while skipping paths matched by ``exclude_globs``. Results are
    produced lazily and in no particular order; each call starts a fresh
    search.
    """

    def search(
        self,
        root: Path,
        pattern: str,
        exclude_globs: Sequence[str] = (),
    ) -> Iterator[LineMatch]:
        """Yield matches for a single regular expression.

        Raises:
            LineMatcherUnavailable: If the search cannot be started.
        """
        ...
