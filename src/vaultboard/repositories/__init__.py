"""Repository layer for data access."""

from .notes import LineTransform, NoteRepository
from .protocol import LineMatch, LineMatcherProtocol, LineMatcherUnavailable
from .ripgrep import RipgrepMatcher

__all__ = [
    "LineMatch",
    "LineMatcherProtocol",
    "LineMatcherUnavailable",
    "LineTransform",
    "NoteRepository",
    "RipgrepMatcher",
]
