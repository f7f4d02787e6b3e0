"""Shared data types for filestore."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = ["EntryKind", "PathInfo"]


class EntryKind(str, Enum):
    """What a path currently refers to."""

    FILE = "file"
    DIRECTORY = "directory"
    LINK = "link"
    OTHER = "other"
    MISSING = "missing"


@dataclass(frozen=True)
class PathInfo:
    """Point-in-time snapshot of a path.

    Attributes:
        path: The path as given by the caller.
        kind: Entry kind at snapshot time.
        exists: True if the path resolves to an existing entry.
        readable: True if the current process may read it.
        writable: True if the current process may write it.
        size: Byte count (recursive for directories, 0 when missing).
    """

    path: str
    kind: EntryKind
    exists: bool
    readable: bool
    writable: bool
    size: int

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.size < 0:
            raise ValueError("size cannot be negative")
        if self.kind is EntryKind.MISSING and self.exists:
            raise ValueError("kind=MISSING but exists=True")
