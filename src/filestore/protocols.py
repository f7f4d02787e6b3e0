"""Protocol definitions for the store abstraction.

Callers type against FileStoreProtocol rather than the concrete FileStore,
so test doubles can be substituted without inheritance. FileStore satisfies
the protocol structurally (duck typing).
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from filestore.types import EntryKind, PathInfo


@runtime_checkable
class FileStoreProtocol(Protocol):
    """Protocol for filesystem store operations.

    Content operations split failures two ways: invalid calls raise a
    FileStoreError, while write/append/prepend report a failed attempt by
    returning False.
    """

    def read(self, path: str | os.PathLike[str], lock: bool = False) -> str:
        """Read a file's content as text.

        Args:
            path: Path to the file.
            lock: Hold a shared advisory lock while reading.

        Returns:
            File content, "" if nothing was read.

        Raises:
            NotFoundError: If the path does not exist.
            NotAFileError: If the path is not a regular file.
        """
        ...

    def read_bytes(self, path: str | os.PathLike[str], lock: bool = False) -> bytes:
        """Read a file's content as bytes."""
        ...

    def write(
        self, path: str | os.PathLike[str], content: str | bytes, lock: bool = False
    ) -> bool:
        """Replace a file's content.

        Args:
            path: Path to the file.
            content: Content to write.
            lock: Hold an exclusive advisory lock while writing.

        Returns:
            True on success, False if the write failed.
        """
        ...

    def append(
        self, path: str | os.PathLike[str], content: str | bytes, lock: bool = False
    ) -> bool:
        """Append content to a file."""
        ...

    def prepend(
        self, path: str | os.PathLike[str], content: str | bytes, lock: bool = False
    ) -> bool:
        """Insert content at the start of a file."""
        ...

    def list_dir(
        self,
        path: str | os.PathLike[str],
        only_files: bool = False,
        extensions: str | Iterable[str] | None = None,
    ) -> list[str]:
        """List entry names of a directory.

        Args:
            path: Directory to list.
            only_files: Skip directory entries.
            extensions: Extensions to keep when listing only files.

        Returns:
            Entry base names in iteration order.

        Raises:
            NotADirError: If the path is not a directory.
        """
        ...

    def exists(self, path: str | os.PathLike[str]) -> bool:
        """Check if a path exists."""
        ...

    def is_file(self, path: str | os.PathLike[str]) -> bool:
        """Check if a path is a regular file."""
        ...

    def is_link(self, path: str | os.PathLike[str]) -> bool:
        """Check if a path is a symbolic link."""
        ...

    def is_dir(self, path: str | os.PathLike[str]) -> bool:
        """Check if a path is a directory."""
        ...

    def is_readable(self, path: str | os.PathLike[str]) -> bool:
        """Check if a path is readable."""
        ...

    def is_writable(self, path: str | os.PathLike[str]) -> bool:
        """Check if a path is writable."""
        ...

    def kind(self, path: str | os.PathLike[str]) -> EntryKind:
        """Classify what a path refers to."""
        ...

    def info(self, path: str | os.PathLike[str]) -> PathInfo:
        """Snapshot a path's kind, access and size."""
        ...

    def size(self, path: str | os.PathLike[str]) -> int:
        """Get the recursive byte size of a path, 0 if missing."""
        ...

    def remove(self, path: str | os.PathLike[str], recursive: bool = True) -> None:
        """Remove a file or directory tree.

        Args:
            path: Path to remove.
            recursive: Allow removing non-empty directories.

        Raises:
            NotFoundError: If the path does not exist.
            DirectoryNotEmptyError: If not recursive and the directory has entries.
            DirectoryRemoveError: If the directory itself cannot be removed.
            FileRemoveError: If a file cannot be removed.
        """
        ...

    def mkdir(
        self, path: str | os.PathLike[str], mode: int = 0o777, recursive: bool = True
    ) -> None:
        """Create a directory, doing nothing if it already exists.

        Raises:
            MkdirError: If the directory cannot be created.
        """
        ...
