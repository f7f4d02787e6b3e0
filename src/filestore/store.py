"""Filesystem access facade.

FileStore exposes read/write/append/prepend, directory listing, type
predicates, recursive size and removal, and directory creation. It keeps
no state between calls: every operation queries the filesystem afresh.
"""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterable
from pathlib import Path, PurePath
from typing import TYPE_CHECKING

from filestore import locking
from filestore.errors import (
    DecodeError,
    DirectoryNotEmptyError,
    DirectoryRemoveError,
    FileRemoveError,
    MkdirError,
    NotADirError,
    NotAFileError,
    NotFoundError,
)
from filestore.types import EntryKind, PathInfo

if TYPE_CHECKING:
    from filestore.config import StoreSettings

logger = logging.getLogger(__name__)

StrPath = str | os.PathLike[str]


class FileStore:
    """Production filesystem store.

    Satisfies the FileStoreProtocol structurally. The only attribute is the
    text encoding used to convert between str content and bytes on disk.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        """Initialize the store.

        Args:
            encoding: Codec for str content. Defaults to utf-8.

        Note:
            Prefer using factory methods `create()` or `from_settings()` for construction.
        """
        self.encoding = encoding

    @classmethod
    def create(cls, encoding: str = "utf-8") -> FileStore:
        """Create a store with the given text encoding."""
        return cls(encoding=encoding)

    @classmethod
    def from_settings(cls, settings: StoreSettings) -> FileStore:
        """Create a store from loaded settings.

        Args:
            settings: Validated store settings.

        Returns:
            Configured FileStore instance.
        """
        return cls(encoding=settings.encoding)

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------

    def read(self, path: StrPath, lock: bool = False) -> str:
        """Read a file's entire content as text.

        Args:
            path: Path to an existing regular file.
            lock: Hold a shared advisory lock while reading.

        Returns:
            Decoded content, or "" when the read produced nothing.

        Raises:
            NotFoundError: If the path does not exist.
            NotAFileError: If the path is not a regular file.
            DecodeError: If the content is not valid in the store encoding.
        """
        content = self.read_bytes(path, lock)
        if not content:
            return ""
        try:
            return content.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise DecodeError(path, f"Cannot decode content as {self.encoding}") from e

    def read_bytes(self, path: StrPath, lock: bool = False) -> bytes:
        """Read a file's entire content as bytes.

        Same checks and locking as `read`, without decoding.
        """
        if not self.exists(path):
            raise NotFoundError(path)
        if not self.is_file(path):
            raise NotAFileError(path)

        content = b""
        if lock:
            with open(path, "rb") as f, locking.held(f):
                # Size is taken under the lock so a concurrent writer cannot
                # change it between the size check and the read.
                size = os.fstat(f.fileno()).st_size
                content = f.read(size or 1)
        else:
            content = Path(path).read_bytes()
        return content or b""

    def write(self, path: StrPath, content: str | bytes, lock: bool = False) -> bool:
        """Replace a file's content, creating the file if needed.

        Args:
            path: Target file path.
            content: New content.
            lock: Hold an exclusive advisory lock while writing.

        Returns:
            True on success, False if the write failed.
        """
        data = self._encode(content)
        try:
            if lock:
                # Truncate only once the lock is held.
                with open(path, "ab") as f, locking.held(f, exclusive=True):
                    f.truncate(0)
                    f.write(data)
                    f.flush()
            else:
                Path(path).write_bytes(data)
        except OSError as e:
            logger.warning("Write to %s failed: %s", os.fspath(path), e)
            return False
        return True

    def append(self, path: StrPath, content: str | bytes, lock: bool = False) -> bool:
        """Append content at the end of a file, creating it if needed.

        Args:
            path: Target file path.
            content: Content to append.
            lock: Hold an exclusive advisory lock while appending.

        Returns:
            True on success, False if the write failed.
        """
        data = self._encode(content)
        try:
            with open(path, "ab") as f:
                if lock:
                    with locking.held(f, exclusive=True):
                        f.write(data)
                        f.flush()
                else:
                    f.write(data)
        except OSError as e:
            logger.warning("Append to %s failed: %s", os.fspath(path), e)
            return False
        return True

    def prepend(self, path: StrPath, content: str | bytes, lock: bool = False) -> bool:
        """Insert content at the start of a file, creating it if needed.

        The existing content is read and rewritten in two separate calls,
        each holding its own lock when `lock` is set. A writer running
        between the two calls can have its changes overwritten.

        Args:
            path: Target file path.
            content: Content to insert.
            lock: Lock each of the read and write calls.

        Returns:
            True on success, False if the write failed.

        Raises:
            NotAFileError: If the path exists but is not a regular file.
        """
        if self.exists(path):
            try:
                existing = self.read_bytes(path, lock)
            except OSError as e:
                logger.warning("Prepend to %s failed reading: %s", os.fspath(path), e)
                return False
            return self.write(path, self._encode(content) + existing, lock)
        return self.write(path, content, lock)

    # ------------------------------------------------------------------
    # Listing and predicates
    # ------------------------------------------------------------------

    def list_dir(
        self,
        path: StrPath,
        only_files: bool = False,
        extensions: str | Iterable[str] | None = None,
    ) -> list[str]:
        """List the immediate entries of a directory.

        Order follows directory iteration and is not sorted.

        Args:
            path: Directory to list.
            only_files: Skip directory entries.
            extensions: Extension or extensions (without the dot) to keep.
                Only applied when `only_files` is set.

        Returns:
            Entry base names.

        Raises:
            NotADirError: If the path is not a directory.
        """
        if not self.is_dir(path):
            raise NotADirError(path)
        if isinstance(extensions, str):
            extensions = {extensions}
        elif extensions is not None:
            extensions = set(extensions)

        names = []
        with os.scandir(path) as entries:
            for entry in entries:
                if only_files:
                    if entry.is_dir():
                        continue
                    if extensions is not None and _extension(entry.name) not in extensions:
                        continue
                names.append(entry.name)
        return names

    def exists(self, path: StrPath) -> bool:
        """Check if a path exists (dangling links do not)."""
        return os.path.exists(path)

    def is_file(self, path: StrPath) -> bool:
        """Check if a path is a regular file, following links."""
        return os.path.isfile(path)

    def is_link(self, path: StrPath) -> bool:
        """Check if a path is a symbolic link."""
        return os.path.islink(path)

    def is_dir(self, path: StrPath) -> bool:
        """Check if a path is a directory, following links."""
        return os.path.isdir(path)

    def is_readable(self, path: StrPath) -> bool:
        """Check if a path exists and is readable by this process."""
        return os.access(path, os.R_OK)

    def is_writable(self, path: StrPath) -> bool:
        """Check if a path exists and is writable by this process."""
        return os.access(path, os.W_OK)

    def kind(self, path: StrPath) -> EntryKind:
        """Classify what a path currently refers to."""
        try:
            mode = os.lstat(path).st_mode
        except (OSError, ValueError):
            return EntryKind.MISSING
        if stat.S_ISLNK(mode):
            return EntryKind.LINK
        if stat.S_ISDIR(mode):
            return EntryKind.DIRECTORY
        if stat.S_ISREG(mode):
            return EntryKind.FILE
        return EntryKind.OTHER

    def info(self, path: StrPath) -> PathInfo:
        """Take a snapshot of a path's kind, access and size."""
        return PathInfo(
            path=os.fspath(path),
            kind=self.kind(path),
            exists=self.exists(path),
            readable=self.is_readable(path),
            writable=self.is_writable(path),
            size=self.size(path),
        )

    # ------------------------------------------------------------------
    # Tree operations
    # ------------------------------------------------------------------

    def size(self, path: StrPath) -> int:
        """Get the byte size of a file, or the recursive total of a directory.

        Entries that are neither files nor directories count as 0, as do
        a path that does not exist and a directory that cannot be listed.
        """
        if self.is_dir(path):
            total = 0
            try:
                names = self.list_dir(path)
            except OSError as e:
                logger.debug("Cannot list %s, counting as 0: %s", os.fspath(path), e)
                return 0
            for name in names:
                total += self.size(os.path.join(path, name))
            return total
        if self.is_file(path):
            return os.path.getsize(path)
        return 0

    def remove(self, path: StrPath, recursive: bool = True) -> None:
        """Remove a file or a directory tree.

        Symbolic links are removed as links; their targets are untouched.

        Args:
            path: Path to remove.
            recursive: Allow removing a non-empty directory with its contents.

        Raises:
            NotFoundError: If the path does not exist.
            DirectoryNotEmptyError: If `recursive` is False and the directory has entries.
            DirectoryRemoveError: If the emptied directory cannot be removed.
            FileRemoveError: If a file cannot be removed.
        """
        # lexists: a dangling link is removable even though exists() is False.
        if not os.path.lexists(path):
            raise NotFoundError(path)

        if self.is_dir(path) and not self.is_link(path):
            names = self.list_dir(path)
            if not recursive and names:
                raise DirectoryNotEmptyError(path)
            for name in reversed(names):
                self.remove(os.path.join(path, name))
            try:
                os.rmdir(path)
            except OSError as e:
                raise DirectoryRemoveError(path) from e
            logger.debug("Removed directory %s", os.fspath(path))
        else:
            try:
                os.unlink(path)
            except OSError as e:
                raise FileRemoveError(path) from e
            logger.debug("Removed file %s", os.fspath(path))

    def mkdir(self, path: StrPath, mode: int = 0o777, recursive: bool = True) -> None:
        """Create a directory.

        Does nothing if the directory already exists.

        Args:
            path: Directory to create.
            mode: Permission bits, subject to the process umask.
            recursive: Create missing parent directories too.

        Raises:
            MkdirError: If the directory cannot be created.
        """
        if self.is_dir(path):
            return
        try:
            if recursive:
                os.makedirs(path, mode)
            else:
                os.mkdir(path, mode)
        except OSError as e:
            raise MkdirError(path) from e

    def _encode(self, content: str | bytes) -> bytes:
        if isinstance(content, bytes):
            return content
        return content.encode(self.encoding)


def _extension(name: str) -> str:
    """Extension of an entry name without the leading dot."""
    return PurePath(name).suffix[1:]
