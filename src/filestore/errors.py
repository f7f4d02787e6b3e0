"""Error taxonomy for filestore operations.

Every error raised by the store derives from FileStoreError and records
the path it was raised for. Operations that report failure through a
boolean return (write, append, prepend) never raise these.
"""

from __future__ import annotations

import os

__all__ = [
    "ConfigError",
    "DecodeError",
    "DirectoryNotEmptyError",
    "DirectoryRemoveError",
    "FileRemoveError",
    "FileStoreError",
    "MkdirError",
    "NotADirError",
    "NotAFileError",
    "NotFoundError",
]


class FileStoreError(Exception):
    """Base error for filestore operations."""

    message = "Filesystem operation failed"

    def __init__(self, path: str | os.PathLike[str], message: str | None = None) -> None:
        self.path = os.fspath(path)
        super().__init__(f"{message or self.message}: {self.path}")


class NotFoundError(FileStoreError):
    """Path does not exist."""

    message = "Path does not exist"


class NotAFileError(FileStoreError):
    """Path exists but is not a regular file."""

    message = "Path is not a file"


class NotADirError(FileStoreError):
    """Path is not a directory."""

    message = "Path is not a directory"


class DirectoryNotEmptyError(FileStoreError):
    """Non-recursive removal of a directory that still has entries."""

    message = "Cannot remove non-empty directory"


class DirectoryRemoveError(FileStoreError):
    """The final rmdir of a directory failed."""

    message = "Failed to remove directory"


class FileRemoveError(FileStoreError):
    """Unlinking a file failed."""

    message = "Failed to remove file"


class MkdirError(FileStoreError):
    """Directory creation failed."""

    message = "Failed to create directory"


class DecodeError(FileStoreError):
    """File content is not valid in the store encoding."""

    message = "Cannot decode file content"


class ConfigError(FileStoreError):
    """Settings file is unreadable or invalid."""

    message = "Invalid configuration"
