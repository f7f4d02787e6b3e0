"""Filesystem access facade with advisory locking and recursive tree operations."""

__version__ = "0.1.0"

# Export the store, its protocol and errors for callers and type hints
from filestore.errors import (
    ConfigError,
    DecodeError,
    DirectoryNotEmptyError,
    DirectoryRemoveError,
    FileRemoveError,
    FileStoreError,
    MkdirError,
    NotADirError,
    NotAFileError,
    NotFoundError,
)
from filestore.protocols import FileStoreProtocol
from filestore.store import FileStore
from filestore.types import EntryKind, PathInfo

__all__ = [
    "__version__",
    "ConfigError",
    "DecodeError",
    "DirectoryNotEmptyError",
    "DirectoryRemoveError",
    "EntryKind",
    "FileRemoveError",
    "FileStore",
    "FileStoreError",
    "FileStoreProtocol",
    "MkdirError",
    "NotADirError",
    "NotAFileError",
    "NotFoundError",
    "PathInfo",
]
