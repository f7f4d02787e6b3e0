"""Advisory file locks.

Locks are cooperative: they only exclude other processes that also ask
for a lock on the same file.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import IO

if sys.platform == "win32":  # pragma: no cover
    import msvcrt as _msvcrt  # Windows locking
else:
    import fcntl as _fcntl  # Unix locking

logger = logging.getLogger(__name__)


def lock_shared(f: IO[bytes]) -> None:
    """Acquire a shared (read) lock on the file."""
    if sys.platform == "win32":  # pragma: no cover
        _msvcrt.locking(f.fileno(), _msvcrt.LK_LOCK, 1)
    else:
        _fcntl.flock(f.fileno(), _fcntl.LOCK_SH)


def lock_exclusive(f: IO[bytes]) -> None:
    """Acquire an exclusive (write) lock on the file."""
    if sys.platform == "win32":  # pragma: no cover
        _msvcrt.locking(f.fileno(), _msvcrt.LK_LOCK, 1)
    else:
        _fcntl.flock(f.fileno(), _fcntl.LOCK_EX)


def unlock(f: IO[bytes]) -> None:
    """Release lock on the file."""
    if sys.platform == "win32":  # pragma: no cover
        _msvcrt.locking(f.fileno(), _msvcrt.LK_UNLCK, 1)
    else:
        _fcntl.flock(f.fileno(), _fcntl.LOCK_UN)


@contextmanager
def held(f: IO[bytes], exclusive: bool = False) -> Iterator[IO[bytes]]:
    """Hold an advisory lock on an open file for the duration of the block.

    Args:
        f: Open binary file handle.
        exclusive: Take an exclusive lock instead of a shared one.

    Yields:
        The same file handle, locked.
    """
    if exclusive:
        lock_exclusive(f)
    else:
        lock_shared(f)
    logger.debug("Acquired %s lock on %s", "exclusive" if exclusive else "shared", f.name)
    try:
        yield f
    finally:
        unlock(f)
        logger.debug("Released lock on %s", f.name)
