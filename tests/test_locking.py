"""Tests for advisory lock helpers."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from filestore import locking

pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="flock semantics")


def _try_exclusive(path: Path) -> bool:
    """Attempt a non-blocking exclusive lock through a separate handle."""
    import fcntl

    with path.open("rb") as other:
        try:
            fcntl.flock(other.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
        except BlockingIOError:
            return False
        fcntl.flock(other.fileno(), fcntl.LOCK_UN)
        return True


class TestHeld:
    """Tests for the held() context manager."""

    def test_shared_lock_blocks_exclusive(self, tmp_path: Path) -> None:
        """Test a shared lock excludes other exclusive lockers."""
        path = tmp_path / "file"
        path.write_bytes(b"x")

        with path.open("rb") as f, locking.held(f):
            assert _try_exclusive(path) is False

    def test_exclusive_lock_blocks_exclusive(self, tmp_path: Path) -> None:
        """Test an exclusive lock excludes other exclusive lockers."""
        path = tmp_path / "file"
        path.write_bytes(b"x")

        with path.open("ab") as f, locking.held(f, exclusive=True):
            assert _try_exclusive(path) is False

    def test_released_after_block(self, tmp_path: Path) -> None:
        """Test the lock is released when the block exits."""
        path = tmp_path / "file"
        path.write_bytes(b"x")

        with path.open("rb") as f:
            with locking.held(f):
                pass
            assert _try_exclusive(path) is True

    def test_released_on_error(self, tmp_path: Path) -> None:
        """Test the lock is released when the block raises."""
        path = tmp_path / "file"
        path.write_bytes(b"x")

        with path.open("rb") as f:
            with pytest.raises(RuntimeError):
                with locking.held(f, exclusive=True):
                    raise RuntimeError("boom")
            assert _try_exclusive(path) is True
