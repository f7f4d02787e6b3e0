"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from filestore.config import StoreSettings
from filestore.context import AppContext
from filestore.store import FileStore



@pytest.fixture
def store() -> FileStore:
    """Create a store with default encoding."""
    return FileStore()


@pytest.fixture
def temp_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Override home directory for testing."""
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    return tmp_path


# ============================================================================
# Directory Tree Fixtures
# ============================================================================


@pytest.fixture
def flat_dir(tmp_path: Path) -> Path:
    """Directory with two files and an empty subdirectory.

    Layout:
        flat/a.txt   (5 bytes)
        flat/b.log   (3 bytes)
        flat/c/
    """
    root = tmp_path / "flat"
    root.mkdir()
    (root / "a.txt").write_bytes(b"hello")
    (root / "b.log").write_bytes(b"log")
    (root / "c").mkdir()
    return root


@pytest.fixture
def nested_dir(tmp_path: Path) -> Path:
    """Directory tree three levels deep.

    Layout:
        tree/top.bin            (10 bytes)
        tree/one/mid.txt        (4 bytes)
        tree/one/two/deep.txt   (7 bytes)
        tree/one/two/empty/
    """
    root = tmp_path / "tree"
    (root / "one" / "two" / "empty").mkdir(parents=True)
    (root / "top.bin").write_bytes(b"0123456789")
    (root / "one" / "mid.txt").write_bytes(b"midl")
    (root / "one" / "two" / "deep.txt").write_bytes(b"deepest")
    return root


# ============================================================================
# App Context Fixtures
# ============================================================================


@pytest.fixture
def real_context(store: FileStore) -> AppContext:
    """AppContext backed by a real store and default settings."""
    return AppContext(settings=StoreSettings(), store=store)


@pytest.fixture
def mock_context() -> AppContext:
    """AppContext with a mock store."""
    return AppContext(settings=StoreSettings(), store=MagicMock())
