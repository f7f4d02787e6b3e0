"""Tests for context module."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

from filestore.config import StoreSettings
from filestore.context import AppContext, create_context
from filestore.store import FileStore


class TestAppContext:
    """Tests for AppContext dataclass."""

    def test_create_with_all_dependencies(self) -> None:
        """Test creating context with explicit dependencies."""
        settings = StoreSettings(lock=True)
        store = MagicMock()

        ctx = AppContext(settings=settings, store=store)

        assert ctx.settings is settings
        assert ctx.store is store

    def test_defaults(self) -> None:
        """Test context creates default settings and store if not provided."""
        ctx = AppContext()

        assert ctx.settings == StoreSettings()
        assert isinstance(ctx.store, FileStore)


class TestCreateContext:
    """Tests for create_context factory function."""

    def test_create_context_missing_config(self, tmp_path: Path) -> None:
        """Test creating context without a settings file."""
        ctx = create_context(config_path=tmp_path / "config.yaml")

        assert ctx.settings == StoreSettings()
        assert isinstance(ctx.store, FileStore)

    def test_store_uses_configured_encoding(self, tmp_path: Path) -> None:
        """Test the store is built from loaded settings."""
        config_path = tmp_path / "config.yaml"
        config_path.write_text("encoding: latin-1\n")

        ctx = create_context(config_path=config_path)

        assert ctx.store.encoding == "latin-1"
