"""Application context for dependency injection.

Separates object creation from object use so CLI commands can be tested
with a substituted store.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from filestore.config import StoreSettings, load_settings
from filestore.protocols import FileStoreProtocol


def _default_store() -> FileStoreProtocol:
    """Create the default store implementation."""
    from filestore.store import FileStore
    return FileStore()


@dataclass
class AppContext:
    """Container for CLI dependencies.

    The store is typed by protocol, so test doubles can be injected
    without inheritance.
    """

    settings: StoreSettings = field(default_factory=StoreSettings)
    store: FileStoreProtocol = field(default_factory=_default_store)


def create_context(config_path: Path | None = None) -> AppContext:
    """Factory for application dependencies.

    Use this in production code. For tests, construct AppContext directly
    with test doubles.

    Args:
        config_path: Override settings file (for testing).

    Returns:
        Configured AppContext.

    Raises:
        ConfigError: If the settings file is invalid.
    """
    from filestore.store import FileStore

    settings = load_settings(config_path)
    return AppContext(settings=settings, store=FileStore.from_settings(settings))
