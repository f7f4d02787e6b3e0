"""Settings for the store and CLI."""

from __future__ import annotations

import codecs
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from filestore.errors import ConfigError

# Default settings location
CONFIG_DIR = Path.home() / ".filestore"
CONFIG_FILE = CONFIG_DIR / "config.yaml"


class StoreSettings(BaseModel):
    """User settings loaded from config.yaml."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    encoding: str = "utf-8"
    lock: bool = False
    dir_mode: int = Field(default=0o777, alias="dirMode")
    recursive_mkdir: bool = Field(default=True, alias="recursiveMkdir")
    recursive_remove: bool = Field(default=True, alias="recursiveRemove")

    @field_validator("encoding")
    @classmethod
    def _known_codec(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"unknown encoding '{value}'") from e
        return value

    @field_validator("dir_mode", mode="before")
    @classmethod
    def _parse_mode(cls, value: Any) -> Any:
        # Quoted modes such as "0755" are octal.
        if isinstance(value, str):
            return int(value, 8)
        return value

    @field_validator("dir_mode")
    @classmethod
    def _mode_range(cls, value: int) -> int:
        if not 0 <= value <= 0o7777:
            raise ValueError(f"mode {value:o} out of range")
        return value


def load_settings(path: Path | None = None) -> StoreSettings:
    """Load settings from a YAML file.

    Args:
        path: Settings file. Defaults to ~/.filestore/config.yaml.

    Returns:
        Validated settings; defaults if the file does not exist.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
    """
    path = path or CONFIG_FILE
    if not path.exists():
        return StoreSettings()

    try:
        data = yaml.safe_load(path.read_text()) or {}
        return StoreSettings.model_validate(data)
    except (OSError, ValueError, yaml.YAMLError, ValidationError) as e:
        raise ConfigError(path, f"Invalid configuration ({e})") from e
