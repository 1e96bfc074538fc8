from __future__ import annotations

from pathlib import Path
from typing import Any

import tomllib
from pydantic import BaseModel, ConfigDict, Field, field_validator

from utils import ends_with_separator

CONFIG_FILENAME = "filelocator.toml"


class LocatorConfig(BaseModel):
    """Configuration for file location against search directories."""

    model_config = ConfigDict(extra="forbid")

    search_paths: list[str] = Field(
        default_factory=list,
        description="Directories tried in order when resolving a bare file name",
    )
    require_regular_file: bool = Field(
        default=False,
        description="Only accept regular files as hits (directories are misses)",
    )

    @field_validator("search_paths", mode="before")
    @classmethod
    def validate_search_paths(cls, v: Any) -> Any:
        """Validate that search_paths is a list of non-blank strings.

        Note: this runs in `mode="before"` so errors reference the raw TOML
        values.
        """

        if v is None:
            return []

        if not isinstance(v, list):
            msg = "search_paths must be a list of directory strings"
            raise TypeError(msg)

        for entry in v:
            if not isinstance(entry, str):
                msg = "search_paths must be a list of str"
                raise TypeError(msg)
            if not entry.strip():
                msg = "search_paths entries must be non-empty"
                raise ValueError(msg)

        return v

    def resolved_search_paths(self, root: Path) -> list[str]:
        """Search paths with relative entries anchored at ``root``.

        A trailing separator on an entry is preserved.
        """
        resolved: list[str] = []
        for entry in self.search_paths:
            if Path(entry).is_absolute():
                resolved.append(entry)
                continue
            anchored = str(root / Path(entry).expanduser())
            if ends_with_separator(entry):
                anchored += entry[-1]
            resolved.append(anchored)
        return resolved


class ConfigError(Exception):
    """Raised when config file exists but cannot be parsed."""


def load_config(root: Path) -> LocatorConfig:
    """Load configuration from filelocator.toml if it exists."""
    config_path = Path(root) / CONFIG_FILENAME

    if not config_path.is_file():
        return LocatorConfig()

    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        return LocatorConfig.model_validate(data)
    except Exception as e:
        msg = f"Invalid config in {config_path}: {e}"
        raise ConfigError(msg) from e
