"""Generator settings and their TOML loader."""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import SettingsError
from .naming import PROJECT_DIR_MACRO
from .writer import CURRENT_PREFIX

SETTINGS_TABLE = "go_runconfig"
DEFAULT_OUTPUT_DIR = Path(".idea") / "runConfigurations"


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    separator: str = Field(default=os.sep, min_length=1)
    project_dir: str = Field(default=PROJECT_DIR_MACRO, min_length=1)
    output_dir: Path = DEFAULT_OUTPUT_DIR
    name_depth: int = Field(default=2, ge=1)
    current_prefix: str = Field(default=CURRENT_PREFIX, min_length=1)
    current_folder: str = "current"


def merge_settings(base: Settings, overrides: Mapping[str, Any]) -> Settings:
    """Return ``base`` updated with the non-None entries of ``overrides``."""
    data = base.model_dump()
    data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except ValidationError as exc:
        raise SettingsError(f"Invalid settings: {exc}") from exc


def load_settings(path: Optional[Path] = None, **overrides: Any) -> Settings:
    """Load settings from the ``[go_runconfig]`` table of ``path``.

    Without a path the defaults are used. Keyword overrides win over the file.
    """
    payload: dict = {}
    if path is not None:
        try:
            with open(path, "rb") as fh:
                doc = tomllib.load(fh)
        except OSError as exc:
            raise SettingsError(f"Cannot read settings file {path}: {exc}") from exc
        except tomllib.TOMLDecodeError as exc:
            raise SettingsError(f"Invalid TOML in {path}: {exc}") from exc
        table = doc.get(SETTINGS_TABLE, {})
        if not isinstance(table, dict):
            raise SettingsError(f"[{SETTINGS_TABLE}] in {path} must be a table")
        payload.update(table)
    try:
        settings = Settings(**payload)
    except ValidationError as exc:
        raise SettingsError(f"Invalid settings in {path}: {exc}") from exc
    return merge_settings(settings, overrides)
