#!/usr/bin/env python3
"""
Purpose:
    Loads the LogSchema CLI settings: which schema files to validate by
    default and how verbose logging should be.

    Settings are layered (later wins) and validated once as a whole:
        1. Model defaults
        2. Global file   ~/.config/logschema/config.json
        3. Project file  ./logschema.json
        4. Environment   LOGSCHEMA_SCHEMA_PATHS (os.pathsep-separated),
                         LOGSCHEMA_LOG_LEVEL
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Final, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from logschema.core.constants import DEFAULT_TEXT_ENCODING
from logschema.core.log import LOG_LEVELS

GLOBAL_CONFIG_PATH: Final[Path] = Path.home() / ".config" / "logschema" / "config.json"

PROJECT_CONFIG_NAME: Final[str] = "logschema.json"


# --- Models --- #

class LoggingSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: str = Field(default="WARNING", description="Minimum level emitted by the CLI log sink.")

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: Any) -> str:
        level = str(v).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level {v!r}; expected one of {list(LOG_LEVELS)}")
        return level


class LogSchemaConfig(BaseModel):
    """Effective settings. Unknown top-level keys are kept as-is."""

    model_config = ConfigDict(extra="allow")

    schema_paths: List[str] = Field(
        default_factory=lambda: ["./schema.yaml"],
        description="Schema files or directories validated when none are given.",
    )
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# --- Public API --- #

def load_config() -> LogSchemaConfig:
    """
    Read every settings layer and validate the combined result.

    Raises:
        ValueError: if a settings file is not a JSON object.
        pydantic.ValidationError: if the combined settings are invalid.
    """
    settings: Dict[str, Any] = {}
    for layer in (
        _read_layer(GLOBAL_CONFIG_PATH),
        _read_layer(Path.cwd() / PROJECT_CONFIG_NAME),
        _env_layer(),
    ):
        _overlay(settings, layer)
    return LogSchemaConfig.model_validate(settings)


# --- Internals --- #

def _read_layer(path: Path) -> Dict[str, Any]:
    """A settings file as a dict; a missing file is an empty layer."""
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding=DEFAULT_TEXT_ENCODING))
    except json.JSONDecodeError as e:
        raise ValueError(
            f"Invalid JSON in {str(path)!r}: {e.msg} (line {e.lineno}, col {e.colno})"
        ) from e
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {str(path)!r}, got {type(data).__name__}")
    return data


def _env_layer() -> Dict[str, Any]:
    layer: Dict[str, Any] = {}
    schema_paths = os.getenv("LOGSCHEMA_SCHEMA_PATHS")
    if schema_paths:
        layer["schema_paths"] = _split_paths_env(schema_paths)
    log_level = os.getenv("LOGSCHEMA_LOG_LEVEL")
    if log_level:
        layer["logging"] = {"level": log_level}
    return layer


def _overlay(settings: Dict[str, Any], layer: Dict[str, Any]) -> None:
    # `logging` is the only nested section; its keys override one by one
    for key, value in layer.items():
        if key == "logging" and isinstance(value, dict) and isinstance(settings.get(key), dict):
            settings[key] = {**settings[key], **value}
        else:
            settings[key] = value


def _split_paths_env(value: str) -> List[str]:
    """
    Split a path-list env var on os.pathsep, trimming empties and expanding '~'.

    Example:
        "a:~/b:/tmp" on Unix  -> ["a", "/home/user/b", "/tmp"] (no resolve here)
    """
    parts = [p.strip() for p in value.split(os.pathsep)]
    return [str(Path(p).expanduser()) for p in parts if p]
