"""Configuration loading with schema validation."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jsonschema
import yaml
from pydantic import ValidationError

from .exceptions import ConfigError, ConfigValidationError
from .models import EditScript, NudgeConfig

CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "NudgeKit Configuration",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "debounce_ms": {"type": "number", "minimum": 0},
        "platform": {"enum": ["mac_unix", "windows", "auto", None]},
        "repeat": {"type": "boolean"},
        "features": {
            "type": "object",
            "additionalProperties": {
                "type": "object",
                "additionalProperties": False,
                "properties": {
                    "evaluator": {"type": "string"},
                    "marker": {"type": "string", "minLength": 1},
                    "debounce_ms": {"type": "number", "minimum": 0},
                    "enabled": {"type": "boolean"},
                },
            },
        },
        "suggestions": {
            "type": "object",
            "additionalProperties": {"type": "string"},
        },
    },
}

SCRIPT_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "NudgeKit Edit Script",
    "type": "object",
    "required": ["edits"],
    "properties": {
        "text": {"type": "string"},
        "edits": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["offset", "text"],
                "properties": {
                    "offset": {"type": "integer", "minimum": 0},
                    "text": {"type": "string"},
                    "at_ms": {"type": "number", "minimum": 0},
                },
            },
        },
    },
}


def _read_yaml(path: Path, what: str) -> Any:
    if not path.exists():
        msg = f"{what} file not found: {path}"
        raise ConfigError(msg)

    try:
        with path.open(encoding="utf-8") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        msg = f"Failed to parse {what.lower()} YAML: {e}"
        raise ConfigError(msg) from e
    except OSError as e:
        msg = f"Failed to read {what.lower()} file: {e}"
        raise ConfigError(msg) from e


def _validate_against_schema(data: Any, schema: dict[str, Any], name: str) -> None:
    try:
        jsonschema.validate(data, schema)
    except jsonschema.ValidationError as e:
        msg = f"Schema validation failed: {e.message}"
        raise ConfigValidationError(
            msg,
            details={"path": list(e.absolute_path), "schema": name},
        ) from e


def load_config(path: Path | None = None) -> NudgeConfig:
    """Load and validate a configuration file.

    Args:
        path: YAML file to load; ``None`` returns the defaults

    Returns:
        Validated configuration

    Raises:
        ConfigError: If the file cannot be read or parsed
        ConfigValidationError: If validation fails
    """
    if path is None:
        return NudgeConfig()

    data = _read_yaml(Path(path), "Config")
    if data is None:
        return NudgeConfig()

    _validate_against_schema(data, CONFIG_SCHEMA, "config")

    if data.get("platform") == "auto":
        data = {**data, "platform": None}

    try:
        return NudgeConfig.model_validate(data)
    except ValidationError as e:
        msg = f"Config validation failed: {e}"
        raise ConfigValidationError(msg) from e


def load_script(path: Path) -> EditScript:
    """Load and validate an edit replay script.

    Raises:
        ConfigError: If the file cannot be read or parsed
        ConfigValidationError: If validation fails
    """
    data = _read_yaml(Path(path), "Script")
    _validate_against_schema(data, SCRIPT_SCHEMA, "script")

    try:
        return EditScript.model_validate(data)
    except ValidationError as e:
        msg = f"Script validation failed: {e}"
        raise ConfigValidationError(msg) from e
