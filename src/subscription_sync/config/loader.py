from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import jsonschema
import pandas as pd
import yaml
from jsonschema.exceptions import ValidationError

from ..models.config_models import DEFAULT_SHEET, SyncConfig
from ..sheet.columns import ColumnMap
from ..sheet.normalize import DEFAULT_TEXT

"""Config loader.

Responsibilities:
- Load YAML config/sync.yml
- Validate against the bundled config_schema.json
- Apply defaults (sheet=Subscription, timezone=host local time, ...)
- Let SUBSCRIPTION_SCRIPT_URL override endpoint_url (set via .env in the CLI)
"""

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "ENDPOINT_ENV",
    "load_config",
]

SCHEMA_PATH = Path(__file__).parent / "config_schema.json"
DEFAULT_CONFIG_PATH = Path("config/sync.yml")
ENDPOINT_ENV = "SUBSCRIPTION_SCRIPT_URL"


class ConfigError(Exception):
    pass


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against JSON schema.

    Raises:
        ConfigError: schema file missing/invalid, or the data violates the schema
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def _validate_timezone(tz: str) -> None:
    try:
        pd.Timestamp.now(tz=tz)
    except (KeyError, ValueError) as e:
        # pytz / zoneinfo はいずれも KeyError 派生を投げる
        raise ConfigError(f"unknown timezone: {tz}") from e


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> SyncConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping: {path}")

    _validate_config_schema(data)

    tz = data.get("timezone")
    if tz is not None:
        _validate_timezone(tz)

    endpoint = os.getenv(ENDPOINT_ENV) or data.get("endpoint_url") or None
    return SyncConfig(
        endpoint_url=endpoint,
        sheet=data.get("sheet", DEFAULT_SHEET),
        timezone=tz,
        timeout_seconds=float(data.get("timeout_seconds", 30)),
        default_text=data.get("default_text", DEFAULT_TEXT),
        columns=ColumnMap.from_mapping(data.get("columns")),
    )
