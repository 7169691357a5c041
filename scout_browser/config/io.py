from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from scout_browser.config.model import Configuration
from scout_browser.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV = "SCOUT_BROWSER_CONFIG"
DATA_FILE_ENV = "SCOUT_BROWSER_DATA_FILE"

_STRING_KEYS = ("team", "motd", "data_file", "key_column")


def _read_raw(path: Path) -> Dict[str, Any]:
    try:
        with path.open(encoding="utf-8") as f:
            raw = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ConfigError(f"Config file {path} is not valid JSON: {e}") from e
    except OSError as e:
        raise ConfigError(f"Config file {path} could not be read: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")
    return raw


def _validate(raw: Dict[str, Any], path: Optional[Path]) -> None:
    source = path or "<defaults>"
    for key in _STRING_KEYS:
        if key in raw and not isinstance(raw[key], (str, int)):
            raise ConfigError(f"{source}: '{key}' must be a string")

    places = raw.get("decimal_places", 0)
    if isinstance(places, bool) or not isinstance(places, int) or places < 0:
        raise ConfigError(f"{source}: 'decimal_places' must be a non-negative integer")


def load_configuration(path: str | Path | None = None) -> Configuration:
    """
    Load the session Configuration.

    Selection Order:
        1) path argument if provided
        2) env var SCOUT_BROWSER_CONFIG
        3) built-in defaults

    SCOUT_BROWSER_DATA_FILE overrides 'data_file'. A relative data_file is
    resolved against the directory holding the config file.

    :raises ConfigError: if the file is missing, malformed or has wrongly typed values
    """
    if path is None:
        env_path = os.getenv(CONFIG_ENV)
        path = Path(env_path) if env_path else None
    else:
        path = Path(path)

    raw: Dict[str, Any] = {}
    if path is not None:
        if not path.is_file():
            raise ConfigError(f"Config file not found at {path}")
        logger.info("Loading configuration", extra={"config_path": str(path)})
        raw = _read_raw(path)

    _validate(raw, path)

    defaults = Configuration()
    env_data_file = os.getenv(DATA_FILE_ENV)
    if env_data_file:
        data_file = Path(env_data_file)
    else:
        data_file = Path(raw.get("data_file") or defaults.data_file)
        if not data_file.is_absolute() and path is not None:
            data_file = (path.parent / data_file).resolve()

    return Configuration(
        team=str(raw.get("team", defaults.team)),
        motd=str(raw.get("motd", defaults.motd)),
        data_file=data_file,
        key_column=str(raw.get("key_column", defaults.key_column)),
        decimal_places=raw.get("decimal_places", defaults.decimal_places),
    )
