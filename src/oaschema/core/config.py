#!/usr/bin/env python3
"""
oaschema configuration loader.
"""

import copy
import os
from pathlib import Path
from typing import Any, Dict, Final

from oaschema.core.constants import MAX_SCHEMA_DEPTH
from oaschema.core.utils import merge_dicts, load_json_file

# --- Defaults & locations --- #

DEFAULT_CONFIG: Final[Dict[str, Any]] = {
    "logging": {"level": "WARNING"},
    "max_schema_depth": MAX_SCHEMA_DEPTH,
}

GLOBAL_CONFIG_PATH: Final[Path] = Path.home() / ".config" / "oaschema" / "config.json"

PROJECT_CONFIG_NAME: Final[str] = "oaschema.json"


# --- Public API --- #

def load_config() -> Dict[str, Any]:
    """
    Load oaschema configuration with layered precedence.

    Order:
        1. Built-in defaults
        2. Global config (~/.config/oaschema/config.json)
        3. Project config (./oaschema.json)
        4. Environment overrides:
           - OASCHEMA_LOG_LEVEL
           - OASCHEMA_MAX_SCHEMA_DEPTH (positive integer)

    Returns:
        A merged configuration dictionary.
    """
    # 1) start with defaults
    config = copy.deepcopy(DEFAULT_CONFIG)

    # 2) global config
    config = merge_dicts(config, load_json_file(GLOBAL_CONFIG_PATH))

    # 3) project config
    project_path = Path.cwd() / PROJECT_CONFIG_NAME
    config = merge_dicts(config, load_json_file(project_path))

    # 4) environment overrides
    log_level_env = os.getenv("OASCHEMA_LOG_LEVEL")
    if log_level_env:
        config.setdefault("logging", {})["level"] = log_level_env

    depth_env = os.getenv("OASCHEMA_MAX_SCHEMA_DEPTH")
    if depth_env:
        config["max_schema_depth"] = _parse_positive_int(depth_env, "OASCHEMA_MAX_SCHEMA_DEPTH")

    return config


def get_max_schema_depth(config: Dict[str, Any] | None = None) -> int:
    """Return the configured schema walk depth limit (validated as a positive int)."""
    cfg = config if config is not None else load_config()
    return _parse_positive_int(cfg.get("max_schema_depth", MAX_SCHEMA_DEPTH), "max_schema_depth")


# --- Internals --- #

def _parse_positive_int(value: Any, name: str) -> int:
    """
    Coerce a config value to a positive int.

    Raises:
        ValueError: if the value is not an integer >= 1 (booleans are rejected).
    """
    if isinstance(value, bool):
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    try:
        number = int(str(value).strip())
    except ValueError as e:
        raise ValueError(f"{name} must be a positive integer, got {value!r}") from e
    if number < 1:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    return number
