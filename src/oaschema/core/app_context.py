#!/usr/bin/env python3
"""
Purpose:
    Wires together the oaschema application context for entry points: merged
    configuration plus the settings derived from it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from oaschema.core.config import get_max_schema_depth, load_config


# --- Data model --- #

@dataclass(frozen=True)
class AppContext:
    """Immutable container for configuration and derived settings."""
    config: Dict[str, Any]
    log_level: str
    max_schema_depth: int


# --- Factory --- #

def build_context(*, config: Optional[Dict[str, Any]] = None, log_level: Optional[str] = None) -> AppContext:
    """
    Build an `AppContext`.

    Args:
        config:
            Pre-merged configuration. If omitted, `load_config()` is used.
        log_level:
            Optional override for `config['logging']['level']`.

    Returns:
        AppContext: immutable bundle of config and derived settings.

    Raises:
        ValueError: if `max_schema_depth` is not a positive integer.
    """
    cfg = config if config is not None else load_config()
    level = log_level or cfg.get("logging", {}).get("level", "WARNING")
    return AppContext(config=cfg, log_level=str(level), max_schema_depth=get_max_schema_depth(cfg))
