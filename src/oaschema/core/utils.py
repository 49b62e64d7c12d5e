#!/usr/bin/env python3
"""
Purpose:
    Provides common utility functions such as dictionary merge and
    file I/O helpers for oaschema.
"""

import json
from pathlib import Path
from typing import Dict, Any

from oaschema.core.constants import DEFAULT_TEXT_ENCODING


# --- Generic Utilities --- #

def merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Recursively merge two dictionaries (values from 'override' take precedence).
    Non-dict values are overwritten; dict values are merged depth-first.
    """
    result = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = merge_dicts(result[k], v)
        else:
            result[k] = v
    return result


def split_pointer(pointer: str | None) -> tuple[str, ...]:
    """
    Split a slash-separated document path into its segments.

    Leading/trailing slashes and empty segments are ignored, and JSON-pointer
    escapes (`~1` -> `/`, `~0` -> `~`) are decoded.

    Example:
        "/components/schemas/Pet" -> ("components", "schemas", "Pet")
    """
    if not pointer:
        return ()
    parts = [p for p in pointer.strip().split("/") if p]
    return tuple(p.replace("~1", "/").replace("~0", "~") for p in parts)


# --- File I/O Helpers --- #

def load_json_file(path: Path) -> Dict[str, Any]:
    """
    Load a JSON file from 'path'. Returns an empty dict if the file is missing.

    Raises:
        ValueError: if the file exists but contains invalid JSON.
    """
    if not path.exists():
        return {}
    try:
        with path.open("r", encoding=DEFAULT_TEXT_ENCODING) as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(
            f"Invalid JSON in {str(path)!r}: {e.msg} (line {e.lineno}, col {e.colno})"
        ) from e
