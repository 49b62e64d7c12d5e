#!/usr/bin/env python3
"""
Formatting helpers for oaschema.

- Stable, minimal one-line formatting for Pydantic v2 `ValidationError`.
- JSONPath-style rendering of jsonschema error locations.
"""
from __future__ import annotations

from typing import Any, Iterable, List, Sequence


# --- Public API --- #

def format_pydantic_errors_simple(exc: Exception) -> List[str]:
    """
    Return stable one-line messages from a Pydantic v2 ValidationError.

    Example:
        properties.id.maximum: Input should be a valid number

    Falls back to the first line of str(exc) if `exc.errors()` isn't available.
    """
    errors: Sequence[dict[str, Any]] | None = None

    if hasattr(exc, "errors") and callable(getattr(exc, "errors")):
        try:
            # Pydantic v2 API: returns a sequence of error dicts
            errors = exc.errors()  # type: ignore[assignment]
        except Exception:
            errors = None

    if not errors:
        text = str(exc)
        return [text.splitlines()[0] if text else type(exc).__name__]

    msgs: List[str] = []
    for err in errors:
        loc = err.get("loc", ())
        msg = err.get("msg", "Validation error")
        path = _format_error_loc(loc)
        msgs.append(f"{path}: {msg}")
    return msgs


def format_json_path(path: Iterable[Any]) -> str:
    """
    Format a jsonschema deque path as a JSONPath-style string.

    Examples:
        deque([])                    -> ""
        deque([0, "name"])           -> "[0].name"
        deque(["items", 0, "name"])  -> "items[0].name"
    """
    parts: List[str] = []
    for segment in path:
        if isinstance(segment, int):
            parts.append(f"[{segment}]")
        elif parts:
            parts.append(f".{segment}")
        else:
            parts.append(str(segment))
    return "".join(parts)


# --- Internals --- #

def _format_error_loc(loc: Iterable[Any]) -> str:
    """
    Convert a Pydantic error `loc` tuple into a dotted path with index suffixes.

    Examples:
        ('properties', 'id', 'maximum') -> "properties.id.maximum"
        ('enum', 1)                     -> "enum[1]"
        ()                              -> "<root>"
    """
    parts: List[str] = []
    for seg in loc:
        if isinstance(seg, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{seg}]"
            else:
                parts.append(f"[{seg}]")
        else:
            parts.append(str(seg))
    return ".".join(parts) if parts else "<root>"
