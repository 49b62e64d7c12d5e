#!/usr/bin/env python3
"""
Purpose:
    Provides reusable annotated types and normalization helpers for the
    oaschema Pydantic models: scalar text fields and string lists that accept
    any YAML scalar (mirroring how a YAML decoder fills a string field),
    boolean flags, and strict numeric constraint types.
"""

from typing import Any, Annotated, List, Optional, Union
from pydantic import BeforeValidator, StrictBool, StrictFloat, StrictInt


# --- Normalizers --- #

def _scalar_to_text(v: Any) -> Any:
    """
    Normalize a YAML scalar destined for a string field:
    - None stays None
    - str is returned unchanged
    - bool -> "true"/"false" (YAML spelling, not Python's)
    - int/float -> str()
    - anything else is passed through so the str validator rejects it
    """
    if v is None or isinstance(v, str):
        return v
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, (int, float)):
        return str(v)
    return v


def _scalars_to_text_list(v: Any) -> Any:
    """
    Normalize a sequence of YAML scalars to a list of strings.
    - null entries become "" (a YAML decoder leaves a string zero-valued)
    - non-list values are passed through so the list validator rejects them
    """
    if not isinstance(v, (list, tuple)):
        return v
    return ["" if item is None else _scalar_to_text(item) for item in v]


def _none_to_false(v: Any) -> Any:
    """An explicit YAML null on a flag reads as the flag being unset."""
    return False if v is None else v


# --- Reusable Annotated types --- #

ScalarText = Annotated[Optional[str], BeforeValidator(_scalar_to_text)]
TextList = Annotated[Optional[List[str]], BeforeValidator(_scalars_to_text_list)]
Flag = Annotated[StrictBool, BeforeValidator(_none_to_false)]
Bound = Optional[Union[StrictInt, StrictFloat]]
Count = Optional[StrictInt]
