#!/usr/bin/env python3
"""
Purpose:
    Checks that literal `example` values declared on schema properties parse
    as the property's primitive `type` (integer, number, boolean).

    Only examples written as strings are checked; examples that YAML already
    loaded as numbers, booleans, mappings or lists are skipped. Problems are
    collected as findings, never raised.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from oaschema.core.constants import (
    BOOLEAN_LITERALS,
    INTEGER_LITERAL_MAX,
    INTEGER_LITERAL_MIN,
    INTEGER_LITERAL_RE,
    MAX_SCHEMA_DEPTH,
)
from oaschema.core.schema.schema import Schema
from oaschema.core.schema.schema_type import SchemaType

logger = logging.getLogger(__name__)


# --- Result record --- #

@dataclass(frozen=True)
class ExampleValidation:
    """One example value that does not parse as its declared type."""
    message: str


# --- Literal parsers --- #

def is_integer_literal(text: str) -> bool:
    """Base-10 signed 64-bit integer; no whitespace or digit separators."""
    if not INTEGER_LITERAL_RE.fullmatch(text):
        return False
    return INTEGER_LITERAL_MIN <= int(text) <= INTEGER_LITERAL_MAX


def is_number_literal(text: str) -> bool:
    """
    ASCII decimal/exponent float literal, or inf/nan.

    Whitespace, digit separators and values that overflow a double are rejected.
    """
    if not text or not text.isascii() or text != text.strip() or "_" in text:
        return False
    try:
        value = float(text)
    except ValueError:
        return False
    # overflow rounds to inf; only an explicit inf/infinity spelling may produce one
    return not math.isinf(value) or "inf" in text.lower()


def is_boolean_literal(text: str) -> bool:
    return text in BOOLEAN_LITERALS


_CHECKS: Dict[SchemaType, Callable[[str], bool]] = {
    SchemaType.INTEGER: is_integer_literal,
    SchemaType.NUMBER: is_number_literal,
    SchemaType.BOOLEAN: is_boolean_literal,
}


# --- Public API --- #

def validate_examples(schema: Schema, max_depth: Optional[int] = None) -> List[ExampleValidation]:
    """
    Check every property's string example against its declared type.

    A property with both `type` and `example` is checked and not descended into.
    A property missing either one is descended into when it has nested
    `properties`, so leaves wrapped in intermediate objects are reached.

    The walk stops descending (with a warning) past `max_depth` levels of
    `properties` or when a schema reappears among its own ancestors.

    Returns:
        Findings in walk order; empty when every checked example parses.
    """
    limit = MAX_SCHEMA_DEPTH if max_depth is None else max_depth
    findings: List[ExampleValidation] = []

    # each frame: (remaining properties, owning schema, depth of those properties)
    stack: List[Tuple[Iterator[Tuple[str, Schema]], Schema, int]] = []
    ancestors: set[int] = set()

    def push(owner: Schema, depth: int) -> None:
        stack.append((iter((owner.properties or {}).items()), owner, depth))
        ancestors.add(id(owner))

    push(schema, 1)
    while stack:
        props, owner, depth = stack[-1]
        entry = next(props, None)
        if entry is None:
            stack.pop()
            ancestors.discard(id(owner))
            continue

        name, prop = entry
        if prop.type is not None and prop.example is not None:
            finding = _check_example(name, prop)
            if finding is not None:
                findings.append(finding)
        elif prop.properties:
            if id(prop) in ancestors:
                logger.warning("Schema cycle at property %r; not descending", name)
            elif depth >= limit:
                logger.warning("Property %r is nested deeper than %d levels; not descending", name, limit)
            else:
                push(prop, depth + 1)

    return findings


# --- Internals --- #

def _check_example(name: str, prop: Schema) -> Optional[ExampleValidation]:
    example = prop.example
    if not isinstance(example, str):
        return None

    schema_type = SchemaType.parse(prop.type)
    check = _CHECKS.get(schema_type)
    if check is None or check(example):
        return None

    return ExampleValidation(
        message=f"example value '{example}' in '{name}' is not a valid {schema_type.value}"
    )
