#!/usr/bin/env python3
"""
Core constants used across oaschema.

- Stamped identity: the `$schema` dialect URI and `$id` written onto every converted schema.
- Type labels: JSON Schema primitive type names used when checking examples.
- Limits: default nesting depth for schema tree walks.
- Regular expressions: literal grammars used by the example checker.
"""

import re
from typing import Final

# --- Stamped identity --- #

# Dialect stamped onto every converted schema as `$schema`
SCHEMA_DIALECT: Final[str] = "https://json-schema.org/draft/2020-12/schema"

# Document identifier stamped onto every converted schema as `$id`
SCHEMA_ID: Final[str] = "https://quobix.com/api/vacuum"


# --- Type labels --- #

OBJECT_LABEL: Final[str] = "object"
ARRAY_LABEL: Final[str] = "array"
STRING_LABEL: Final[str] = "string"
NUMBER_LABEL: Final[str] = "number"
INTEGER_LABEL: Final[str] = "integer"
BOOLEAN_LABEL: Final[str] = "boolean"
NULL_LABEL: Final[str] = "null"


# --- Limits & encodings --- #

# Default maximum nesting depth followed when walking `properties`
MAX_SCHEMA_DEPTH: Final[int] = 64

# Default text encoding
DEFAULT_TEXT_ENCODING: Final[str] = "utf-8"

# Literals accepted as booleans in example values
BOOLEAN_LITERALS: Final[frozenset[str]] = frozenset(
    {"1", "t", "T", "TRUE", "true", "True", "0", "f", "F", "FALSE", "false", "False"}
)

# Range of integer example values (signed 64-bit)
INTEGER_LITERAL_MIN: Final[int] = -(2 ** 63)
INTEGER_LITERAL_MAX: Final[int] = 2 ** 63 - 1


# --- Regular Expressions --- #

# Base-10 integer with optional sign (e.g., 42, -7, +003)
INTEGER_LITERAL_RE: re.Pattern[str] = re.compile(r"^[+-]?[0-9]+$")

# Absolute http(s) URI
HTTP_URI_RE: re.Pattern[str] = re.compile(r"^https?://\S+$")


# --- Runtime guard --- #
def validate_constants():
    """
    Ensure constants are valid at runtime.
    """
    for name, value in (("SCHEMA_DIALECT", SCHEMA_DIALECT), ("SCHEMA_ID", SCHEMA_ID)):
        if not HTTP_URI_RE.fullmatch(value):
            raise RuntimeError(f"{name} must be an absolute http(s) URI, got {value!r}")
    if MAX_SCHEMA_DEPTH < 1:
        raise RuntimeError(f"MAX_SCHEMA_DEPTH must be positive, got {MAX_SCHEMA_DEPTH!r}")

validate_constants()
