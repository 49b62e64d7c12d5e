#!/usr/bin/env python3
"""
Purpose:
    Defines the SchemaType enumeration for JSON Schema `type` values,
    along with a parsing helper.
"""

from __future__ import annotations

from enum import Enum

from oaschema.core import constants as C


class SchemaType(str, Enum):
    """
    JSON Schema primitive types.

    - object  : mapping with named properties
    - array   : ordered sequence, element schema in `items`
    - string  : textual scalar
    - number  : numeric scalar (int or float)
    - integer : whole-number scalar
    - boolean : true/false scalar
    - null    : the null value
    - invalid : unrecognized/unsupported type (returned by `parse`)
    """

    OBJECT = C.OBJECT_LABEL
    ARRAY = C.ARRAY_LABEL
    STRING = C.STRING_LABEL
    NUMBER = C.NUMBER_LABEL
    INTEGER = C.INTEGER_LABEL
    BOOLEAN = C.BOOLEAN_LABEL
    NULL = C.NULL_LABEL
    INVALID = "invalid"

    # --- Parsing helpers --- #

    @classmethod
    def parse(cls, value: str | SchemaType | None) -> SchemaType:
        """
        Coerce arbitrary input to a `SchemaType`.

        - `SchemaType` instance → returned as-is
        - `None` or unknown strings → `SchemaType.INVALID`
        - matching is exact: JSON Schema type names are case-sensitive

        Examples
        --------
        >>> SchemaType.parse("integer")
        <SchemaType.INTEGER: 'integer'>
        >>> SchemaType.parse("Integer")
        <SchemaType.INVALID: 'invalid'>
        >>> SchemaType.parse(None)
        <SchemaType.INVALID: 'invalid'>
        """
        if isinstance(value, SchemaType):
            return value
        if value is None:
            return cls.INVALID
        try:
            parsed = cls(value)
        except ValueError:
            return cls.INVALID
        return parsed
