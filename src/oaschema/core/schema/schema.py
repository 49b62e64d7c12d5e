#!/usr/bin/env python3
"""
Purpose:
    Implements the Schema model: a JSON Schema object carrying the OpenAPI 3.x
    extensions (`example`, `nullable`), with load helpers and a serializer that
    emits JSON Schema keys.
"""
from __future__ import annotations

import json
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, model_serializer, model_validator

from oaschema.core.annotated_types import Bound, Count, Flag, ScalarText, TextList
from oaschema.core.yaml_nodes import load_text


# Emitted even when explicitly set to null
_NULLABLE_KEYS = frozenset({"example"})


# --- Model --- #

class Schema(BaseModel):
    """
    A JSON Schema object with OpenAPI extensions.

    Every constraint is optional and defaults to `None` (absent), so an absent
    keyword and a present-but-empty one (`[]`, `{}`, `""`) stay distinguishable.
    Python attribute names are snake_case; the aliases are the JSON Schema keys
    used both when loading and when serializing.

    Unknown keys (`allOf`, `$ref`, vendor extensions, ...) are ignored.

    Numeric bounds accept integers and floats; strings and booleans are rejected.

    Example
    -------
    >>> s = Schema.from_dict({"type": "object", "required": ["name"],
    ...                       "properties": {"name": {"type": "string"}}})
    >>> s.properties["name"].type
    'string'
    >>> s.to_dict()["required"]
    ['name']
    """

    model_config = ConfigDict(validate_assignment=True, extra="ignore", populate_by_name=True)

    # Identity / meta
    schema_dialect: ScalarText = Field(default=None, alias="$schema", description="Dialect URI.")
    id: ScalarText = Field(default=None, alias="$id", description="Document identifier.")
    title: ScalarText = Field(default=None)
    required: TextList = Field(default=None, description="Names of required properties.")
    enum: TextList = Field(default=None, description="Allowed values, in order.")
    description: ScalarText = Field(default=None)

    # Type
    type: ScalarText = Field(default=None, description="JSON Schema type name.")
    content_encoding: ScalarText = Field(default=None, alias="contentEncoding")
    content_schema: ScalarText = Field(default=None, alias="contentSchema")

    # Array element schema
    items: Optional[Schema] = Field(default=None)

    # Numeric
    multiple_of: Bound = Field(default=None, alias="multipleOf")
    maximum: Bound = Field(default=None)
    exclusive_maximum: Bound = Field(default=None, alias="exclusiveMaximum")
    minimum: Bound = Field(default=None)
    exclusive_minimum: Bound = Field(default=None, alias="exclusiveMinimum")

    # Array
    unique_items: Flag = Field(default=False, alias="uniqueItems")
    max_items: Count = Field(default=None, alias="maxItems")
    min_items: Count = Field(default=None, alias="minItems")

    # String
    max_length: Count = Field(default=None, alias="maxLength")
    min_length: Count = Field(default=None, alias="minLength")
    pattern: ScalarText = Field(default=None)

    # Contains
    max_contains: Count = Field(default=None, alias="maxContains")
    min_contains: Count = Field(default=None, alias="minContains")

    # Object
    max_properties: Count = Field(default=None, alias="maxProperties")
    min_properties: Count = Field(default=None, alias="minProperties")
    properties: Optional[Dict[str, Schema]] = Field(default=None)

    # OpenAPI extensions
    format: ScalarText = Field(default=None)
    example: Any = Field(default=None, description="Literal example value (open type).")
    nullable: Flag = Field(default=False)
    additional_properties: Any = Field(
        default=None,
        alias="additionalProperties",
        description="Boolean or nested schema (open type).",
    )

    # --- Pre-parse: normalize property mapping --- #
    @model_validator(mode="before")
    @classmethod
    def _normalize_properties(cls, data: Any) -> Any:
        """
        Property names are coerced to strings (YAML allows `200:` keys) and
        null property values become empty schemas, so `properties` never holds
        a None entry.
        """
        if not isinstance(data, dict):
            return data
        props = data.get("properties")
        if not isinstance(props, dict):
            return data
        normalized = {str(k): ({} if v is None else v) for k, v in props.items()}
        return {**data, "properties": normalized}

    # --- Convenience --- #

    def has_example(self) -> bool:
        """True if `example` was set, including an explicit null."""
        return "example" in self.model_fields_set

    # --- Serializer: JSON Schema keys --- #
    @model_serializer(mode="plain")
    def _dump_keys(self) -> Dict[str, Any]:
        """
        Emit JSON Schema keys in declaration order, omitting:
        - None values (except an explicitly set `example`)
        - false-default flags (`uniqueItems`, `nullable`)
        - an empty `properties` mapping
        """
        out: Dict[str, Any] = {}
        for name, field in type(self).model_fields.items():
            key = field.alias or name
            value = getattr(self, name)
            if value is None and not (key in _NULLABLE_KEYS and name in self.model_fields_set):
                continue
            if value is False and field.default is False:
                continue
            if isinstance(value, Schema):
                value = value._dump_keys()
            elif name == "properties":
                if not value:
                    continue
                value = {k: v._dump_keys() for k, v in value.items()}
            out[key] = value
        return out

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()

    def to_json(self) -> bytes:
        """Serialize to compact JSON bytes."""
        return self.model_dump_json().encode()

    def to_yaml(self) -> str:
        # round-trip through JSON so open values hold only JSON types
        return yaml.safe_dump(json.loads(self.to_json()), sort_keys=False, allow_unicode=True)

    # --- Loading --- #

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Schema:
        """
        Build a Schema from a mapping keyed by JSON Schema names.

        Raises:
            ValidationError: if a value does not fit its field (e.g. `maximum: abc`).
        """
        return cls.model_validate(data)

    @classmethod
    def from_yaml(cls, text: str) -> Schema:
        """
        Build a Schema from YAML (or JSON) text. Empty text gives an empty Schema.

        Raises:
            yaml.YAMLError: on malformed YAML.
            ValidationError: if the document is not a schema-shaped mapping.
        """
        data = load_text(text)
        return cls.model_validate({} if data is None else data)


# --- Forward-Ref Resolution --- #
Schema.model_rebuild()
