#!/usr/bin/env python3
"""
Purpose:
    Validates a document node against a `Schema`.

    The node is re-serialized to YAML, converted to JSON, and handed together
    with the JSON-serialized schema to the jsonschema engine. Every violated
    constraint is returned as data; nothing is filtered.
"""
from __future__ import annotations

import json
import logging
from typing import Any, List

import jsonschema
import yaml
from jsonschema.exceptions import SchemaError
from pydantic import BaseModel, Field
from pydantic_core import PydanticSerializationError

from oaschema.core.exceptions import ConversionError, InvalidSchemaError
from oaschema.core.formatting import format_json_path
from oaschema.core.schema.schema import Schema
from oaschema.core.yaml_nodes import node_to_text, wrap_in_sequence, yaml_to_json

logger = logging.getLogger(__name__)


# --- Models --- #

class SchemaViolation(BaseModel):
    """A single violated constraint.

    Attributes:
        path: JSONPath-style location in the instance (e.g. "[0].name"); "" for the root.
        message: Engine message (e.g. "'name' is a required property").
        schema_path: Location of the violated keyword in the schema.
        keyword: The violated keyword (e.g. "required", "type").
    """

    path: str
    message: str
    schema_path: str = ""
    keyword: str = ""

    def __str__(self) -> str:
        if self.path:
            return f"{self.path}: {self.message}"
        return self.message


class SchemaValidationResult(BaseModel):
    """Outcome of validating one instance against one schema."""

    valid: bool
    errors: List[SchemaViolation] = Field(default_factory=list)

    def messages(self) -> List[str]:
        return [str(e) for e in self.errors]


# --- Public API --- #

def validate_node_against_schema(
    schema: Schema,
    node: yaml.Node,
    is_array: bool = False,
) -> SchemaValidationResult:
    """
    Validate `node` against `schema`.

    Args:
        schema: Populated schema (usually from `convert_node_to_schema`).
        node: Instance node to check.
        is_array: Wrap the node in a one-element sequence first; used when the
            node is a single item checked against an array schema.

    Returns:
        SchemaValidationResult listing every violation (empty when valid).

    Raises:
        ConversionError: if the instance cannot be turned into JSON (checked
            first), or the schema cannot be serialized.
        InvalidSchemaError: if the engine rejects the serialized schema.
    """
    target = wrap_in_sequence(node) if is_array else node
    instance_json = yaml_to_json(node_to_text(target))

    try:
        schema_json = schema.to_json()
    except PydanticSerializationError as exc:
        raise ConversionError(f"Unable to serialize schema to JSON: {exc}") from exc

    return validate_json(schema_json, instance_json)


def validate_json(schema_json: bytes, instance_json: bytes) -> SchemaValidationResult:
    """
    Run the jsonschema engine on JSON-encoded schema and instance bytes.

    The validator class follows the schema's `$schema` (latest draft when
    absent). Formats are checked where the engine has a checker for them.
    Every violation is returned, ordered by instance path and then schema
    path rather than in the engine's iteration order.

    Raises:
        InvalidSchemaError: if the schema is not valid for its dialect.
    """
    schema_doc: Any = json.loads(schema_json)
    instance: Any = json.loads(instance_json)

    validator_cls = jsonschema.validators.validator_for(schema_doc)
    try:
        validator_cls.check_schema(schema_doc)
    except SchemaError as exc:
        raise InvalidSchemaError(f"Schema rejected by the validation engine: {exc.message}") from exc

    validator = validator_cls(schema_doc, format_checker=validator_cls.FORMAT_CHECKER)
    errors = [
        SchemaViolation(
            path=format_json_path(error.absolute_path),
            message=error.message,
            schema_path=format_json_path(error.absolute_schema_path),
            keyword=str(error.validator),
        )
        for error in sorted(validator.iter_errors(instance), key=_error_sort_key)
    ]

    logger.debug("Validated instance with %s: %d violation(s)", validator_cls.__name__, len(errors))
    return SchemaValidationResult(valid=not errors, errors=errors)


# --- Internals --- #

def _error_sort_key(error: jsonschema.ValidationError) -> tuple:
    return (
        [str(p) for p in error.absolute_path],
        [str(p) for p in error.absolute_schema_path],
    )
