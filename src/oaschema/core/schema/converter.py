#!/usr/bin/env python3
"""
Purpose:
    Converts any schema-shaped document node (a `components.schemas` entry, a
    parameter's inline schema, ...) into a `Schema` by re-serializing the node
    and re-parsing the text, then stamps the fixed dialect and identifier.
"""
from __future__ import annotations

import logging

import yaml
from pydantic import ValidationError

from oaschema.core.constants import SCHEMA_DIALECT, SCHEMA_ID
from oaschema.core.exceptions import ConversionError
from oaschema.core.formatting import format_pydantic_errors_simple
from oaschema.core.schema.schema import Schema
from oaschema.core.yaml_nodes import load_text, node_to_text

logger = logging.getLogger(__name__)


def convert_node_to_schema(node: yaml.Node) -> Schema:
    """
    Convert a definition node into a standalone `Schema`.

    `$schema` and `$id` are always overwritten with `SCHEMA_DIALECT` and
    `SCHEMA_ID`, whatever the node declared. The node itself is not modified.

    Raises:
        ConversionError: if the node cannot be serialized, the text does not
            load as a mapping, or a value does not fit its Schema field.
    """
    text = node_to_text(node)

    try:
        data = load_text(text)
    except yaml.YAMLError as exc:
        raise ConversionError(f"Unable to re-parse schema node: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConversionError(f"Schema node must be a mapping, got {type(data).__name__}")

    try:
        schema = Schema.from_dict(data)
    except ValidationError as exc:
        raise ConversionError(
            "Schema node does not match the schema model",
            details=format_pydantic_errors_simple(exc),
        ) from exc

    schema.schema_dialect = SCHEMA_DIALECT
    schema.id = SCHEMA_ID
    logger.debug("Converted schema node (type=%s, %d properties)", schema.type, len(schema.properties or {}))
    return schema
