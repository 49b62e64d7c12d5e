#!/usr/bin/env python3
"""
Purpose:
    Helpers around PyYAML representation nodes (`yaml.Node`), the generic
    document-tree type handled by oaschema: composing text into nodes,
    re-serializing nodes to canonical YAML, locating child nodes, and turning
    YAML text into JSON bytes for the validation engine.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Union

import yaml
from yaml.representer import SafeRepresenter
from yaml.resolver import BaseResolver

from oaschema.core.constants import DEFAULT_TEXT_ENCODING
from oaschema.core.exceptions import ConversionError

logger = logging.getLogger(__name__)

PathSegment = Union[str, int]

TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class PlainTimestampLoader(yaml.SafeLoader):
    """SafeLoader that leaves timestamp-looking scalars as the text they were written as."""


PlainTimestampLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


# --- Composing --- #

def compose_text(text: str) -> yaml.Node | None:
    """
    Parse YAML (or JSON) text into its root node without constructing Python objects.

    Returns None for an empty document.

    Raises:
        ConversionError: on YAML syntax errors or when the stream holds more than one document.
    """
    try:
        return yaml.compose(text, Loader=yaml.SafeLoader)
    except yaml.YAMLError as exc:
        raise ConversionError(f"Unable to parse YAML: {exc}") from exc


def compose_file(path: Union[str, Path]) -> yaml.Node | None:
    """
    Read a YAML/JSON file and compose its root node.

    Raises:
        FileNotFoundError: if the file does not exist
        ConversionError: if the file is not a single valid YAML document
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"The file {str(p)!r} does not exist")
    logger.debug("Composing YAML node from %s", p)
    return compose_text(p.read_text(encoding=DEFAULT_TEXT_ENCODING))


def represent(data: Any) -> yaml.Node:
    """
    Build a node from plain Python data (dict/list/scalars), keeping mapping order.

    Raises:
        ConversionError: if the data holds values the safe representer cannot express.
    """
    representer = SafeRepresenter(sort_keys=False)
    try:
        return representer.represent_data(data)
    except yaml.YAMLError as exc:
        raise ConversionError(f"Unable to represent {type(data).__name__} as a YAML node: {exc}") from exc


# --- Serializing --- #

def node_to_text(node: yaml.Node) -> str:
    """
    Re-serialize a node to canonical YAML text.

    Raises:
        ConversionError: if `node` is not a YAML node or cannot be emitted.
    """
    if not isinstance(node, yaml.Node):
        raise ConversionError(f"Expected a YAML node, got {type(node).__name__}")
    try:
        return yaml.serialize(node, Dumper=yaml.SafeDumper, allow_unicode=True)
    except (yaml.YAMLError, TypeError, AttributeError) as exc:
        # malformed nodes (e.g. non-string scalar values) surface as TypeError/AttributeError
        raise ConversionError(f"Unable to serialize YAML node: {exc}") from exc


def wrap_in_sequence(node: yaml.Node) -> yaml.SequenceNode:
    """Return a new one-element sequence node holding `node` (the input is untouched)."""
    return yaml.SequenceNode(tag=BaseResolver.DEFAULT_SEQUENCE_TAG, value=[node])


def load_text(text: str) -> Any:
    """
    Load YAML text into plain Python data with `PlainTimestampLoader`.

    Raises:
        yaml.YAMLError: on malformed YAML (callers wrap it with their own context).
    """
    return yaml.load(text, Loader=PlainTimestampLoader)


def yaml_to_json(text: str) -> bytes:
    """
    Convert YAML text to JSON bytes.

    Timestamp-looking scalars stay strings, spelled as written. Values JSON
    cannot hold (NaN/Infinity, binary blobs, complex mapping keys) fail the
    conversion.

    Raises:
        ConversionError: on YAML errors or non-JSON values.
    """
    try:
        data = load_text(text)
    except yaml.YAMLError as exc:
        raise ConversionError(f"Unable to parse YAML: {exc}") from exc
    try:
        dumped = json.dumps(data, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise ConversionError(f"Unable to convert YAML to JSON: {exc}") from exc
    return dumped.encode(DEFAULT_TEXT_ENCODING)


# --- Navigation --- #

def find_node(root: yaml.Node, path: Iterable[PathSegment]) -> yaml.Node:
    """
    Walk mapping keys and sequence indexes from `root` to a child node.

    Example:
        find_node(root, ("components", "schemas", "Pet"))

    Raises:
        KeyError: if a segment does not exist (the message names the full path walked).
    """
    current = root
    walked: list[str] = []
    for segment in path:
        walked.append(str(segment))
        child = _child(current, segment)
        if child is None:
            raise KeyError(f"No node at {'/'.join(walked)!r}")
        current = child
    return current


# --- Internals --- #

def _child(node: yaml.Node, segment: PathSegment) -> yaml.Node | None:
    if isinstance(node, yaml.MappingNode):
        for key_node, value_node in node.value:
            if isinstance(key_node, yaml.ScalarNode) and key_node.value == str(segment):
                return value_node
        return None
    if isinstance(node, yaml.SequenceNode):
        try:
            index = int(segment)
        except ValueError:
            return None
        if 0 <= index < len(node.value):
            return node.value[index]
    return None
