#!/usr/bin/env python3

import json
import sys

import yaml

from oaschema.core.app_context import AppContext
from oaschema.core.exceptions import ConversionError
from oaschema.core.schema.converter import convert_node_to_schema
from oaschema.core.schema.schema import Schema
from oaschema.core.utils import split_pointer
from oaschema.core.yaml_nodes import compose_file, find_node


def register(subparsers):
    sp = subparsers.add_parser("schema", help="Schema utilities")
    sps = sp.add_subparsers(dest="schema_cmd")

    # default when user runs: `oaschema schema`
    def schema_default(args, ctx: AppContext) -> int:
        sp.print_help()
        return 1
    sp.set_defaults(func=schema_default)

    ssp = sps.add_parser("show", help="Convert a schema node and print it as JSON Schema")
    ssp.add_argument("file", help="YAML/JSON document holding the schema")
    ssp.add_argument("--pointer", "-p", default="", help="Slash-separated path to the schema node (e.g. components/schemas/Pet)")
    ssp.add_argument("--yaml", action="store_true", help="Print YAML instead of JSON")
    ssp.set_defaults(func=show_schema)


def show_schema(args, ctx: AppContext) -> int:
    try:
        schema = load_schema(args.file, args.pointer)
    except (ConversionError, FileNotFoundError, KeyError) as e:
        print(f"{args.file}: {e}", file=sys.stderr)
        return 2

    if args.yaml:
        print(schema.to_yaml(), end="")
    else:
        print(json.dumps(schema.to_dict(), indent=2, default=str))
    return 0


# --- Shared loaders (used by validate/examples) --- #

def load_node(path: str, pointer: str = "") -> yaml.Node:
    """
    Compose `path` and return the node at `pointer` (the root when empty).

    Raises:
        FileNotFoundError, ConversionError, KeyError
    """
    root = compose_file(path)
    if root is None:
        raise ConversionError("Document is empty")
    return find_node(root, split_pointer(pointer))


def load_schema(path: str, pointer: str = "") -> Schema:
    return convert_node_to_schema(load_node(path, pointer))
