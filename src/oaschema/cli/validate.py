#!/usr/bin/env python3
from __future__ import annotations

import sys

from oaschema.cli.schema import load_node, load_schema
from oaschema.core.app_context import AppContext
from oaschema.core.exceptions import ConversionError, InvalidSchemaError
from oaschema.core.validation.validator import validate_node_against_schema


def validate(args, ctx: AppContext) -> int:
    try:
        schema = load_schema(args.schema, args.pointer)
        node = load_node(args.instance, args.instance_pointer)
        result = validate_node_against_schema(schema, node, is_array=args.array)
    except (ConversionError, InvalidSchemaError, FileNotFoundError, KeyError) as e:
        print(f"{args.instance}: {e}", file=sys.stderr)
        return 2

    if result.valid:
        print(f"{args.instance}: Validation Passed")
        return 0

    print(f"{args.instance}: Validation Failed")
    for message in result.messages():
        print(f"  - {message}")
    print(f"\n{len(result.errors)} violation(s).")
    return 1


def register(subparser):
    parser = subparser.add_parser("validate", help="Validate a YAML/JSON instance against a schema.")
    parser.add_argument("schema", help="Document holding the schema.")
    parser.add_argument("instance", help="Document holding the instance to check.")
    parser.add_argument("--pointer", "-p", default="", help="Path to the schema node inside the schema document.")
    parser.add_argument("--instance-pointer", default="", help="Path to the instance node inside the instance document.")
    parser.add_argument("--array", action="store_true", help="Validate the instance as a one-element array.")
    parser.set_defaults(func=validate)
