#!/usr/bin/env python3
from __future__ import annotations

import sys

from oaschema.cli.schema import load_schema
from oaschema.core.app_context import AppContext
from oaschema.core.exceptions import ConversionError
from oaschema.core.validation.examples import validate_examples


def check_examples(args, ctx: AppContext) -> int:
    try:
        schema = load_schema(args.file, args.pointer)
    except (ConversionError, FileNotFoundError, KeyError) as e:
        print(f"{args.file}: {e}", file=sys.stderr)
        return 2

    findings = validate_examples(schema, max_depth=ctx.max_schema_depth)
    if not findings:
        print(f"{args.file}: Examples OK")
        return 0

    print(f"{args.file}: {len(findings)} invalid example(s)")
    for f in findings:
        print(f"  - {f.message}")
    return 1


def register(subparser):
    parser = subparser.add_parser("examples", help="Check property examples against their declared types.")
    parser.add_argument("file", help="Document holding the schema.")
    parser.add_argument("--pointer", "-p", default="", help="Path to the schema node inside the document.")
    parser.set_defaults(func=check_examples)
