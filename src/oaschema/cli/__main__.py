#!/usr/bin/env python3

import argparse
import sys

from oaschema.core.app_context import build_context
from oaschema.core.logging_config import configure_logging
from oaschema.cli import config, examples, schema, validate


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="oaschema", description="OpenAPI schema conversion and validation")
    parser.add_argument("--log-level", default=None, help="Override the configured log level (e.g. DEBUG).")
    subparsers = parser.add_subparsers(dest="command")

    # Register subcommands (they should accept ctx)
    schema.register(subparsers)
    validate.register(subparsers)
    examples.register(subparsers)
    config.register(subparsers)
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        ctx = build_context(log_level=args.log_level)
        configure_logging(ctx.log_level)
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    return args.func(args, ctx)


if __name__ == "__main__":
    sys.exit(main())
