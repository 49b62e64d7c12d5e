#!/usr/bin/env python3
"""
Purpose:
    Exception hierarchy for oaschema.

    Schema violations are not exceptions; they are returned as data by the
    validator. These types cover the cases where an input could not be turned
    into something the validation engine understands.
"""
from __future__ import annotations

from typing import List, Optional


class OASchemaError(Exception):
    """Base exception for all oaschema errors."""


class ConversionError(OASchemaError):
    """
    A document node could not be re-serialized, re-parsed, or turned into JSON.

    `details` holds one-line diagnostics (e.g. flattened pydantic errors) when
    the underlying failure provides them.
    """

    def __init__(self, message: str, *, details: Optional[List[str]] = None):
        self.details = list(details or [])
        super().__init__(message)

    def __str__(self) -> str:
        base = super().__str__()
        if not self.details:
            return base
        return base + "\n" + "\n".join(f"  - {d}" for d in self.details)


class InvalidSchemaError(OASchemaError):
    """The validation engine rejected the serialized schema itself."""
