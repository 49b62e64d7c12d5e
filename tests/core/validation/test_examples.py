#!/usr/bin/env python3
import logging

import pytest

from oaschema.core.schema.converter import convert_node_to_schema
from oaschema.core.schema.schema import Schema
from oaschema.core.validation.examples import (
    ExampleValidation,
    is_boolean_literal,
    is_integer_literal,
    is_number_literal,
    validate_examples,
)
from oaschema.core.yaml_nodes import compose_text


# --- Helpers --- #

def _single(prop_type, example) -> Schema:
    return Schema.from_dict({"properties": {"field": {"type": prop_type, "example": example}}})


# --- Type-directed checks --- #

@pytest.mark.parametrize("prop_type,example", [
    ("integer", "42"),
    ("integer", "-7"),
    ("integer", "+003"),
    ("number", "3.14"),
    ("number", "-1e10"),
    ("number", "42"),
    ("number", "inf"),
    ("boolean", "true"),
    ("boolean", "False"),
    ("boolean", "T"),
    ("boolean", "0"),
])
def test_valid_string_examples_produce_no_findings(prop_type, example):
    assert validate_examples(_single(prop_type, example)) == []


@pytest.mark.parametrize("prop_type,example", [
    ("integer", "abc"),
    ("integer", "4.0"),
    ("integer", " 4"),
    ("integer", "1_000"),
    ("integer", ""),
    ("number", "NaNish"),
    ("number", "3,14"),
    ("number", " 3.14"),
    ("boolean", "maybe"),
    ("boolean", "yes"),
    ("boolean", "tRUE"),
])
def test_invalid_string_examples_produce_one_finding(prop_type, example):
    findings = validate_examples(_single(prop_type, example))
    assert findings == [
        ExampleValidation(message=f"example value '{example}' in 'field' is not a valid {prop_type}")
    ]


def test_integer_finding_names_value_property_and_type():
    [finding] = validate_examples(_single("integer", "abc"))
    assert "abc" in finding.message
    assert "field" in finding.message
    assert "integer" in finding.message


@pytest.mark.parametrize("prop_type", ["string", "object", "array", "null", "file"])
def test_other_types_are_not_checked(prop_type):
    assert validate_examples(_single(prop_type, "anything")) == []


@pytest.mark.parametrize("prop_type,example", [
    ("integer", 42),
    ("integer", True),
    ("boolean", 1),
    ("number", "3.14"),
    ("string", 42),
    ("integer", {"a": "b"}),
    ("integer", ["x"]),
])
def test_non_string_examples_are_skipped(prop_type, example):
    # only the "3.14" case is a string, and it parses
    assert validate_examples(_single(prop_type, example)) == []


def test_yaml_native_examples_are_skipped_but_quoted_ones_checked():
    node = compose_text(
        "properties:\n"
        "  flag:\n    type: integer\n    example: true\n"
        "  count:\n    type: boolean\n    example: 3\n"
        "  quoted:\n    type: boolean\n    example: '3'\n"
    )
    findings = validate_examples(convert_node_to_schema(node))
    assert [f.message for f in findings] == ["example value '3' in 'quoted' is not a valid boolean"]


# --- Walk --- #

def test_no_properties_gives_no_findings():
    assert validate_examples(Schema()) == []
    assert validate_examples(Schema(type="string", example="abc")) == []


def test_nested_object_properties_are_reached():
    schema = Schema.from_dict({
        "properties": {
            "a": {"type": "object", "properties": {"b": {"type": "integer", "example": "x"}}},
        },
    })
    findings = validate_examples(schema)
    assert len(findings) == 1
    assert "'b'" in findings[0].message


def test_property_with_type_and_example_is_not_descended():
    schema = Schema.from_dict({
        "properties": {
            "a": {
                "type": "object",
                "example": {"b": 1},
                "properties": {"b": {"type": "integer", "example": "x"}},
            },
        },
    })
    assert validate_examples(schema) == []


def test_explicit_null_example_counts_as_missing():
    schema = Schema.from_dict({
        "properties": {
            "a": {"type": "object", "example": None, "properties": {"b": {"type": "integer", "example": "x"}}},
        },
    })
    assert len(validate_examples(schema)) == 1


def test_findings_follow_walk_order():
    schema = Schema.from_dict({
        "properties": {
            "first": {"type": "integer", "example": "one"},
            "wrapper": {"properties": {
                "inner": {"type": "number", "example": "two"},
                "deeper": {"properties": {"leaf": {"type": "boolean", "example": "three"}}},
            }},
            "last": {"type": "integer", "example": "four"},
        },
    })
    values = [f.message.split("'")[1] for f in validate_examples(schema)]
    assert values == ["one", "two", "three", "four"]


def test_findings_are_immutable():
    [finding] = validate_examples(_single("integer", "abc"))
    with pytest.raises(AttributeError):
        finding.message = "changed"  # type: ignore[misc]


# --- Depth & cycles --- #

def _chain(depth: int) -> Schema:
    leaf: dict = {"type": "integer", "example": "bad"}
    for _ in range(depth):
        leaf = {"properties": {"p": leaf}}
    return Schema.from_dict(leaf)


def test_depth_limit_stops_descent_with_warning(caplog):
    caplog.set_level(logging.WARNING, logger="oaschema")
    schema = _chain(5)  # leaf sits at depth 5
    assert validate_examples(schema, max_depth=3) == []
    assert "deeper than 3 levels" in caplog.text


def test_depth_within_limit_reaches_leaf():
    assert len(validate_examples(_chain(5), max_depth=5)) == 1
    assert len(validate_examples(_chain(5))) == 1


def test_cycle_terminates_with_warning(caplog):
    caplog.set_level(logging.WARNING, logger="oaschema")
    # a self-reference cannot pass assignment validation, so mutate the dict in place
    loop = Schema(properties={})
    loop.properties["self"] = loop
    loop.properties["leaf"] = Schema(type="integer", example="x")
    root = Schema(properties={"loop": loop})

    findings = validate_examples(root)

    assert [f.message for f in findings] == ["example value 'x' in 'leaf' is not a valid integer"]
    assert "cycle" in caplog.text


def test_shared_subschema_is_checked_at_each_use():
    shared = Schema(properties={"n": Schema(type="integer", example="x")})
    root = Schema(properties={"a": shared, "b": shared})
    assert len(validate_examples(root)) == 2


# --- Literal parsers --- #

@pytest.mark.parametrize("text,expected", [
    ("12", True),
    ("-0", True),
    ("9223372036854775807", True),
    ("-9223372036854775808", True),
    ("9223372036854775808", False),
    ("99999999999999999999", False),
    ("1.0", False),
    ("", False),
    ("٣", False),
])
def test_is_integer_literal(text, expected):
    assert is_integer_literal(text) is expected


@pytest.mark.parametrize("text,expected", [
    ("1.5", True),
    ("1e-3", True),
    ("1e-500", True),
    ("nan", True),
    ("-Infinity", True),
    ("1e500", False),
    ("-1e500", False),
    ("١٫٥", False),
    ("١", False),
    ("1_0", False),
    ("", False),
])
def test_is_number_literal(text, expected):
    assert is_number_literal(text) is expected


@pytest.mark.parametrize("text,expected", [("1", True), ("TRUE", True), ("f", True), ("yes", False), ("", False)])
def test_is_boolean_literal(text, expected):
    assert is_boolean_literal(text) is expected


def test_out_of_range_examples_are_reported():
    findings = validate_examples(Schema.from_dict({
        "properties": {
            "big": {"type": "integer", "example": "99999999999999999999"},
            "huge": {"type": "number", "example": "1e500"},
        },
    }))
    assert [f.message for f in findings] == [
        "example value '99999999999999999999' in 'big' is not a valid integer",
        "example value '1e500' in 'huge' is not a valid number",
    ]


def test_unquoted_date_example_is_checked_as_text():
    node = compose_text("properties:\n  when:\n    type: integer\n    example: 2024-01-01\n")
    findings = validate_examples(convert_node_to_schema(node))
    assert [f.message for f in findings] == ["example value '2024-01-01' in 'when' is not a valid integer"]
