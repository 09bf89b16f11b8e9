"""Tests for single-sample schema generation."""

from __future__ import annotations

import pytest

from common import Limits
from errors import DepthExceeded, SchemaError
from schema import generate_schema


def test_simple_object() -> None:
    assert generate_schema('{"n":1}') == {
        "type": "object",
        "properties": {"n": {"type": "number"}},
        "required": ["n"],
    }


def test_required_lists_every_key_in_order() -> None:
    schema = generate_schema('{"z": null, "a": "x", "m": false}')
    assert schema["required"] == ["z", "a", "m"]
    assert schema["properties"] == {
        "z": {"type": "null"},
        "a": {"type": "string"},
        "m": {"type": "boolean"},
    }


def test_array_items_come_from_first_element_only() -> None:
    assert generate_schema('[1, "two", {"three": 3}]') == {
        "type": "array",
        "items": {"type": "number"},
    }


def test_empty_array_items_are_any() -> None:
    assert generate_schema('{"tags": []}')["properties"]["tags"] == {
        "type": "array",
        "items": {"type": "any"},
    }


def test_empty_object() -> None:
    assert generate_schema("{}") == {"type": "object", "properties": {}, "required": []}


def test_parse_failure_raises_schema_error() -> None:
    with pytest.raises(SchemaError):
        generate_schema("[1, 2")


def test_depth_guard() -> None:
    with pytest.raises(DepthExceeded):
        generate_schema("[[[1]]]", Limits(max_depth=1))
