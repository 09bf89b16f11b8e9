"""Tests for dotted path resolution."""

from __future__ import annotations

import pytest

from common import Limits
from errors import DepthExceeded, PathError
from lookup import MISSING, find_by_path, resolve_path, split_path

PERSON = '{"name": "Taro", "hobbies": ["reading", "films"], "address": {"city": "Shibuya"}, "note": null}'


def test_nested_lookup() -> None:
    assert find_by_path('{"a":{"b":2}}', "a.b") == 2


def test_missing_key_is_absent_not_error() -> None:
    assert find_by_path('{"a":1}', "a.c") is MISSING


def test_invalid_json_raises_path_error() -> None:
    with pytest.raises(PathError):
        find_by_path("not json", "a")


def test_index_needs_its_own_segment() -> None:
    assert find_by_path(PERSON, "hobbies.[0]") == "reading"
    assert find_by_path(PERSON, "hobbies[0]") is MISSING


def test_combined_segment_matches_literal_key() -> None:
    assert find_by_path('{"hobbies[0]": "literal"}', "hobbies[0]") == "literal"


def test_index_bounds_and_type() -> None:
    assert find_by_path(PERSON, "hobbies.[1]") == "films"
    assert find_by_path(PERSON, "hobbies.[2]") is MISSING
    assert find_by_path(PERSON, "address.[0]") is MISSING
    assert find_by_path(PERSON, "hobbies.0") is MISSING


def test_null_value_is_found_but_not_traversed() -> None:
    assert find_by_path(PERSON, "note") is None
    assert find_by_path(PERSON, "note.anything") is MISSING


def test_whole_container_is_returned() -> None:
    assert find_by_path(PERSON, "address") == {"city": "Shibuya"}


def test_empty_path_is_an_empty_key() -> None:
    assert split_path("") == [""]
    assert find_by_path('{"": 5}', "") == 5
    assert find_by_path('{"a": 5}', "") is MISSING


def test_scalar_root_has_no_members() -> None:
    assert resolve_path("text", ["length"]) is MISSING


def test_missing_sentinel_is_falsy_singleton() -> None:
    assert not MISSING
    assert repr(MISSING) == "MISSING"
    assert type(MISSING)() is MISSING


def test_depth_guard() -> None:
    with pytest.raises(DepthExceeded):
        resolve_path({"a": {"b": {"c": 1}}}, ["a", "b", "c"], Limits(max_depth=1))
