#!/usr/bin/env python3
# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Shared helpers for json-analyzer scripts."""

from __future__ import annotations

import json
import logging
import math
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from errors import DepthExceeded, JsonSyntaxError

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Limits:
    """Thresholds for structural findings and the traversal depth guard."""

    max_array_length: int = 10_000
    max_object_keys: int = 1_000
    max_key_length: int = 100
    max_string_length: int = 100_000
    max_depth: int = 512


DEFAULT_LIMITS = Limits()


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr, debug level when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )


def read_text(text: str | None, path: str | None = None) -> str:
    """Return JSON text from an argument, a file path, or stdin when text is '-' or None."""
    if path:
        return Path(path).read_text(encoding="utf-8")
    if text is None or text == "-":
        return sys.stdin.read()
    return text


def write_json(data: Any, compact: bool = False) -> None:
    """Write JSON to stdout, keeping key order."""
    data = to_finite(data)
    if compact:
        json.dump(data, sys.stdout, ensure_ascii=False, separators=(",", ":"), allow_nan=False)
    else:
        json.dump(data, sys.stdout, ensure_ascii=False, indent=2, allow_nan=False)
    sys.stdout.write("\n")


def _reject_constant(name: str) -> Any:
    raise JsonSyntaxError(f"Unexpected token {name}")


def _parse_int(literal: str) -> int | float:
    # Literals past the int string-conversion limit are read as float64.
    try:
        return int(literal)
    except ValueError:
        return float(literal)


def parse_json(text: str) -> Any:
    """Parse strict JSON text, raising JsonSyntaxError on malformed input."""
    try:
        return json.loads(text, parse_constant=_reject_constant, parse_int=_parse_int)
    except json.JSONDecodeError as err:
        raise JsonSyntaxError(str(err), err.lineno, err.colno, err.pos) from err
    except RecursionError as err:
        raise DepthExceeded(sys.getrecursionlimit(), "parse", limit_name="decoder recursion limit") from err


def to_finite(value: Any) -> Any:
    """Copy of value with non-finite numbers replaced by None, as JSON has no spelling for them."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, list):
        return [to_finite(item) for item in value]
    if isinstance(value, dict):
        return {key: to_finite(inner) for key, inner in value.items()}
    return value


def serialize(value: Any, indent: int | None = None) -> str:
    """Serialize a parsed value; compact when indent is None."""
    try:
        value = to_finite(value)
        if indent is None:
            return json.dumps(value, ensure_ascii=False, separators=(",", ":"), allow_nan=False)
        return json.dumps(value, ensure_ascii=False, indent=indent, allow_nan=False)
    except RecursionError as err:
        raise DepthExceeded(sys.getrecursionlimit(), "serialize", limit_name="encoder recursion limit") from err


def type_name(value: Any) -> str:
    """Map python value to its JSON type name."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    raise TypeError(f"not a JSON value: {type(value).__name__}")


def check_depth(level: int, limits: Limits, where: str = "") -> None:
    if level > limits.max_depth:
        raise DepthExceeded(limits.max_depth, where)


def calculate_depth(value: Any, limits: Limits = DEFAULT_LIMITS, current: int = 0) -> int:
    """Nesting depth of value; scalars and empty containers add no level."""
    check_depth(current, limits)
    kind = type_name(value)
    if kind == "array":
        children = value
    elif kind == "object":
        children = value.values()
    else:
        return current
    deepest = current
    for child in children:
        deepest = max(deepest, calculate_depth(child, limits, current + 1))
    return deepest


def add_common_arguments(parser: Any, depth_guard: bool = True) -> None:
    """Register the input and output options shared by every command."""
    parser.add_argument("text", nargs="?", default="-", help="JSON text, or '-' for stdin.")
    parser.add_argument("--file", help="Read JSON from this file instead of the text argument.")
    if depth_guard:
        parser.add_argument("--max-depth", type=int, default=DEFAULT_LIMITS.max_depth, help="Maximum nesting depth to traverse.")
    parser.add_argument("--verbose", action="store_true", help="Log debug details to stderr.")


def limits_from_args(args: Any) -> Limits:
    """Build Limits from parsed arguments, keeping defaults for options a command lacks."""
    overrides: dict[str, int] = {}
    for field in ("max_array_length", "max_object_keys", "max_key_length", "max_string_length", "max_depth"):
        value = getattr(args, field, None)
        if value is not None:
            overrides[field] = value
    return Limits(**overrides)
