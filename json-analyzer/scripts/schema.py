#!/usr/bin/env python3
# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Generate a JSON-Schema-like description from a single JSON sample."""

from __future__ import annotations

import argparse
import logging
from typing import Any

from common import (
    DEFAULT_LIMITS,
    Limits,
    add_common_arguments,
    check_depth,
    configure_logging,
    limits_from_args,
    parse_json,
    read_text,
    type_name,
    write_json,
)
from errors import JsonAnalyzerError, JsonSyntaxError, SchemaError

log = logging.getLogger(__name__)


def infer_schema(value: Any, limits: Limits = DEFAULT_LIMITS, level: int = 0) -> dict[str, Any]:
    """Describe value. Arrays are typed by their first element only; every seen key is required."""
    check_depth(level, limits)
    kind = type_name(value)

    if kind == "array":
        if not value:
            return {"type": "array", "items": {"type": "any"}}
        return {"type": "array", "items": infer_schema(value[0], limits, level + 1)}

    if kind == "object":
        properties: dict[str, Any] = {}
        for key, inner in value.items():
            properties[key] = infer_schema(inner, limits, level + 1)
        return {"type": "object", "properties": properties, "required": list(value)}

    return {"type": kind}


def generate_schema(text: str, limits: Limits = DEFAULT_LIMITS) -> dict[str, Any]:
    try:
        parsed = parse_json(text)
    except JsonSyntaxError as err:
        raise SchemaError(err.message) from err
    return infer_schema(parsed, limits)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="json-analyzer schema", description="Show inferred schema for JSON text.")
    add_common_arguments(parser)
    parser.add_argument("--compact", action="store_true", help="Emit compact JSON output.")
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        schema = generate_schema(read_text(args.text, args.file), limits_from_args(args))
    except JsonAnalyzerError as err:
        log.error("%s", err)
        return 1
    write_json(schema, compact=args.compact)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
