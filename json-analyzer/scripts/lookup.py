#!/usr/bin/env python3
# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Resolve a dotted path to a value inside JSON.

Paths are split on ``.`` only. A segment that is exactly ``[N]`` indexes an
array; any other segment is an object key taken literally, so ``items[0]``
looks for a key named ``items[0]`` while ``items.[0]`` indexes ``items``.
"""

from __future__ import annotations

import argparse
import logging
import re
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
from errors import JsonAnalyzerError, JsonSyntaxError, PathError

log = logging.getLogger(__name__)

INDEX_SEGMENT_RE = re.compile(r"\[([0-9]+)\]")


class _Missing:
    """Result of a path lookup that found nothing; distinct from JSON null."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


def split_path(path: str) -> list[str]:
    return path.split(".")


def resolve_path(data: Any, segments: list[str], limits: Limits = DEFAULT_LIMITS) -> Any:
    """Walk segments from data, returning the value reached or MISSING."""
    current = data
    for level, segment in enumerate(segments):
        check_depth(level, limits, segment)
        kind = type_name(current)
        if kind == "null":
            return MISSING

        match = INDEX_SEGMENT_RE.fullmatch(segment)
        if match:
            index = int(match.group(1))
            if kind != "array" or index >= len(current):
                return MISSING
            current = current[index]
        else:
            if kind != "object" or segment not in current:
                return MISSING
            current = current[segment]
    return current


def find_by_path(text: str, path: str, limits: Limits = DEFAULT_LIMITS) -> Any:
    try:
        parsed = parse_json(text)
    except JsonSyntaxError as err:
        raise PathError(err.message) from err
    found = resolve_path(parsed, split_path(path), limits)
    if found is MISSING:
        log.debug("path %r not found", path)
    return found


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="json-analyzer path", description="Look up a value by dotted path.")
    add_common_arguments(parser)
    parser.add_argument("path", help="Dotted path, e.g. 'address.city' or 'hobbies.[0]'.")
    parser.add_argument("--compact", action="store_true", help="Emit compact JSON output.")
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        found = find_by_path(read_text(args.text, args.file), args.path, limits_from_args(args))
    except JsonAnalyzerError as err:
        log.error("%s", err)
        return 1
    if found is MISSING:
        write_json({"found": False, "path": args.path}, compact=args.compact)
    else:
        write_json({"found": True, "path": args.path, "value": found}, compact=args.compact)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
