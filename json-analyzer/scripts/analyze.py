#!/usr/bin/env python3
# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Collect key paths, value types and array lengths from JSON."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass, field
from typing import Any

from common import (
    DEFAULT_LIMITS,
    Limits,
    add_common_arguments,
    calculate_depth,
    check_depth,
    configure_logging,
    limits_from_args,
    parse_json,
    read_text,
    serialize,
    type_name,
    write_json,
)
from errors import AnalysisError, JsonAnalyzerError, JsonSyntaxError

log = logging.getLogger(__name__)


@dataclass
class Analysis:
    keys: list[str] = field(default_factory=list)
    types: dict[str, str] = field(default_factory=dict)
    array_lengths: dict[str, int] = field(default_factory=dict)
    depth: int = 0
    size: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "keys": list(self.keys),
            "types": dict(self.types),
            "arrayLengths": dict(self.array_lengths),
            "depth": self.depth,
            "size": self.size,
        }


def collect(value: Any, analysis: Analysis, limits: Limits = DEFAULT_LIMITS, path: str = "", level: int = 0) -> None:
    """Record type, array length and member keys for value and its descendants."""
    check_depth(level, limits, path or "root")
    kind = type_name(value)
    analysis.types[path or "root"] = kind

    if kind == "array":
        analysis.array_lengths[path or "root"] = len(value)
        for idx, item in enumerate(value):
            collect(item, analysis, limits, f"{path}[{idx}]", level + 1)
    elif kind == "object":
        member_paths = [f"{path}.{key}" if path else key for key in value]
        analysis.keys.extend(member_paths)
        for member_path, inner in zip(member_paths, value.values()):
            collect(inner, analysis, limits, member_path, level + 1)


def analyze_value(value: Any, limits: Limits = DEFAULT_LIMITS) -> Analysis:
    analysis = Analysis(depth=calculate_depth(value, limits), size=len(serialize(value)))
    collect(value, analysis, limits)
    return analysis


def analyze(text: str, limits: Limits = DEFAULT_LIMITS) -> Analysis:
    """Analyze JSON text; size is the compact re-serialized length, not the input length."""
    try:
        parsed = parse_json(text)
    except JsonSyntaxError as err:
        raise AnalysisError(err.message) from err
    analysis = analyze_value(parsed, limits)
    log.debug("collected %d key path(s), %d typed node(s)", len(analysis.keys), len(analysis.types))
    return analysis


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="json-analyzer analyze", description="Analyze JSON structure.")
    add_common_arguments(parser)
    parser.add_argument("--compact", action="store_true", help="Emit compact JSON output.")
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        analysis = analyze(read_text(args.text, args.file), limits_from_args(args))
    except JsonAnalyzerError as err:
        log.error("%s", err)
        return 1
    write_json(analysis.to_dict(), compact=args.compact)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
