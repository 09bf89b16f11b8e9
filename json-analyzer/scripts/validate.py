#!/usr/bin/env python3
# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Validate JSON syntax and report structural issues."""

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
from errors import DepthExceeded, JsonSyntaxError

log = logging.getLogger(__name__)

ROOT_LABEL = "root"
SYNTAX_ERROR_PREFIX = "JSON syntax error"


@dataclass
class ValidationResult:
    is_valid: bool
    errors: list[str] = field(default_factory=list)
    formatted: str | None = None
    size: int = 0
    depth: int = 0

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"isValid": self.is_valid, "errors": list(self.errors)}
        if self.formatted is not None:
            out["formatted"] = self.formatted
        out["size"] = self.size
        out["depth"] = self.depth
        return out


def check_structure(value: Any, limits: Limits = DEFAULT_LIMITS, label: str = ROOT_LABEL, level: int = 0) -> list[str]:
    """Collect structural findings for value and everything below it."""
    check_depth(level, limits, label)
    findings: list[str] = []
    kind = type_name(value)

    if kind == "array":
        if len(value) > limits.max_array_length:
            findings.append(f"{label}: array too large ({len(value)} elements)")
        for idx, item in enumerate(value):
            findings.extend(check_structure(item, limits, f"{label}[{idx}]", level + 1))
    elif kind == "object":
        if len(value) > limits.max_object_keys:
            findings.append(f"{label}: too many keys ({len(value)} keys)")
        for key in value:
            if len(key) > limits.max_key_length:
                findings.append(f"{label}.{key}: key name too long")
            if key.strip() != key:
                findings.append(f"{label}.{key}: key has extraneous whitespace")
        for key, inner in value.items():
            findings.extend(check_structure(inner, limits, f"{label}.{key}", level + 1))
    elif kind == "string":
        if len(value) > limits.max_string_length:
            findings.append(f"{label}: string too long ({len(value)} characters)")

    return findings


def validate(text: str, limits: Limits = DEFAULT_LIMITS) -> ValidationResult:
    try:
        parsed = parse_json(text)
    except JsonSyntaxError as err:
        log.debug("syntax error: %s", err)
        return ValidationResult(
            is_valid=False,
            errors=[f"{SYNTAX_ERROR_PREFIX}: {err.message}"],
            size=len(text),
            depth=0,
        )

    findings = check_structure(parsed, limits)
    log.debug("structural scan found %d issue(s)", len(findings))
    return ValidationResult(
        is_valid=not findings,
        errors=findings,
        formatted=serialize(parsed, indent=2),
        size=len(text),
        depth=calculate_depth(parsed, limits),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="json-analyzer validate", description="Validate JSON text and report structural issues.")
    add_common_arguments(parser)
    parser.add_argument("--max-array-length", type=int, help="Flag arrays with more elements than this.")
    parser.add_argument("--max-object-keys", type=int, help="Flag objects with more keys than this.")
    parser.add_argument("--max-key-length", type=int, help="Flag key names longer than this.")
    parser.add_argument("--max-string-length", type=int, help="Flag string values longer than this.")
    parser.add_argument("--no-formatted", action="store_true", help="Omit the formatted document from the output.")
    parser.add_argument("--compact", action="store_true", help="Emit compact JSON output.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    text = read_text(args.text, args.file)
    try:
        result = validate(text, limits_from_args(args))
    except DepthExceeded as err:
        log.error("%s", err)
        return 1
    if args.no_formatted:
        result.formatted = None
    write_json(result.to_dict(), compact=args.compact)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
