#!/usr/bin/env python3
# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Re-indent JSON text."""

from __future__ import annotations

import argparse
import logging
import sys

from common import add_common_arguments, configure_logging, parse_json, read_text, serialize
from errors import FormatError, JsonAnalyzerError, JsonSyntaxError

log = logging.getLogger(__name__)

MAX_INDENT = 10


def format_json(text: str, indent: int = 2) -> str:
    """Pretty-print text with indent spaces; indent is clamped to 0..10, 0 meaning compact."""
    try:
        parsed = parse_json(text)
    except JsonSyntaxError as err:
        raise FormatError(err.message) from err
    indent = min(indent, MAX_INDENT)
    if indent < 1:
        return serialize(parsed)
    return serialize(parsed, indent=indent)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="json-analyzer format", description="Pretty-print JSON text.")
    add_common_arguments(parser, depth_guard=False)
    parser.add_argument("indent", nargs="?", type=int, default=2, help="Spaces per indent level (default 2).")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        output = format_json(read_text(args.text, args.file), args.indent)
    except JsonAnalyzerError as err:
        log.error("%s", err)
        return 1
    sys.stdout.write(output + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
