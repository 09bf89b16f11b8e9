#!/usr/bin/env python3
# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Strip insignificant whitespace from JSON text."""

from __future__ import annotations

import argparse
import logging
import sys

from common import add_common_arguments, configure_logging, parse_json, read_text, serialize
from errors import FormatError, JsonAnalyzerError, JsonSyntaxError

log = logging.getLogger(__name__)


def minify_json(text: str) -> str:
    try:
        parsed = parse_json(text)
    except JsonSyntaxError as err:
        raise FormatError(err.message, action="minify") from err
    return serialize(parsed)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="json-analyzer minify", description="Minify JSON text.")
    add_common_arguments(parser, depth_guard=False)
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        output = minify_json(read_text(args.text, args.file))
    except JsonAnalyzerError as err:
        log.error("%s", err)
        return 1
    sys.stdout.write(output + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
