#!/usr/bin/env python3
# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Single entry point dispatching to the json-analyzer commands."""

from __future__ import annotations

import sys
from typing import Callable

import analyze
import lookup
import minify
import pretty
import schema
import validate

COMMANDS: dict[str, Callable[[list[str] | None], int]] = {
    "validate": validate.main,
    "format": pretty.main,
    "minify": minify.main,
    "analyze": analyze.main,
    "schema": schema.main,
    "path": lookup.main,
}

USAGE = "usage: json-analyzer {" + ",".join(COMMANDS) + "} JSON [options]\navailable commands: " + ", ".join(COMMANDS)


def main(argv: list[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(USAGE)
        return 0

    command = COMMANDS.get(args[0].lower())
    if command is None:
        print(USAGE)
        return 0
    return command(args[1:])


if __name__ == "__main__":
    raise SystemExit(main())
