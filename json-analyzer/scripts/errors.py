#!/usr/bin/env python3
# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Exception hierarchy for json-analyzer."""

from __future__ import annotations


class JsonAnalyzerError(Exception):
    """Base class for all json-analyzer errors."""


class JsonSyntaxError(JsonAnalyzerError):
    """Raised when input text is not valid JSON."""

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        colno: int | None = None,
        pos: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.lineno = lineno
        self.colno = colno
        self.pos = pos


class DepthExceeded(JsonAnalyzerError):
    """Raised when a document nests deeper than the configured maximum."""

    def __init__(self, max_depth: int, where: str = "", limit_name: str = "maximum nesting depth") -> None:
        detail = f" at {where}" if where else ""
        super().__init__(f"{limit_name} {max_depth} exceeded{detail}")
        self.max_depth = max_depth
        self.where = where
        self.limit_name = limit_name


class _ParseFailure(JsonAnalyzerError):
    """Operation-level wrapper around a JsonSyntaxError."""

    action = "process"

    def __init__(self, syntax_message: str, action: str | None = None) -> None:
        super().__init__(f"cannot {action or self.action} JSON: {syntax_message}")
        self.syntax_message = syntax_message


class FormatError(_ParseFailure):
    action = "format"


class AnalysisError(_ParseFailure):
    action = "analyze"


class SchemaError(_ParseFailure):
    action = "generate schema for"


class PathError(_ParseFailure):
    action = "search path in"


__all__ = [
    "AnalysisError",
    "DepthExceeded",
    "FormatError",
    "JsonAnalyzerError",
    "JsonSyntaxError",
    "PathError",
    "SchemaError",
]
