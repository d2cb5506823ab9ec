#!/usr/bin/env python3
"""
Purpose:
    Exception types raised while loading and validating a log schema.

    Every build failure is reported as exactly one of these, the first one
    encountered; nothing is aggregated and no partial schema is returned.

    - SchemaIOError           the schema file could not be opened or read
    - DocumentParsingError    the source text is not a well-formed YAML mapping
    - MissingSchemaKeyError   a required top-level section is absent
    - InvalidSchemaError      a section (or an element of it) has the wrong shape
    - NonASCIICharacterError  a delimiter falls outside 7-bit ASCII
    - PatternSyntaxError      a timestamp/variable pattern is not a valid regex
"""
from __future__ import annotations

from typing import Optional

__all__ = [
    "LogSchemaError",
    "SchemaIOError",
    "DocumentParsingError",
    "MissingSchemaKeyError",
    "InvalidSchemaError",
    "NonASCIICharacterError",
    "PatternSyntaxError",
]


class LogSchemaError(Exception):
    """Base class for every error raised while building a schema."""


class SchemaIOError(LogSchemaError, OSError):
    """The schema source file could not be opened or read."""

    def __init__(self, path: str, detail: str):
        self.path = path
        self.detail = detail
        super().__init__(f"Failed to read schema file {path!r}: {detail}")


class DocumentParsingError(LogSchemaError, ValueError):
    """The schema source text is not a well-formed YAML mapping."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Invalid schema document: {detail}")


class MissingSchemaKeyError(LogSchemaError, ValueError):
    """One of the required top-level sections is absent."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Missing required schema key {key!r}")


class InvalidSchemaError(LogSchemaError, ValueError):
    """
    A present section has the wrong shape.

    `location` is a dotted path into the document (e.g. 'timestamp[2]',
    'variables.ip'); `reason` is a short description of the mismatch.
    """

    def __init__(self, location: str, reason: str):
        self.location = location
        self.reason = reason
        super().__init__(f"Invalid schema at {location}: {reason}")


class NonASCIICharacterError(LogSchemaError, ValueError):
    """A delimiter character is not representable in a single ASCII byte."""

    def __init__(self, character: str, index: int):
        self.character = character
        self.index = index
        super().__init__(
            f"Delimiter {character!r} (U+{ord(character):04X}) at index {index} is not an ASCII character"
        )


class PatternSyntaxError(LogSchemaError, ValueError):
    """A pattern string was rejected by the regular-expression grammar parser."""

    def __init__(self, pattern: str, msg: str, position: Optional[int] = None):
        self.pattern = pattern
        self.msg = msg
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Invalid pattern {pattern!r}: {msg}{where}")
