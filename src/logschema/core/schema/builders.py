#!/usr/bin/env python3
"""
Purpose:
    Section builders: turn the raw values of the three required top-level
    sections into validated schema entries and the delimiter set.

    Each builder fails on the first problem it finds and keeps nothing it has
    built so far; the caller never sees a partially built section.
"""
from __future__ import annotations

from typing import Any, List, Mapping

from loguru import logger

from logschema.core.constants import (
    DELIMITERS_KEY, MAX_ASCII_CODE, TIMESTAMP_KEY, VARIABLES_KEY,
)
from logschema.core.errors import (
    InvalidSchemaError, MissingSchemaKeyError, NonASCIICharacterError,
)
from logschema.core.formatting import format_location
from logschema.core.regex_parser import RegexParser
from logschema.core.schema.entries import TimestampSchemaEntry, VariableSchemaEntry


# --- Section lookup --- #

def require_key(document: Mapping[str, Any], key: str) -> Any:
    """Return `document[key]` or raise MissingSchemaKeyError naming `key`."""
    try:
        return document[key]
    except KeyError:
        raise MissingSchemaKeyError(key) from None


# --- Builders --- #

def build_timestamp_entries(value: Any, parser: RegexParser) -> List[TimestampSchemaEntry]:
    """
    Build timestamp entries from a sequence of pattern strings, in order.

    Raises:
        InvalidSchemaError: if `value` is not a list or an element is not a string.
        PatternSyntaxError: if an element is not a valid regular expression.
    """
    if not isinstance(value, list):
        raise InvalidSchemaError(TIMESTAMP_KEY, f"expected a sequence of patterns, got {_type_name(value)}")

    entries: List[TimestampSchemaEntry] = []
    for idx, item in enumerate(value):
        if not isinstance(item, str):
            raise InvalidSchemaError(
                format_location((TIMESTAMP_KEY, idx)), f"expected a pattern string, got {_type_name(item)}"
            )
        entries.append(TimestampSchemaEntry.from_pattern(item, parser))

    logger.debug("Built {} timestamp entries", len(entries))
    return entries


def build_variable_entries(value: Any, parser: RegexParser) -> List[VariableSchemaEntry]:
    """
    Build variable entries from a name -> pattern mapping, in mapping order.

    Raises:
        InvalidSchemaError: if `value` is not a mapping, or a name or pattern is not a string.
        PatternSyntaxError: if a pattern is not a valid regular expression.
    """
    if not isinstance(value, dict):
        raise InvalidSchemaError(VARIABLES_KEY, f"expected a mapping of name to pattern, got {_type_name(value)}")

    entries: List[VariableSchemaEntry] = []
    for name, pattern in value.items():
        if not isinstance(name, str):
            raise InvalidSchemaError(
                format_location((VARIABLES_KEY, repr(name))), f"expected a string name, got {_type_name(name)}"
            )
        if not isinstance(pattern, str):
            raise InvalidSchemaError(
                format_location((VARIABLES_KEY, name)), f"expected a pattern string, got {_type_name(pattern)}"
            )
        entries.append(VariableSchemaEntry.from_pattern(name, pattern, parser))

    logger.debug("Built {} variable entries", len(entries))
    return entries


def build_delimiter_set(value: Any) -> frozenset[int]:
    """
    Build the set of delimiter byte codes from a string of characters.

    An empty string yields an empty set; repeated characters collapse.

    Raises:
        InvalidSchemaError: if `value` is not a string.
        NonASCIICharacterError: on the first character outside 7-bit ASCII.
    """
    if not isinstance(value, str):
        raise InvalidSchemaError(DELIMITERS_KEY, f"expected a string of characters, got {_type_name(value)}")

    codes = set()
    for idx, ch in enumerate(value):
        code = ord(ch)
        if code > MAX_ASCII_CODE:
            raise NonASCIICharacterError(ch, idx)
        codes.add(code)

    logger.debug("Built {} delimiters", len(codes))
    return frozenset(codes)


# --- Internals --- #

def _type_name(value: Any) -> str:
    return "null" if value is None else type(value).__name__
