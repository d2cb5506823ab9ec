#!/usr/bin/env python3
"""
Purpose:
    Defines the schema entry models: one per recognized timestamp format and
    one per named variable. Both kinds share a single ordered sequence in a
    `ParsedSchema` and are told apart by their `kind` tag.
"""
from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from logschema.core.regex_parser import PatternAST, RegexParser


class SchemaEntryKind(str, Enum):
    """
    Closed set of entry kinds.

    - timestamp : one candidate timestamp format (order = trial precedence)
    - variable  : one named, capturable field
    """

    TIMESTAMP = "timestamp"
    VARIABLE = "variable"


class _EntryBase(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    pattern: str = Field(..., description="Source pattern string.")
    ast: PatternAST = Field(..., description="Grammar tree parsed from `pattern`.", repr=False)


class TimestampSchemaEntry(_EntryBase):
    """One timestamp format, tried in declaration order by the log parser."""

    kind: Literal[SchemaEntryKind.TIMESTAMP] = SchemaEntryKind.TIMESTAMP

    @classmethod
    def from_pattern(cls, pattern: str, parser: RegexParser) -> "TimestampSchemaEntry":
        """Parse `pattern` and wrap it as a timestamp entry."""
        return cls(pattern=pattern, ast=parser.parse(pattern))


class VariableSchemaEntry(_EntryBase):
    """A named variable field and the pattern that recognizes it."""

    kind: Literal[SchemaEntryKind.VARIABLE] = SchemaEntryKind.VARIABLE
    name: str = Field(..., description="Variable name (unique within a schema).")

    @classmethod
    def from_pattern(cls, name: str, pattern: str, parser: RegexParser) -> "VariableSchemaEntry":
        """Parse `pattern` and wrap it as a variable entry called `name`."""
        return cls(name=name, pattern=pattern, ast=parser.parse(pattern))


SchemaEntry = Annotated[
    Union[TimestampSchemaEntry, VariableSchemaEntry],
    Field(discriminator="kind"),
]
