#!/usr/bin/env python3
"""
Purpose:
    Defines the ParsedSchema model for LogSchema: the validated, immutable
    description of timestamp formats, named variables and delimiter
    characters consumed by the log parser.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, model_validator

from logschema.core.constants import (
    DELIMITERS_KEY, MAX_ASCII_CODE, TIMESTAMP_KEY, VARIABLES_KEY,
)
from logschema.core.document_loader import load_document, read_document
from logschema.core.regex_parser import RegexParser
from logschema.core.schema.builders import (
    build_delimiter_set, build_timestamp_entries, build_variable_entries, require_key,
)
from logschema.core.schema.entries import (
    SchemaEntry, TimestampSchemaEntry, VariableSchemaEntry,
)


# --- Model --- #

class ParsedSchema(BaseModel):
    """
    A fully validated log schema.

    Fields:
    -------
    entries:
        timestamp entries (in declaration order) followed by variable entries
    delimiters:
        ASCII codes of the delimiter characters

    Notes:
    ------
    Instances are only produced by a complete, successful build; any failure
    raises before a `ParsedSchema` exists. There is no mutation surface.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    entries: tuple[SchemaEntry, ...] = Field(default_factory=tuple)
    delimiters: frozenset[int] = Field(default_factory=frozenset)

    # --- Invariants --- #

    @model_validator(mode="after")
    def _check_invariants(self) -> "ParsedSchema":
        out_of_range = sorted(c for c in self.delimiters if not 0 <= c <= MAX_ASCII_CODE)
        if out_of_range:
            raise ValueError(f"Delimiter codes outside ASCII range: {out_of_range}")
        seen_variable = False
        for entry in self.entries:
            match entry:
                case VariableSchemaEntry():
                    seen_variable = True
                case TimestampSchemaEntry() if seen_variable:
                    raise ValueError("Timestamp entries must precede variable entries")
        return self

    # --- Query API --- #

    def get_entries(self) -> tuple[SchemaEntry, ...]:
        """All entries: timestamps first, then variables."""
        return self.entries

    def has_delimiter(self, ch: Any) -> bool:
        """
        Return True if `ch` is one of the schema's delimiters.

        Non-ASCII characters, and anything that is not a single character,
        are simply not delimiters; this never raises.
        """
        if not isinstance(ch, str) or len(ch) != 1:
            return False
        code = ord(ch)
        if code > MAX_ASCII_CODE:
            return False
        return code in self.delimiters

    def timestamp_entries(self) -> List[TimestampSchemaEntry]:
        """Timestamp entries in trial order."""
        return [e for e in self.entries if isinstance(e, TimestampSchemaEntry)]

    def variable_entries(self) -> List[VariableSchemaEntry]:
        """Variable entries in declaration order."""
        return [e for e in self.entries if isinstance(e, VariableSchemaEntry)]

    def get_variable(self, name: str) -> Optional[VariableSchemaEntry]:
        """Return the variable entry called `name`, or None."""
        return next((e for e in self.variable_entries() if e.name == name), None)

    def delimiter_chars(self) -> str:
        """Delimiters as a string, sorted by code."""
        return "".join(chr(c) for c in sorted(self.delimiters))

    def to_summary(self) -> Dict[str, Any]:
        """JSON-serializable view of the schema (patterns only, no trees)."""
        timestamps: List[str] = []
        variables: Dict[str, str] = {}
        for entry in self.entries:
            match entry:
                case TimestampSchemaEntry(pattern=pattern):
                    timestamps.append(pattern)
                case VariableSchemaEntry(name=name, pattern=pattern):
                    variables[name] = pattern
        return {
            TIMESTAMP_KEY: timestamps,
            VARIABLES_KEY: variables,
            DELIMITERS_KEY: self.delimiter_chars(),
        }

    def __len__(self) -> int:
        return len(self.entries)

    # --- Construction --- #

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "ParsedSchema":
        """
        Build a schema from an already-parsed document.

        Sections are built in fixed order (timestamps, variables, delimiters);
        the first error aborts the build.

        Raises:
            MissingSchemaKeyError: if a required section is absent
            InvalidSchemaError: if a section has the wrong shape
            PatternSyntaxError: if a pattern fails to parse
            NonASCIICharacterError: if a delimiter is not ASCII
        """
        parser = RegexParser()

        timestamps = build_timestamp_entries(require_key(document, TIMESTAMP_KEY), parser)
        variables = build_variable_entries(require_key(document, VARIABLES_KEY), parser)
        delimiters = build_delimiter_set(require_key(document, DELIMITERS_KEY))

        schema = cls(entries=(*timestamps, *variables), delimiters=delimiters)
        logger.debug(
            "Built schema: {} timestamps, {} variables, {} delimiters",
            len(timestamps), len(variables), len(delimiters),
        )
        return schema

    @classmethod
    def parse_from_str(cls, text: str) -> "ParsedSchema":
        """
        Build a schema from YAML source text.

        Raises:
            DocumentParsingError: if the text is not a well-formed YAML mapping
            plus everything `from_document` raises
        """
        return cls.from_document(load_document(text))

    @classmethod
    def parse_from_file(cls, path: Union[str, Path]) -> "ParsedSchema":
        """
        Build a schema from a YAML file.

        Raises:
            SchemaIOError: if the file cannot be read
            plus everything `parse_from_str` raises
        """
        return cls.from_document(read_document(path))


# --- Module-level entry points --- #

def parse_from_str(text: str) -> ParsedSchema:
    return ParsedSchema.parse_from_str(text)


def parse_from_file(path: Union[str, Path]) -> ParsedSchema:
    return ParsedSchema.parse_from_file(path)
