#!/usr/bin/env python3
"""
Core constants used across LogSchema.

- Section keys: the three required top-level keys of a schema document.
- Character limits: the highest code point accepted as a delimiter.
- File handling: supported extensions and default text encoding.
"""

from typing import Final

# --- Schema document keys --- #

# Ordered list of timestamp patterns (trial precedence follows declaration order)
TIMESTAMP_KEY: Final[str] = "timestamp"

# Mapping of variable name -> pattern
VARIABLES_KEY: Final[str] = "variables"

# String of single-byte delimiter characters
DELIMITERS_KEY: Final[str] = "delimiters"

# Order in which sections are extracted and built
SECTION_KEYS: Final[tuple[str, ...]] = (TIMESTAMP_KEY, VARIABLES_KEY, DELIMITERS_KEY)


# --- Characters --- #

# Delimiters must fit in a single byte of 7-bit ASCII
MAX_ASCII_CODE: Final[int] = 0x7F


# --- File handling --- #

# Supported schema file extensions
SUPPORTED_SCHEMA_EXT: Final[frozenset[str]] = frozenset({".yaml", ".yml"})

# Default text encoding
DEFAULT_TEXT_ENCODING: Final[str] = "utf-8"


# --- Runtime guard --- #
def validate_constants():
    """
    Ensure constants are valid at runtime.
    """
    if len(set(SECTION_KEYS)) != len(SECTION_KEYS):
        raise RuntimeError(f"Schema section keys must be distinct, got {SECTION_KEYS!r}")
    if not all(k and k.strip() == k for k in SECTION_KEYS):
        raise RuntimeError(f"Schema section keys must be non-empty and unpadded, got {SECTION_KEYS!r}")

validate_constants()
