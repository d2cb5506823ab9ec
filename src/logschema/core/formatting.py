#!/usr/bin/env python3
"""
Formatting helpers for LogSchema.

- Dotted/indexed locations into a schema document (used by InvalidSchemaError).
- Stable one-line rendering of build errors for the CLI.
"""
from __future__ import annotations

from typing import Any, Iterable, List


# --- Public API --- #

def format_location(loc: Iterable[Any]) -> str:
    """
    Convert a location tuple into a dotted path with index suffixes.

    Examples:
        ('timestamp', 1)       -> "timestamp[1]"
        ('variables', 'ip')    -> "variables.ip"
        (0, 'items')           -> "[0].items"
        ()                     -> "<root>"
    """
    parts: List[str] = []
    for seg in loc:
        if isinstance(seg, int) and not isinstance(seg, bool):
            if parts:
                parts[-1] = f"{parts[-1]}[{seg}]"
            else:
                parts.append(f"[{seg}]")
        else:
            parts.append(str(seg))
    return ".".join(parts) if parts else "<root>"


def format_error(exc: BaseException) -> str:
    """
    Return a one-line `<ErrorType>: <message>` string for an exception.

    Multi-line messages (e.g. YAML diagnostics with context marks) are
    collapsed onto a single line.
    """
    text = " ".join(line.strip() for line in str(exc).splitlines() if line.strip())
    return f"{type(exc).__name__}: {text}" if text else type(exc).__name__
