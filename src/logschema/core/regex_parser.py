#!/usr/bin/env python3
"""
Purpose:
    Boundary to the regular-expression grammar parser.

    `RegexParser.parse()` turns a pattern string into a `PatternAST`, an
    opaque handle around the grammar tree produced by CPython's own regex
    parser. Callers can read the source pattern and capture-group metadata
    but never the tree itself, so the parsing engine stays replaceable.
"""
from __future__ import annotations

import importlib
import re
import sys
from types import ModuleType
from typing import Any

from loguru import logger

from logschema.core.errors import PatternSyntaxError


def _load_grammar() -> ModuleType:
    """Import CPython's regex grammar parser (`re._parser`, Python 3.11+)."""
    try:
        return importlib.import_module("re._parser")
    except ImportError as e:
        raise ImportError(
            "logschema needs CPython's regex grammar parser `re._parser` (Python 3.11+), "
            f"which is not available on Python {sys.version.split()[0]}"
        ) from e


_grammar = _load_grammar()


class PatternAST:
    """Parsed grammar of a single regular expression."""

    __slots__ = ("_pattern", "_tree")

    def __init__(self, pattern: str, tree: Any):
        self._pattern = pattern
        self._tree = tree

    @property
    def pattern(self) -> str:
        """Source pattern this tree was parsed from."""
        return self._pattern

    @property
    def group_count(self) -> int:
        """Number of capture groups (named and unnamed)."""
        # State.groups counts the implicit whole-match group as well
        return self._tree.state.groups - 1

    @property
    def group_names(self) -> tuple[str, ...]:
        """Named capture groups, in order of their group index."""
        groupdict = self._tree.state.groupdict
        return tuple(sorted(groupdict, key=groupdict.__getitem__))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PatternAST):
            return NotImplemented
        return self._pattern == other._pattern

    def __hash__(self) -> int:
        return hash(self._pattern)

    def __repr__(self) -> str:
        return f"<PatternAST pattern={self._pattern!r} groups={self.group_count}>"


class RegexParser:
    """Parses pattern strings into `PatternAST` handles."""

    def __init__(self, flags: int = 0):
        self._flags = flags

    def parse(self, pattern: str) -> PatternAST:
        """
        Parse `pattern` into its grammar tree.

        Raises:
            PatternSyntaxError: if the pattern is not a valid regular expression.
        """
        try:
            tree = _grammar.parse(pattern, self._flags)
        except re.error as e:
            raise PatternSyntaxError(pattern, e.msg, e.pos) from e
        except OverflowError as e:
            raise PatternSyntaxError(pattern, str(e)) from e
        except RecursionError as e:
            raise PatternSyntaxError(pattern, "pattern nesting too deep") from e
        logger.debug("Parsed pattern {!r} into AST", pattern)
        return PatternAST(pattern, tree)
