#!/usr/bin/env python3
import pytest

from logschema.core.errors import MissingSchemaKeyError
from logschema.core.formatting import format_error, format_location


# --- format_location --- #

@pytest.mark.parametrize("loc,expected", [
    (("timestamp", 1), "timestamp[1]"),
    (("variables", "ip"), "variables.ip"),
    ((0, "items"), "[0].items"),
    ((), "<root>"),
    ((0, 1, "x"), "[0][1].x"),
    (("a", 3, 2, "b"), "a[3][2].b"),
])
def test_format_location(loc, expected):
    assert format_location(loc) == expected


def test_format_location_treats_bool_as_key():
    assert format_location(("variables", True)) == "variables.True"


# --- format_error --- #

def test_format_error_uses_type_name_and_message():
    assert format_error(MissingSchemaKeyError("delimiters")) == (
        "MissingSchemaKeyError: Missing required schema key 'delimiters'"
    )


def test_format_error_collapses_multiline_messages():
    exc = ValueError("first line\n  second line\n\n")
    assert format_error(exc) == "ValueError: first line second line"


def test_format_error_without_message():
    assert format_error(RuntimeError()) == "RuntimeError"
