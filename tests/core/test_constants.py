#!/usr/bin/env python3

import pytest

import logschema.core.constants as const


def test_section_keys_and_order():
    assert const.TIMESTAMP_KEY == "timestamp"
    assert const.VARIABLES_KEY == "variables"
    assert const.DELIMITERS_KEY == "delimiters"
    assert const.SECTION_KEYS == ("timestamp", "variables", "delimiters")


def test_supported_ext_and_ascii_limit():
    assert all(x.startswith(".") for x in const.SUPPORTED_SCHEMA_EXT)
    assert const.MAX_ASCII_CODE == 127


def test_validate_constants_passes_for_defaults():
    const.validate_constants()  # no exception


def test_validate_constants_raises_for_duplicate_keys(monkeypatch):
    monkeypatch.setattr(const, "SECTION_KEYS", ("timestamp", "timestamp", "delimiters"))
    with pytest.raises(RuntimeError, match="must be distinct"):
        const.validate_constants()
