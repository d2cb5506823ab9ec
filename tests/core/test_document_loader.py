#!/usr/bin/env python3
from pathlib import Path

import pytest

from logschema.core.document_loader import load_document, read_document
from logschema.core.errors import DocumentParsingError, SchemaIOError


# --- load_document --- #

def test_load_document_returns_mapping_in_source_order():
    doc = load_document("b: 1\na: [x, y]\nc: {k: v}\n")
    assert doc == {"b": 1, "a": ["x", "y"], "c": {"k": "v"}}
    assert list(doc) == ["b", "a", "c"]


@pytest.mark.parametrize("text", [
    "a: [1, 2",          # unterminated flow sequence
    "a: b: c",           # mapping values not allowed here
    "\ta: 1",            # tab indentation
    "a: !!python/object:os.system {}",  # unsafe tag rejected by SafeLoader
])
def test_load_document_malformed_yaml(text):
    with pytest.raises(DocumentParsingError) as exc_info:
        load_document(text)
    assert exc_info.value.__cause__ is not None


@pytest.mark.parametrize("text,fragment", [
    ("", "document is empty"),
    ("# only a comment\n", "document is empty"),
    ("- a\n- b\n", "got list"),
    ("just a string", "got str"),
    ("1: a\nb: c\n", "keys must be strings"),
])
def test_load_document_root_must_be_string_keyed_mapping(text, fragment):
    with pytest.raises(DocumentParsingError, match=fragment):
        load_document(text)


def test_load_document_rejects_duplicate_top_level_keys():
    text = "timestamp: []\nvariables: {}\ntimestamp: ['x']\n"
    with pytest.raises(DocumentParsingError, match=r"duplicate key 'timestamp' \(first defined on line 1\)"):
        load_document(text)


def test_load_document_rejects_duplicate_nested_keys():
    text = "variables:\n  ip: 'a'\n  ip: 'b'\n"
    with pytest.raises(DocumentParsingError, match="duplicate key 'ip'"):
        load_document(text)


def test_load_document_allows_merge_keys():
    text = (
        "base: &base {ip: 'a', port: 'b'}\n"
        "variables:\n"
        "  <<: *base\n"
        "  ip: 'c'\n"
    )
    doc = load_document(text)
    assert doc["variables"] == {"ip": "c", "port": "b"}


# --- read_document --- #

def test_read_document_reads_file(tmp_path: Path):
    p = tmp_path / "s.yaml"
    p.write_text("delimiters: ' :'\n", encoding="utf-8")
    assert read_document(p) == {"delimiters": " :"}
    assert read_document(str(p)) == {"delimiters": " :"}


def test_read_document_missing_file_is_io_error(tmp_path: Path):
    p = tmp_path / "missing.yaml"
    with pytest.raises(SchemaIOError) as exc_info:
        read_document(p)
    err = exc_info.value
    assert err.path == str(p)
    assert isinstance(err, OSError)
    assert isinstance(err.__cause__, FileNotFoundError)


def test_read_document_directory_is_io_error(tmp_path: Path):
    with pytest.raises(SchemaIOError):
        read_document(tmp_path)


def test_read_document_undecodable_bytes_is_io_error(tmp_path: Path):
    p = tmp_path / "latin1.yaml"
    p.write_bytes(b"delimiters: '\xff'\n")
    with pytest.raises(SchemaIOError):
        read_document(p)


def test_read_document_malformed_yaml_is_parsing_error(tmp_path: Path):
    p = tmp_path / "bad.yaml"
    p.write_text("a: [1, 2", encoding="utf-8")
    with pytest.raises(DocumentParsingError):
        read_document(p)


def test_load_document_too_deeply_nested_is_parsing_error():
    text = "timestamp: " + "[" * 5000 + "]" * 5000 + "\nvariables: {}\ndelimiters: ''\n"
    with pytest.raises(DocumentParsingError, match="nesting too deep") as exc_info:
        load_document(text)
    assert isinstance(exc_info.value.__cause__, RecursionError)
