#!/usr/bin/env python3
"""
Purpose:
    Reads schema source text into a plain key/value document.

    YAML parsing is delegated to PyYAML's SafeLoader; every failure on the
    way (I/O, malformed YAML, wrong root type) is translated into this
    package's error types before anything else is attempted.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Union

import yaml
from loguru import logger

from logschema.core.constants import DEFAULT_TEXT_ENCODING
from logschema.core.errors import DocumentParsingError, SchemaIOError

_MERGE_TAG = "tag:yaml.org,2002:merge"


def make_loader():
    """
    Build a SafeLoader subclass that rejects duplicate keys in any mapping
    instead of silently keeping the last value.
    """
    class Loader(yaml.SafeLoader):
        pass

    def _construct_mapping(loader: Loader, node: yaml.MappingNode, deep: bool = False):
        seen: Dict[Any, yaml.Node] = {}
        for key_node, _value_node in node.value:
            if key_node.tag == _MERGE_TAG:
                continue
            key = loader.construct_object(key_node, deep=deep)
            try:
                first = seen.get(key)
            except TypeError:
                # unhashable keys are reported by the base constructor
                continue
            if first is not None:
                raise yaml.constructor.ConstructorError(
                    "while constructing a mapping", node.start_mark,
                    f"found duplicate key {key!r} (first defined on line {first.start_mark.line + 1})",
                    key_node.start_mark,
                )
            seen[key] = key_node
        return yaml.SafeLoader.construct_mapping(loader, node, deep=deep)

    Loader.construct_mapping = _construct_mapping
    return Loader


# --- Public API --- #

def load_document(text: str) -> Dict[str, Any]:
    """
    Parse YAML schema text into a mapping of top-level keys to raw values.

    Raises:
        DocumentParsingError: if the text is not valid YAML, contains duplicate
            keys, is nested too deeply, or its root is not a mapping with
            string keys.
    """
    try:
        data = yaml.load(text, Loader=make_loader())
    except yaml.YAMLError as e:
        raise DocumentParsingError(str(e)) from e
    except RecursionError as e:
        raise DocumentParsingError("document nesting too deep") from e

    if data is None:
        raise DocumentParsingError("document is empty")
    if not isinstance(data, dict):
        raise DocumentParsingError(f"expected a mapping at the document root, got {type(data).__name__}")
    bad_keys = [k for k in data if not isinstance(k, str)]
    if bad_keys:
        raise DocumentParsingError(f"top-level keys must be strings, got {bad_keys!r}")

    logger.debug("Loaded schema document with keys {}", sorted(data))
    return data


def read_document(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Read and parse a YAML schema file.

    Raises:
        SchemaIOError: if the file cannot be opened, read, or decoded.
        DocumentParsingError: see `load_document`.
    """
    p = Path(path)
    try:
        text = p.read_text(encoding=DEFAULT_TEXT_ENCODING)
    except (OSError, UnicodeDecodeError) as e:
        raise SchemaIOError(str(p), str(e)) from e
    logger.debug("Read schema file {}", p)
    return load_document(text)
