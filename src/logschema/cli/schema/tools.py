#!/usr/bin/env python3
from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, Tuple

from loguru import logger

from logschema.core.config import LogSchemaConfig
from logschema.core.constants import SUPPORTED_SCHEMA_EXT
from logschema.core.errors import LogSchemaError
from logschema.core.formatting import format_error
from logschema.core.schema.parsed_schema import ParsedSchema


def register(subparsers):
    sp = subparsers.add_parser("schema", help="Schema utilities")
    sps = sp.add_subparsers(dest="schema_cmd")

    # default when user runs: `logschema schema`
    def schema_default(args, config: LogSchemaConfig) -> int:
        sp.print_help()
        return 1
    sp.set_defaults(func=schema_default)

    vsp = sps.add_parser("validate", help="Validate schema files")
    vsp.add_argument("files", nargs="*", help="Files or directories (default: configured schema_paths)")
    vsp.add_argument("--recursive", "-r", action="store_true", help="Recursively scan directories.")
    vsp.set_defaults(func=validate_schemas)

    ssp = sps.add_parser("show", help="Show a parsed schema")
    ssp.add_argument("file", help="Schema file")
    ssp.add_argument("--json", action="store_true", help="JSON output")
    ssp.set_defaults(func=show_schema)


# --- File discovery --- #

def _yaml_files_in_dir(root: Path, recursive: bool) -> list[Path]:
    candidates = root.rglob("*") if recursive else root.glob("*")
    return [p for p in candidates if p.is_file() and p.suffix.lower() in SUPPORTED_SCHEMA_EXT]


def find_schema_files(paths: Iterable[str | Path], recursive: bool = False) -> list[Path]:
    """
    Expand directories into their YAML files; explicit file paths are kept
    as given (missing ones are reported when validated).
    """
    files: list[Path] = []
    for raw in paths:
        p = Path(raw)
        if p.is_dir():
            files.extend(_yaml_files_in_dir(p, recursive))
        else:
            files.append(p)
    # stable, de-duplicated order
    return sorted(set(files))


# --- Commands --- #

def validate_schema_file(path: Path) -> Tuple[bool, str]:
    """Returns: (is_valid, message)"""
    try:
        schema = ParsedSchema.parse_from_file(path)
    except LogSchemaError as e:
        logger.debug("Schema {} rejected: {}", path, e)
        return False, f"{path}: {format_error(e)}"
    return True, (
        f"{path}: OK ({len(schema.timestamp_entries())} timestamps, "
        f"{len(schema.variable_entries())} variables, {len(schema.delimiters)} delimiters)"
    )


def validate_schemas(args, config: LogSchemaConfig) -> int:
    targets = args.files or config.schema_paths
    files = find_schema_files(targets, recursive=args.recursive)
    if not files:
        print("No schema files found.")
        return 1

    success = 0
    for fp in files:
        ok, msg = validate_schema_file(fp)
        print(msg)
        if ok:
            success += 1

    total = len(files)
    print(f"\nValidation complete: {success}/{total} passed.")
    return 0 if success == total else 1


def show_schema(args, config: LogSchemaConfig) -> int:
    try:
        schema = ParsedSchema.parse_from_file(args.file)
    except LogSchemaError as e:
        print(format_error(e))
        return 1

    summary = schema.to_summary()
    if args.json:
        print(json.dumps(summary, indent=2))
        return 0

    print(f"Schema: {args.file}")
    print("\nTimestamps (in trial order):")
    for idx, pattern in enumerate(summary["timestamp"]):
        print(f"  {idx}. {pattern}")
    print("\nVariables:")
    for name, pattern in summary["variables"].items():
        print(f"  - {name:16} {pattern}")
    print(f"\nDelimiters: {summary['delimiters']!r}")
    return 0
