#!/usr/bin/env python3

import argparse
import sys

from pydantic import ValidationError

from logschema.core.config import load_config
from logschema.core.formatting import format_error
from logschema.core.log import LOG_LEVELS, setup_logging
from logschema.cli import config, schema


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="logschema", description="LogSchema CLI Toolkit")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=None,
                        help="Override the configured log level")
    subparsers = parser.add_subparsers(dest="command")

    # Register subcommands (they should accept the loaded config)
    schema.register(subparsers)
    config.register(subparsers)
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        cfg = load_config()
    except (ValueError, ValidationError) as e:
        print(f"Invalid configuration: {format_error(e)}", file=sys.stderr)
        return 2
    setup_logging(args.log_level or cfg.logging.level)
    return args.func(args, cfg)


if __name__ == "__main__":
    sys.exit(main())
