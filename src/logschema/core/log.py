#!/usr/bin/env python3
"""
Logging setup for LogSchema.

Library modules only emit through `loguru.logger`; sinks are installed here,
by the CLI, never on import.
"""
from __future__ import annotations

import sys
from typing import Final, Optional, TextIO

from loguru import logger

LOG_LEVELS: Final[tuple[str, ...]] = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")

DEFAULT_LOG_FORMAT = "<level>{level: <8}</level> | {name}:{function}:{line} - {message}"


def setup_logging(level: str = "WARNING", sink: Optional[TextIO] = None) -> None:
    """Replace any configured sinks with a single stream sink at `level`."""
    logger.remove()
    logger.add(sink or sys.stderr, level=level.upper(), format=DEFAULT_LOG_FORMAT)
