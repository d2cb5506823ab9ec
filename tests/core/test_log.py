#!/usr/bin/env python3
import io

import pytest
from loguru import logger

from logschema.core.log import LOG_LEVELS, setup_logging


@pytest.fixture(autouse=True)
def _restore_sinks():
    yield
    logger.remove()


def test_setup_logging_filters_below_level():
    buf = io.StringIO()
    setup_logging("warning", sink=buf)

    logger.info("hidden")
    logger.warning("shown")

    out = buf.getvalue()
    assert "shown" in out
    assert "hidden" not in out
    assert "WARNING" in out


def test_setup_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        setup_logging("LOUD", sink=io.StringIO())


@pytest.mark.parametrize("level", LOG_LEVELS)
def test_every_known_level_is_accepted(level):
    setup_logging(level, sink=io.StringIO())
