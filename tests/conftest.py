#!/usr/bin/env python3

import logging
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# make the repo directory available
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from py_elementary_circuits.log import logger  # noqa: E402  pylint: disable=wrong-import-position


@pytest.fixture(name="reset_logger", autouse=True)
def fixture_reset_logger() -> Iterator[None]:
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
