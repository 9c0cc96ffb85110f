# tests/conftest.py
from __future__ import annotations

import pytest
from loguru import logger

import metrum


@pytest.fixture(autouse=True)
def quiet_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield
    logger.remove()
    logger.disable("metrum")


@pytest.fixture(autouse=True)
def restore_clock():
    yield
    metrum.set_clock(None)


@pytest.fixture
def moon_landing() -> metrum.MetrumDateTime:
    # 1969-07-20T20:17:40Z
    return metrum.from_utc(1969, 7, 20, 20, 17, 40, 0)
