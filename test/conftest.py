from __future__ import annotations
import logging
import pytest
from conwaylife import Grid, parse_grid


@pytest.fixture(autouse=True)
def capture_all_logs(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="conwaylife")


@pytest.fixture
def blinker() -> Grid:
    return parse_grid("111")


@pytest.fixture
def glider() -> Grid:
    return parse_grid("010R001R111")
