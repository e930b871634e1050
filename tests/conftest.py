"""Pytest fixtures for platform tests."""
import copy

import pytest

from pong_platform import logging as pong_logging


@pytest.fixture
def logging_config():
    """Snapshot the global logging config and sinks, restore afterwards."""
    saved = copy.deepcopy(pong_logging._config)
    saved_sinks = dict(pong_logging._sinks)
    saved_default = pong_logging._default_sink
    yield pong_logging._config
    pong_logging._config.clear()
    pong_logging._config.update(saved)
    pong_logging._sinks.clear()
    pong_logging._sinks.update(saved_sinks)
    pong_logging._default_sink = saved_default
