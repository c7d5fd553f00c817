import logging

import pytest

from smartsleep import sleeping
from smartsleep.log import LOGGER_NAME, ConsoleHandler


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, ConsoleHandler):
            logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def sleep_calls(monkeypatch):
    calls = []
    monkeypatch.setattr(sleeping.time, "sleep", lambda seconds: calls.append(seconds))
    return calls
