"""Pytest configuration and fixtures."""

import gc
import inspect
import logging

import pytest

from gauntlet import MockFailureRecorder, TestContext


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Reset gauntlet loggers after each test so handlers don't leak between tests."""
    yield

    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("gauntlet"):
            logger = logging.getLogger(name)
            for handler in logger.handlers:
                handler.close()
            logger.handlers.clear()
            logger.setLevel(logging.NOTSET)


@pytest.fixture
def recorder():
    return MockFailureRecorder()


@pytest.fixture
def ctx(recorder):
    """A TestContext recording into the `recorder` fixture."""
    return TestContext(recorder)


@pytest.fixture
def lineno():
    """Return a function giving the line number it was called from."""

    def current() -> int:
        return inspect.currentframe().f_back.f_lineno

    return current


@pytest.fixture
def collect():
    """Run a full garbage collection, flushing unreferenced root assertions."""
    return gc.collect
