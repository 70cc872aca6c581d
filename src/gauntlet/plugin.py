"""pytest integration: the `gauntlet` fixture and end-of-test verification."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from gauntlet.config import GauntletConfig, load_config
from gauntlet.context import TestContext
from gauntlet.recording import PytestFailureRecorder
from gauntlet.verbose import setup_logger

logger = logging.getLogger(__name__)

config_key = pytest.StashKey[GauntletConfig]()
context_key = pytest.StashKey[TestContext]()


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("gauntlet", "fluent assertions")
    group.addoption(
        "--gauntlet-config",
        action="store",
        default=None,
        metavar="PATH",
        help="YAML file with gauntlet settings.",
    )
    group.addoption(
        "--gauntlet-verbose",
        action="store_true",
        default=False,
        help="Log recorded assertion failures to stderr as they happen.",
    )
    parser.addini(
        "gauntlet_config",
        help="YAML file with gauntlet settings, relative to the rootdir.",
        default=None,
    )


def _resolve_config(config: pytest.Config) -> GauntletConfig:
    path = config.getoption("--gauntlet-config") or config.getini("gauntlet_config")
    if not path:
        return GauntletConfig()

    config_path = Path(path)
    if not config_path.is_absolute():
        config_path = config.rootpath / config_path
    if not config_path.exists():
        raise pytest.UsageError(f"gauntlet config file not found: {config_path}")

    try:
        return load_config(config_path)
    except ValueError as e:
        raise pytest.UsageError(f"invalid gauntlet config {config_path}: {e}") from e


def pytest_configure(config: pytest.Config) -> None:
    gauntlet_config = _resolve_config(config)
    if config.getoption("--gauntlet-verbose"):
        gauntlet_config.verbose = True

    if gauntlet_config.debug_log is not None or gauntlet_config.verbose:
        debug_file = Path(gauntlet_config.debug_log) if gauntlet_config.debug_log else None
        setup_logger(debug_file, verbose=gauntlet_config.verbose)

    config.stash[config_key] = gauntlet_config


@pytest.fixture
def gauntlet(request: pytest.FixtureRequest) -> TestContext:
    """A TestContext whose recorded failures fail the requesting test."""
    gauntlet_config = request.config.stash.get(config_key, None) or GauntletConfig()
    context = TestContext(PytestFailureRecorder(request.node.nodeid), gauntlet_config)
    request.node.stash[context_key] = context
    return context


@pytest.hookimpl(wrapper=True)
def pytest_runtest_call(item: pytest.Item):
    context = item.stash.get(context_key, None)
    try:
        result = yield
    except BaseException:
        # The test's own error is the report.
        if context is not None:
            context.skip_verification()
        raise
    if context is not None:
        logger.debug("Verifying %s", item.nodeid)
        context.verify()
    return result


@pytest.hookimpl(wrapper=True)
def pytest_runtest_teardown(item: pytest.Item, nextitem: pytest.Item | None):
    result = yield
    context = item.stash.get(context_key, None)
    if context is not None:
        logger.debug("Verifying %s at teardown", item.nodeid)
        context.verify(teardown=True)
    return result
