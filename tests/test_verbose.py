"""Tests for verbose logging."""

import logging
from pathlib import Path

from gauntlet import Message, PytestFailureRecorder
from gauntlet.verbose import setup_logger


def test_logger_creates_debug_log(tmp_path: Path):
    debug_file = tmp_path / "debug.log"
    logger = setup_logger(debug_file=debug_file, verbose=False)

    assert logger.name == "gauntlet"
    assert not logger.disabled
    assert logger.level == logging.DEBUG
    assert debug_file.exists()


def test_logger_writes_timestamped_lines(tmp_path: Path):
    debug_file = tmp_path / "debug.log"
    logger = setup_logger(debug_file=debug_file, verbose=False)

    logger.debug("test message")

    content = debug_file.read_text()
    assert "test message" in content
    assert content.startswith("[")


def test_verbose_mode_adds_stderr_handler(tmp_path: Path):
    logger = setup_logger(debug_file=tmp_path / "debug.log", verbose=True)

    handler_types = sorted(type(h).__name__ for h in logger.handlers)
    assert handler_types == ["FileHandler", "StreamHandler"]


def test_verbose_without_file_only_logs_to_stderr():
    logger = setup_logger(debug_file=None, verbose=True)

    assert [type(h).__name__ for h in logger.handlers] == ["StreamHandler"]


def test_logger_creates_parent_directories(tmp_path: Path):
    debug_file = tmp_path / "nested" / "dir" / "debug.log"
    setup_logger(debug_file=debug_file, verbose=False)

    assert debug_file.parent.exists()


def test_reconfigure_replaces_handlers(tmp_path: Path):
    setup_logger(debug_file=tmp_path / "first.log", verbose=True)
    logger = setup_logger(debug_file=tmp_path / "second.log", verbose=False)

    assert len(logger.handlers) == 1
    assert logger.handlers[0].baseFilename == str(tmp_path / "second.log")


def test_recorded_issues_reach_debug_log(tmp_path: Path):
    debug_file = tmp_path / "debug.log"
    setup_logger(debug_file=debug_file, verbose=False)

    PytestFailureRecorder("tests/test_x.py::test_y").record(
        "is_true", Message("value is false"), "/t.py", 7
    )

    content = debug_file.read_text()
    assert "[tests/test_x.py::test_y] /t.py:7: is_true failed - value is false" in content
