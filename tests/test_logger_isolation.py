"""Test that separately named loggers keep their output apart."""

from __future__ import annotations

from pathlib import Path

from gauntlet.verbose import setup_logger


def test_unique_logger_names_create_separate_instances(tmp_path: Path):
    log1 = tmp_path / "suite1.log"
    log2 = tmp_path / "suite2.log"

    logger1 = setup_logger(log1, verbose=False, logger_name="gauntlet_suite1")
    logger2 = setup_logger(log2, verbose=False, logger_name="gauntlet_suite2")

    assert logger1 is not logger2

    logger1.debug("Message from suite1")
    logger2.debug("Message from suite2")

    assert "Message from suite1" in log1.read_text()
    assert "Message from suite2" not in log1.read_text()
    assert "Message from suite2" in log2.read_text()
    assert "Message from suite1" not in log2.read_text()


def test_same_logger_name_reuses_instance(tmp_path: Path):
    logger1 = setup_logger(tmp_path / "a.log", verbose=False, logger_name="gauntlet_shared")
    logger2 = setup_logger(tmp_path / "b.log", verbose=False, logger_name="gauntlet_shared")

    assert logger1 is logger2
    assert len(logger2.handlers) == 1
