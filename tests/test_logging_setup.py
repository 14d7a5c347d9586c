# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from taskdeck.logging_setup import _ConsoleNoiseFilter, setup_logging


@pytest.fixture()
def restore_root_handlers():
    root = logging.getLogger()
    saved = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in saved[0]:
        root.addHandler(h)
    root.setLevel(saved[1])
    logging.captureWarnings(False)


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter_keeps_own_logs_and_drops_noise() -> None:
    flt = _ConsoleNoiseFilter()
    assert flt.filter(_record("taskdeck.tasks.task_store", logging.DEBUG))
    assert not flt.filter(_record("urllib3", logging.WARNING))
    assert flt.filter(_record("urllib3", logging.ERROR))
    assert not flt.filter(_record("py.warnings", logging.WARNING))


def test_setup_logging_writes_file(tmp_path: Path, restore_root_handlers) -> None:
    setup_logging(log_dir=tmp_path, console_level=logging.WARNING)
    logging.getLogger("taskdeck.test").debug("hello file")
    for h in logging.getLogger().handlers:
        h.flush()

    assert "hello file" in (tmp_path / "taskdeck.log").read_text("utf-8")


def test_setup_logging_without_file(restore_root_handlers) -> None:
    setup_logging(log_dir=None)
    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert not isinstance(handlers[0], logging.FileHandler)
