# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from taskdeck.config import Settings
from taskdeck.tasks.task_models import TaskFilter

_VARS = (
    "TASKDECK_APP_NAME",
    "TASKDECK_LOG_LEVEL",
    "TASKDECK_LOG_DIR",
    "TASKDECK_LOG_TO_FILE",
    "TASKDECK_SEED_DEMO_TASKS",
    "TASKDECK_STRICT_TITLES",
    "TASKDECK_DEFAULT_FILTER",
)


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env) -> None:
    s = Settings.from_env()
    assert s.app_name == "taskdeck"
    assert s.log_level == "INFO"
    assert s.log_dir == Path(".local/taskdeck")
    assert s.log_to_file is True
    assert s.seed_demo_tasks is True
    assert s.strict_titles is False
    assert s.default_filter is TaskFilter.ALL


def test_overrides(clean_env, tmp_path: Path) -> None:
    clean_env.setenv("TASKDECK_APP_NAME", "board")
    clean_env.setenv("TASKDECK_LOG_LEVEL", "debug")
    clean_env.setenv("TASKDECK_LOG_DIR", str(tmp_path))
    clean_env.setenv("TASKDECK_LOG_TO_FILE", "no")
    clean_env.setenv("TASKDECK_SEED_DEMO_TASKS", "0")
    clean_env.setenv("TASKDECK_STRICT_TITLES", "yes")
    clean_env.setenv("TASKDECK_DEFAULT_FILTER", "Active")

    s = Settings.from_env()
    assert s.app_name == "board"
    assert s.log_level == "DEBUG"
    assert s.log_dir == tmp_path
    assert s.log_to_file is False
    assert s.seed_demo_tasks is False
    assert s.strict_titles is True
    assert s.default_filter is TaskFilter.ACTIVE


def test_invalid_filter_falls_back_to_all(clean_env) -> None:
    clean_env.setenv("TASKDECK_DEFAULT_FILTER", "urgent")
    assert Settings.from_env().default_filter is TaskFilter.ALL
