# src/taskdeck/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing required at import time; every variable has a default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .tasks.task_models import TaskFilter

ENV_PREFIX = "TASKDECK"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_filter(name: str, default: TaskFilter) -> TaskFilter:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return TaskFilter.parse(raw)
    except ValueError:
        return default


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path
    log_to_file: bool

    # ---- Task list behaviour ----
    seed_demo_tasks: bool
    strict_titles: bool
    default_filter: TaskFilter

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            app_name=_env(_k("APP_NAME"), "taskdeck").strip() or "taskdeck",
            log_level=_env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO",
            log_dir=_env_path(_k("LOG_DIR"), Path(".local/taskdeck")),
            log_to_file=_env_bool(_k("LOG_TO_FILE"), True),
            seed_demo_tasks=_env_bool(_k("SEED_DEMO_TASKS"), True),
            strict_titles=_env_bool(_k("STRICT_TITLES"), False),
            default_filter=_env_filter(_k("DEFAULT_FILTER"), TaskFilter.ALL),
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
