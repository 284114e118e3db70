# src/taskboard/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Tasks live only in memory; data_dir holds logs, nothing else.
- Components receive settings by injection; get_settings() is for the entrypoint.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKBOARD"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_file: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path

    # ---- Dashboard ----
    seed_demo_tasks: bool
    id_display_length: int

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            app_name=_env(_k("APP_NAME"), "taskboard") or "taskboard",
            log_level=_env(_k("LOG_LEVEL"), "INFO"),
            log_to_file=_env_bool(_k("LOG_TO_FILE"), True),
            data_dir=_env_path(_k("DATA_DIR"), Path(".local/taskboard")),
            seed_demo_tasks=_env_bool(_k("SEED_DEMO_TASKS"), True),
            id_display_length=max(4, _env_int(_k("ID_DISPLAY_LENGTH"), 8)),
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
