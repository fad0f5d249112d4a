# infra/path.py
from __future__ import annotations
import os
import sys
from pathlib import Path

APP_NAME = "InspectionScheduleLite"
COMPANY_NAME = "FieldOps"


def _platform_data_root() -> Path:
    if sys.platform.startswith("win"):
        return Path(os.getenv("APPDATA", Path.home() / "AppData" / "Roaming"))
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    return Path(os.getenv("XDG_DATA_HOME", Path.home() / ".local" / "share"))


def user_data_dir() -> Path:
    """
    Directory for the database and logs.

    ISL_DATA_DIR wins when set; otherwise <platform data root>/FieldOps/InspectionScheduleLite,
    falling back to ~/.InspectionScheduleLite when that cannot be created.
    """
    override = (os.getenv("ISL_DATA_DIR") or "").strip()
    path = Path(override).expanduser() if override else _platform_data_root() / COMPANY_NAME / APP_NAME
    try:
        path.mkdir(parents=True, exist_ok=True)
        return path
    except OSError:
        fallback = Path.home() / f".{APP_NAME}"
        fallback.mkdir(parents=True, exist_ok=True)
        return fallback


def default_db_path() -> Path:
    return user_data_dir() / "inspection_schedule.db"


def database_url() -> str:
    """ISL_DB_URL when set, otherwise the per-user SQLite file."""
    configured = (os.getenv("ISL_DB_URL") or "").strip()
    if configured:
        return configured
    return f"sqlite:///{default_db_path().as_posix()}"
