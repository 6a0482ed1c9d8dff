"""Unified Battle Command app-data paths."""

from __future__ import annotations

import os
import sys
from pathlib import Path


def resolve_app_data_root() -> Path:
    """Resolve app-data root directory for runtime state."""
    configured = os.getenv("BATTLECOMMAND_APP_DATA_DIR", "").strip()
    if configured:
        candidate = Path(configured)
        if candidate.is_absolute():
            return candidate
        return resolve_game_root() / candidate
    return resolve_game_root() / "appdata"


def resolve_game_root() -> Path:
    """Resolve the directory runtime state is kept under.

    Frozen builds keep it beside the executable. Otherwise it is the working
    directory, never the installed package tree.
    """
    if getattr(sys, "frozen", False):
        executable = getattr(sys, "executable", "")
        if executable:
            return Path(executable).resolve().parent
    return Path.cwd()


def resolve_logs_dir() -> Path:
    """Resolve logs directory under app-data root."""
    return resolve_app_data_root() / "logs"


def resolve_config_dir() -> Path:
    """Resolve env-file directory under app-data root."""
    return resolve_app_data_root() / "config"


def resolve_stats_dir() -> Path:
    """Resolve win history directory under app-data root."""
    return resolve_app_data_root() / "stats"


def ensure_app_data_dirs() -> dict[str, Path]:
    """Create app-data directories and return resolved paths."""
    root = resolve_app_data_root()
    logs = resolve_logs_dir()
    stats = resolve_stats_dir()
    for path in (root, logs, stats):
        path.mkdir(parents=True, exist_ok=True)
    return {"root": root, "logs": logs, "stats": stats}


def apply_runtime_path_defaults() -> dict[str, Path]:
    """Set default runtime path env vars to unified app-data locations."""
    paths = ensure_app_data_dirs()
    log_dir = _normalize_runtime_path_env("BATTLECOMMAND_LOG_DIR", paths["logs"])
    stats_dir = _normalize_runtime_path_env("BATTLECOMMAND_STATS_DIR", paths["stats"])

    log_dir.mkdir(parents=True, exist_ok=True)
    stats_dir.mkdir(parents=True, exist_ok=True)

    return {"root": paths["root"], "logs": log_dir, "stats": stats_dir}


def _normalize_runtime_path_env(var_name: str, default_path: Path) -> Path:
    raw = os.getenv(var_name, "").strip()
    if not raw:
        os.environ[var_name] = str(default_path)
        return default_path
    candidate = Path(raw)
    if candidate.is_absolute():
        return candidate
    normalized = resolve_app_data_root() / candidate
    os.environ[var_name] = str(normalized)
    return normalized
