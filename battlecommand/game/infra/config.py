"""Env-file configuration for Battle Command."""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path

from battlecommand.game.infra.app_data import resolve_config_dir

ENV_FILE_NAMES = (".env.app", ".env.app.local")


def default_env_files() -> tuple[Path, ...]:
    """Env files in load order: app-data ``config/`` first, then the working directory."""
    config_dir = resolve_config_dir()
    cwd = Path.cwd()
    return tuple(config_dir / name for name in ENV_FILE_NAMES) + tuple(
        cwd / name for name in ENV_FILE_NAMES
    )


def read_env_file(path: Path) -> dict[str, str]:
    """Parse KEY=VALUE lines. Blank lines, comments and lines without ``=`` are skipped."""
    values: dict[str, str] = {}
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = (part.strip() for part in line.split("=", 1))
        if not key:
            continue
        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]
        values[key] = value
    return values


def load_env_file(path: str | Path, *, override_existing: bool = True) -> None:
    """Load one env file into the process environment. A missing file is ignored."""
    env_path = Path(path)
    if not env_path.is_file():
        return
    for key, value in read_env_file(env_path).items():
        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str | Path] | None = None
) -> None:
    """Load the app env files. Later files win."""
    to_load = tuple(paths) if paths is not None else default_env_files()
    for path in to_load:
        load_env_file(path, override_existing=override_existing)
