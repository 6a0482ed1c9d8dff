"""Persistence layer for loading/saving win history."""

from __future__ import annotations

import json
from pathlib import Path

WINS_FILE_NAME = "wins.json"


class WinRepository:
    """JSON file repository for the historical win counters."""

    def __init__(self, root: Path) -> None:
        self._root = root
        self._root.mkdir(parents=True, exist_ok=True)

    @property
    def path(self) -> Path:
        return self._root / WINS_FILE_NAME

    def load_payload(self) -> dict[str, object] | None:
        """Load the stored payload, or None when nothing was saved yet."""
        if not self.path.exists():
            return None
        with self.path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
        if not isinstance(payload, dict):
            raise ValueError("Win history payload must be an object.")
        return payload

    def save_payload(self, payload: dict[str, object]) -> None:
        """Write the payload, replacing the previous file atomically."""
        staging = self.path.with_suffix(".json.tmp")
        with staging.open("w", encoding="utf-8") as handle:
            json.dump(payload, handle, indent=2)
        staging.replace(self.path)

    def clear(self) -> None:
        """Delete stored history if it exists."""
        if self.path.exists():
            self.path.unlink()
