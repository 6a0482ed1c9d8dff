"""Application entry point."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from battlecommand.game.app.services.battle import BattleService
from battlecommand.game.infra.app_data import apply_runtime_path_defaults
from battlecommand.game.infra.config import load_default_env_files
from battlecommand.game.infra.logging import setup_logging
from battlecommand.game.stats.repository import WinRepository
from battlecommand.game.stats.service import WinCounterStore

logger = logging.getLogger(__name__)


def bootstrap() -> BattleService:
    """Load config, prepare app-data paths and logging, and open a session."""
    load_default_env_files()
    paths = apply_runtime_path_defaults()
    setup_logging()
    logger.info(
        "app_data_paths root=%s logs=%s stats=%s",
        paths["root"],
        paths["logs"],
        paths["stats"],
    )
    store = WinCounterStore(WinRepository(Path(paths["stats"])))
    return BattleService(store)


def main(argv: Sequence[str] | None = None) -> int:
    """Open a session and report the stored win history."""
    parser = argparse.ArgumentParser(description="Battle Command hotseat engine.")
    parser.add_argument("--reset-wins", action="store_true", help="clear the stored win history")
    args = parser.parse_args(argv)

    if args.reset_wins:
        load_default_env_files()
        paths = apply_runtime_path_defaults()
        WinCounterStore(WinRepository(Path(paths["stats"]))).reset()

    service = bootstrap()
    p1_wins, p2_wins = service.wins
    print(f"P1 Wins: {p1_wins}")
    print(f"P2 Wins: {p2_wins}")
    print(f"Turn: {service.state.current_player.value}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
