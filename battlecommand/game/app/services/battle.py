"""Battle flow orchestration between the engine and the win counter store."""

from __future__ import annotations

import logging

from battlecommand.game.core import fortify, rules
from battlecommand.game.core.models import (
    GRID_SIZE,
    AttackResult,
    Coord,
    FortifyResult,
    PlayerId,
)
from battlecommand.game.core.rules import GameState
from battlecommand.game.stats.service import WinRecorder

logger = logging.getLogger(__name__)


class BattleService:
    """Holds the live game state and threads it through engine calls.

    The engine stays pure; this service is the single place that reports a
    finished game to the win recorder and logs each move.
    """

    def __init__(self, win_recorder: WinRecorder, size: int = GRID_SIZE) -> None:
        self._win_recorder = win_recorder
        self._size = size
        self._state = rules.new_game(size=size)
        self._win_reported = False
        self._wins = win_recorder.load_wins()
        logger.info("win_history_loaded p1=%d p2=%d", self._wins[0], self._wins[1])

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def wins(self) -> tuple[int, int]:
        """Win counts as last seen by this session."""
        return self._wins

    def new_game(self) -> GameState:
        """Discard the current game and start from the default layouts."""
        self._state = rules.new_game(size=self._size)
        self._win_reported = False
        logger.info("game_reset")
        return self._state

    def attack(self, coord: Coord) -> AttackResult:
        attacker = self._state.current_player
        self._state, result = rules.attack(self._state, coord)
        if not result.accepted:
            logger.debug(
                "attack_rejected player=%s coord=%s error=%s",
                attacker.value,
                coord,
                result.error,
            )
            return result
        logger.info(
            "attack player=%s coord=%s outcome=%s",
            attacker.value,
            coord,
            result.outcome.value,
            extra={"ship_sunk": result.ship_sunk, "game_over": result.game_over},
        )
        if result.game_over and result.winner is not None:
            self._report_winner(result.winner)
        return result

    def toggle_fortify_mode(self) -> GameState:
        self._state = fortify.toggle_fortify_mode(self._state)
        logger.debug("fortify_mode=%s", self._state.fortify_mode)
        return self._state

    def select_or_move(self, coord: Coord) -> FortifyResult:
        player = self._state.current_player
        self._state, result = fortify.select_or_move(self._state, coord)
        logger.debug(
            "fortify player=%s coord=%s outcome=%s error=%s",
            player.value,
            coord,
            result.outcome.value,
            result.error,
        )
        return result

    def is_game_over(self) -> bool:
        return rules.is_game_over(self._state)

    def winner(self) -> PlayerId | None:
        return rules.winner(self._state)

    def _report_winner(self, player: PlayerId) -> None:
        if self._win_reported:
            return
        self._win_reported = True
        logger.info("game_over winner=%s", player.value)
        try:
            self._wins = self._win_recorder.record_win(player).as_pair()
        except OSError:
            logger.exception("win_record_failed winner=%s", player.value)
