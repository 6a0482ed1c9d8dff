"""Win counter use cases."""

from __future__ import annotations

import logging
from typing import Protocol

from battlecommand.game.core.models import PlayerId
from battlecommand.game.stats.repository import WinRepository
from battlecommand.game.stats.schema import WinTally, payload_to_tally, tally_to_payload

logger = logging.getLogger(__name__)


class WinRecorder(Protocol):
    """Collaborator notified once per finished game."""

    def load_wins(self) -> tuple[int, int]: ...

    def record_win(self, player: PlayerId) -> WinTally: ...


class WinCounterStore:
    """Historical win counters backed by a JSON repository."""

    def __init__(self, repository: WinRepository) -> None:
        self._repository = repository

    def tally(self) -> WinTally:
        """Load the current tally; unreadable history counts as empty."""
        try:
            payload = self._repository.load_payload()
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable win history '%s': %s", self._repository.path, exc)
            return WinTally()
        if payload is None:
            return WinTally()
        try:
            return payload_to_tally(payload)
        except ValueError as exc:
            logger.warning("Ignoring invalid win history '%s': %s", self._repository.path, exc)
            return WinTally()

    def load_wins(self) -> tuple[int, int]:
        """Return ``(player_1_wins, player_2_wins)``."""
        return self.tally().as_pair()

    def record_win(self, player: PlayerId) -> WinTally:
        """Increment and persist the winner's counter."""
        updated = self.tally().incremented(player)
        self._repository.save_payload(tally_to_payload(updated))
        logger.info(
            "win_recorded winner=%s p1=%d p2=%d", player.value, updated.player_1, updated.player_2
        )
        return updated

    def reset(self) -> None:
        """Forget all recorded wins."""
        self._repository.clear()


class InMemoryWinCounter:
    """Process-local win counters for headless sessions and tests."""

    def __init__(self, tally: WinTally | None = None) -> None:
        self._tally = tally or WinTally()
        self.recorded: list[PlayerId] = []

    def load_wins(self) -> tuple[int, int]:
        return self._tally.as_pair()

    def record_win(self, player: PlayerId) -> WinTally:
        self._tally = self._tally.incremented(player)
        self.recorded.append(player)
        return self._tally
