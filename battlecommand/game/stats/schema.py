"""Win history data schema and validation helpers."""

from __future__ import annotations

from dataclasses import dataclass

from battlecommand.game.core.models import PlayerId

SCHEMA_VERSION = 1


@dataclass(frozen=True, slots=True)
class WinTally:
    """Historical win counts for both hotseat players."""

    player_1: int = 0
    player_2: int = 0

    def for_player(self, player: PlayerId) -> int:
        return self.player_1 if player is PlayerId.PLAYER_1 else self.player_2

    def incremented(self, player: PlayerId) -> WinTally:
        if player is PlayerId.PLAYER_1:
            return WinTally(player_1=self.player_1 + 1, player_2=self.player_2)
        return WinTally(player_1=self.player_1, player_2=self.player_2 + 1)

    def as_pair(self) -> tuple[int, int]:
        return self.player_1, self.player_2


def tally_to_payload(tally: WinTally) -> dict[str, object]:
    """Convert win tally to JSON-serializable payload."""
    return {
        "version": SCHEMA_VERSION,
        "player_1_wins": tally.player_1,
        "player_2_wins": tally.player_2,
    }


def payload_to_tally(payload: dict[str, object]) -> WinTally:
    """Convert loaded payload into a win tally."""
    raw_version = payload.get("version", -1)
    if not isinstance(raw_version, (int, str)):
        raise ValueError("Win history version must be int-compatible.")
    if int(raw_version) != SCHEMA_VERSION:
        raise ValueError("Unsupported win history version.")
    return WinTally(
        player_1=_count(payload, "player_1_wins"),
        player_2=_count(payload, "player_2_wins"),
    )


def _count(payload: dict[str, object], key: str) -> int:
    raw = payload.get(key, 0)
    if isinstance(raw, bool) or not isinstance(raw, (int, str)):
        raise ValueError(f"Win count '{key}' must be int-compatible.")
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"Win count '{key}' must be int-compatible.") from exc
    if value < 0:
        raise ValueError(f"Win count '{key}' cannot be negative.")
    return value
