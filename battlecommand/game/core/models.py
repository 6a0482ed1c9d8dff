"""Core domain models used by game logic."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum, StrEnum

GRID_SIZE = 5


class CellState(IntEnum):
    """State of a single grid cell.

    EMPTY and SHIP are unrevealed; HIT and MISS never change once set.
    """

    EMPTY = 0
    SHIP = 1
    HIT = 2
    MISS = 3

    @property
    def revealed(self) -> bool:
        return self in (CellState.HIT, CellState.MISS)


class PlayerId(StrEnum):
    """Hotseat player identifiers."""

    PLAYER_1 = "Player 1"
    PLAYER_2 = "Player 2"

    @property
    def opponent(self) -> PlayerId:
        return PlayerId.PLAYER_2 if self is PlayerId.PLAYER_1 else PlayerId.PLAYER_1

    @property
    def short(self) -> str:
        return "P1" if self is PlayerId.PLAYER_1 else "P2"


class Orientation(StrEnum):
    """Ship orientation."""

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"


class ErrorKind(StrEnum):
    """Recoverable engine errors surfaced in operation results."""

    OUT_OF_BOUNDS = "OUT_OF_BOUNDS"
    ALREADY_REVEALED = "ALREADY_REVEALED"
    CELL_REVEALED = "CELL_REVEALED"
    SHIP_COLLISION = "SHIP_COLLISION"
    NO_OP_MOVE = "NO_OP_MOVE"
    SHIP_DAMAGED = "SHIP_DAMAGED"
    GAME_ALREADY_OVER = "GAME_ALREADY_OVER"


class AttackOutcome(StrEnum):
    """Result of a single attack."""

    MISS = "MISS"
    HIT = "HIT"
    REJECTED = "REJECTED"


class FortifyOutcome(StrEnum):
    """Result of a fortify-mode click."""

    SELECTED = "SELECTED"
    DESELECTED = "DESELECTED"
    MOVED = "MOVED"
    INFO = "INFO"
    REJECTED = "REJECTED"


@dataclass(frozen=True, slots=True)
class Coord:
    """Board coordinate."""

    row: int
    col: int

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


@dataclass(frozen=True, slots=True)
class Ship:
    """A ship owned by exactly one fleet, identified by ``ship_id``."""

    ship_id: str
    size: int
    coordinates: tuple[Coord, ...]
    orientation: Orientation
    hits: int = 0

    @property
    def is_sunk(self) -> bool:
        return self.hits >= self.size

    @property
    def is_damaged(self) -> bool:
        return self.hits > 0

    @property
    def anchor(self) -> Coord:
        return self.coordinates[0]

    def occupies(self, coord: Coord) -> bool:
        return coord in self.coordinates

    def register_hit(self) -> Ship:
        """Return a copy with one more hit, never exceeding the ship size."""
        return replace(self, hits=min(self.hits + 1, self.size))

    def moved_to(self, coordinates: tuple[Coord, ...]) -> Ship:
        """Return a copy occupying ``coordinates``; id, size and orientation are kept."""
        return replace(self, coordinates=tuple(coordinates))


Fleet = tuple[Ship, ...]


@dataclass(frozen=True, slots=True)
class AttackResult:
    """Outcome of an attack on the defending player's board."""

    outcome: AttackOutcome
    coord: Coord
    message: str
    ship_sunk: str | None = None
    game_over: bool = False
    winner: PlayerId | None = None
    error: ErrorKind | None = None

    @property
    def accepted(self) -> bool:
        return self.error is None


@dataclass(frozen=True, slots=True)
class FortifyResult:
    """Outcome of a selection or move attempt in fortify mode."""

    outcome: FortifyOutcome
    message: str
    ship_id: str | None = None
    error: ErrorKind | None = None
    coordinates: tuple[Coord, ...] = ()
