"""Board state representation and fleet queries."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

import numpy as np

from battlecommand.game.core.models import GRID_SIZE, CellState, Coord, Fleet, Ship


@dataclass(slots=True, eq=False)
class Board:
    """Numpy-backed square grid of cell states, one per player.

    The owner's board is the single authoritative copy. Attackers read it
    through :meth:`attacker_view`, which hides unrevealed ship cells.
    """

    size: int = GRID_SIZE
    cells: np.ndarray = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.cells is None:
            self.cells = np.zeros((self.size, self.size), dtype=np.int8)
        elif self.cells.shape != (self.size, self.size):
            raise ValueError(
                f"Board cells have shape {self.cells.shape}, expected ({self.size}, {self.size})."
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and bool(np.array_equal(self.cells, other.cells))

    def in_bounds(self, coord: Coord) -> bool:
        """Return whether the coordinate is in board bounds."""
        return 0 <= coord.row < self.size and 0 <= coord.col < self.size

    def cell(self, coord: Coord) -> CellState:
        """Return the state of an in-bounds cell."""
        return CellState(int(self.cells[coord.row, coord.col]))

    def is_revealed(self, coord: Coord) -> bool:
        return self.cell(coord).revealed

    def copy(self) -> Board:
        return Board(size=self.size, cells=self.cells.copy())

    def with_cells(self, updates: Mapping[Coord, CellState]) -> Board:
        """Return a new board with ``updates`` applied; this board is left untouched."""
        board = self.copy()
        for coord, state in updates.items():
            board.cells[coord.row, coord.col] = int(state)
        return board

    def rows(self) -> list[list[CellState]]:
        """Owner's view of the grid."""
        return [[CellState(int(value)) for value in row] for row in self.cells]

    def attacker_view(self) -> list[list[CellState]]:
        """Opponent's view: unrevealed ship cells read as EMPTY."""
        hidden = np.where(self.cells == int(CellState.SHIP), int(CellState.EMPTY), self.cells)
        return [[CellState(int(value)) for value in row] for row in hidden]

    def count(self, state: CellState) -> int:
        return int(np.count_nonzero(self.cells == int(state)))

    def tobytes(self) -> bytes:
        return self.cells.tobytes()


def ship_at(fleet: Iterable[Ship], coord: Coord) -> Ship | None:
    """Return the ship in ``fleet`` occupying ``coord``, if any."""
    for ship in fleet:
        if ship.occupies(coord):
            return ship
    return None


def is_fleet_destroyed(fleet: Fleet) -> bool:
    """Return whether every ship in the fleet has been sunk."""
    return all(ship.is_sunk for ship in fleet)


def board_from_ships(fleet: Iterable[Ship], size: int = GRID_SIZE) -> Board:
    """Mark every in-bounds ship coordinate as SHIP on an empty board."""
    board = Board(size=size)
    for ship in fleet:
        for coord in ship.coordinates:
            if board.in_bounds(coord):
                board.cells[coord.row, coord.col] = int(CellState.SHIP)
    return board
