"""Fleet layouts, placement validation and board construction."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace

from battlecommand.game.core.board import Board, board_from_ships
from battlecommand.game.core.models import (
    GRID_SIZE,
    Coord,
    Fleet,
    Orientation,
    PlayerId,
    Ship,
)


def ship_cells(anchor: Coord, orientation: Orientation, size: int) -> tuple[Coord, ...]:
    """Compute the contiguous run of cells starting at ``anchor``.

    Vertical ships extend down the rows, horizontal ships extend right along
    the columns.
    """
    result: list[Coord] = []
    for i in range(size):
        if orientation is Orientation.HORIZONTAL:
            result.append(Coord(anchor.row, anchor.col + i))
        else:
            result.append(Coord(anchor.row + i, anchor.col))
    return tuple(result)


def make_ship(ship_id: str, size: int, anchor: Coord, orientation: Orientation) -> Ship:
    """Build an undamaged ship laid out from ``anchor``."""
    return Ship(
        ship_id=ship_id,
        size=size,
        coordinates=ship_cells(anchor, orientation, size),
        orientation=orientation,
    )


DEFAULT_LAYOUTS: Mapping[PlayerId, Fleet] = {
    PlayerId.PLAYER_1: (
        make_ship("P1_Destroyer", 3, Coord(0, 1), Orientation.VERTICAL),
        make_ship("P1_Submarine", 2, Coord(4, 3), Orientation.HORIZONTAL),
    ),
    PlayerId.PLAYER_2: (
        make_ship("P2_Destroyer", 3, Coord(1, 3), Orientation.VERTICAL),
        make_ship("P2_Submarine", 2, Coord(0, 0), Orientation.HORIZONTAL),
    ),
}


def fresh_fleet(fleet: Fleet) -> Fleet:
    """Return the fleet with every hit counter reset."""
    return tuple(replace(ship, hits=0) for ship in fleet)


def validate_fleet(fleet: Fleet, size: int = GRID_SIZE) -> tuple[bool, str]:
    """Validate ship shapes, bounds and overlap for one player's fleet."""
    seen_ids: set[str] = set()
    occupied: dict[Coord, str] = {}

    if not fleet:
        return False, "Fleet must contain at least one ship."

    for ship in fleet:
        if ship.ship_id in seen_ids:
            return False, f"Duplicate ship id: {ship.ship_id}."
        seen_ids.add(ship.ship_id)
        if ship.size <= 0:
            return False, f"Ship {ship.ship_id} must have a positive size."
        if len(ship.coordinates) != ship.size:
            return False, f"Ship {ship.ship_id} must occupy exactly {ship.size} cells."
        if not 0 <= ship.hits <= ship.size:
            return False, f"Ship {ship.ship_id} has an invalid hit count."
        if ship.coordinates != ship_cells(ship.anchor, ship.orientation, ship.size):
            return False, f"Ship {ship.ship_id} is not a straight {ship.orientation.value.lower()} run."
        for coord in ship.coordinates:
            if not (0 <= coord.row < size and 0 <= coord.col < size):
                return False, f"Ship {ship.ship_id} is out of bounds at {coord}."
            if coord in occupied:
                return False, f"Ship {ship.ship_id} overlaps {occupied[coord]} at {coord}."
            occupied[coord] = ship.ship_id
    return True, ""


def build_board(fleet: Fleet, size: int = GRID_SIZE) -> Board:
    """Create a board from a validated fleet."""
    valid, reason = validate_fleet(fleet, size=size)
    if not valid:
        raise ValueError(reason)
    return board_from_ships(fleet, size=size)


def replace_ship(fleet: Fleet, updated: Ship) -> Fleet:
    """Return the fleet with the entry sharing ``updated.ship_id`` replaced."""
    return tuple(updated if ship.ship_id == updated.ship_id else ship for ship in fleet)


def find_ship(fleet: Fleet, ship_id: str | None) -> Ship | None:
    """Look up a ship by id."""
    if ship_id is None:
        return None
    for ship in fleet:
        if ship.ship_id == ship_id:
            return ship
    return None
