import pytest

from battlecommand.game.core.fleet import (
    DEFAULT_LAYOUTS,
    build_board,
    find_ship,
    make_ship,
    replace_ship,
    ship_cells,
    validate_fleet,
)
from battlecommand.game.core.models import CellState, Coord, Orientation, PlayerId, Ship


def test_ship_cells_horizontal_and_vertical() -> None:
    assert ship_cells(Coord(1, 2), Orientation.HORIZONTAL, 3) == (Coord(1, 2), Coord(1, 3), Coord(1, 4))
    assert ship_cells(Coord(1, 2), Orientation.VERTICAL, 3) == (Coord(1, 2), Coord(2, 2), Coord(3, 2))


def test_default_layouts_are_valid_and_shaped() -> None:
    for player in PlayerId:
        fleet = DEFAULT_LAYOUTS[player]
        valid, reason = validate_fleet(fleet)
        assert valid, reason
        shapes = sorted((ship.size, ship.orientation) for ship in fleet)
        assert shapes == [(2, Orientation.HORIZONTAL), (3, Orientation.VERTICAL)]
    assert DEFAULT_LAYOUTS[PlayerId.PLAYER_1][0].coordinates == (Coord(0, 1), Coord(1, 1), Coord(2, 1))
    assert DEFAULT_LAYOUTS[PlayerId.PLAYER_2][1].coordinates == (Coord(0, 0), Coord(0, 1))


def test_validate_fleet_rejects_duplicate_id() -> None:
    fleet = (
        make_ship("X", 2, Coord(0, 0), Orientation.HORIZONTAL),
        make_ship("X", 2, Coord(2, 0), Orientation.HORIZONTAL),
    )
    valid, reason = validate_fleet(fleet)
    assert not valid
    assert "Duplicate ship id" in reason


def test_validate_fleet_rejects_overlap_and_bounds() -> None:
    overlapping = (
        make_ship("A", 3, Coord(0, 1), Orientation.VERTICAL),
        make_ship("B", 2, Coord(1, 0), Orientation.HORIZONTAL),
    )
    valid, reason = validate_fleet(overlapping)
    assert not valid
    assert "overlaps A" in reason

    valid, reason = validate_fleet((make_ship("C", 2, Coord(0, 4), Orientation.HORIZONTAL),))
    assert not valid
    assert "out of bounds" in reason


def test_validate_fleet_rejects_broken_shapes() -> None:
    gapped = Ship("G", 2, (Coord(0, 0), Coord(0, 2)), Orientation.HORIZONTAL)
    short = Ship("H", 3, (Coord(0, 0), Coord(0, 1)), Orientation.HORIZONTAL)
    assert not validate_fleet((gapped,))[0]
    assert "exactly 3 cells" in validate_fleet((short,))[1]
    assert not validate_fleet(())[0]


def test_build_board_marks_ships_and_raises_on_invalid() -> None:
    board = build_board(DEFAULT_LAYOUTS[PlayerId.PLAYER_1])
    assert board.count(CellState.SHIP) == 5
    assert board.cell(Coord(4, 4)) is CellState.SHIP
    with pytest.raises(ValueError, match="out of bounds"):
        build_board((make_ship("C", 3, Coord(3, 0), Orientation.VERTICAL),))


def test_replace_and_find_ship_by_id() -> None:
    fleet = DEFAULT_LAYOUTS[PlayerId.PLAYER_1]
    damaged = fleet[1].register_hit()
    updated = replace_ship(fleet, damaged)
    assert find_ship(updated, "P1_Submarine") == damaged
    assert find_ship(updated, "P1_Destroyer") == fleet[0]
    assert find_ship(updated, "missing") is None
    assert find_ship(updated, None) is None
