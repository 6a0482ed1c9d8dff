from battlecommand.game.core.fleet import make_ship
from battlecommand.game.core.models import CellState, Coord, Orientation, PlayerId


def test_player_opponent_and_short_label() -> None:
    assert PlayerId.PLAYER_1.opponent is PlayerId.PLAYER_2
    assert PlayerId.PLAYER_2.opponent is PlayerId.PLAYER_1
    assert PlayerId.PLAYER_1.short == "P1"
    assert PlayerId.PLAYER_2.value == "Player 2"


def test_cell_state_revealed_flags() -> None:
    assert not CellState.EMPTY.revealed
    assert not CellState.SHIP.revealed
    assert CellState.HIT.revealed
    assert CellState.MISS.revealed


def test_ship_sunk_iff_hits_reach_size() -> None:
    ship = make_ship("D", 3, Coord(0, 1), Orientation.VERTICAL)
    for expected_hits in range(1, 4):
        ship = ship.register_hit()
        assert ship.hits == expected_hits
        assert ship.is_sunk is (ship.hits == ship.size)
    assert ship.register_hit().hits == 3


def test_ship_moved_to_keeps_identity_fields() -> None:
    ship = make_ship("S", 2, Coord(4, 3), Orientation.HORIZONTAL)
    moved = ship.moved_to((Coord(0, 0), Coord(0, 1)))
    assert moved.ship_id == "S"
    assert moved.size == 2
    assert moved.orientation is Orientation.HORIZONTAL
    assert moved.anchor == Coord(0, 0)
    assert ship.anchor == Coord(4, 3)


def test_coord_str_matches_status_format() -> None:
    assert str(Coord(2, 3)) == "(2, 3)"
