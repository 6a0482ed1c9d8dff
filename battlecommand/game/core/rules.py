"""Game state, attack resolution and turn/win control."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace

from battlecommand.game.core.board import Board, is_fleet_destroyed, ship_at
from battlecommand.game.core.fleet import (
    DEFAULT_LAYOUTS,
    build_board,
    find_ship,
    fresh_fleet,
    replace_ship,
)
from battlecommand.game.core.models import (
    GRID_SIZE,
    AttackOutcome,
    AttackResult,
    CellState,
    Coord,
    ErrorKind,
    Fleet,
    PlayerId,
    Ship,
)

ATTACK_MODE_MESSAGE = "Attack Mode"
ALREADY_ATTACKED_MESSAGE = "Already attacked this cell."


@dataclass(frozen=True, slots=True)
class GameState:
    """Snapshot of a hotseat game.

    Engine operations never mutate a state in place; each accepted move
    returns a new snapshot and rejected moves return the same one.
    """

    size: int
    boards: Mapping[PlayerId, Board]
    fleets: Mapping[PlayerId, Fleet]
    current_player: PlayerId = PlayerId.PLAYER_1
    game_over: bool = False
    winner: PlayerId | None = None
    message: str = ATTACK_MODE_MESSAGE
    fortify_mode: bool = False
    selected_ship_id: str | None = None
    history: tuple[str, ...] = ()

    def board(self, player: PlayerId) -> Board:
        return self.boards[player]

    def fleet(self, player: PlayerId) -> Fleet:
        return self.fleets[player]

    def selected_ship(self) -> Ship | None:
        """Currently selected ship in the acting player's fleet."""
        return find_ship(self.fleet(self.current_player), self.selected_ship_id)

    def with_player(self, player: PlayerId, *, board: Board, fleet: Fleet) -> GameState:
        """Return a copy with one player's board and fleet swapped out."""
        boards = dict(self.boards)
        fleets = dict(self.fleets)
        boards[player] = board
        fleets[player] = fleet
        return replace(self, boards=boards, fleets=fleets)


def new_game(
    size: int = GRID_SIZE,
    layouts: Mapping[PlayerId, Fleet] = DEFAULT_LAYOUTS,
) -> GameState:
    """Create a game with both fleets at their starting layouts."""
    fleets = {player: fresh_fleet(layouts[player]) for player in PlayerId}
    boards = {player: build_board(fleets[player], size=size) for player in PlayerId}
    return GameState(size=size, boards=boards, fleets=fleets)


def is_game_over(state: GameState) -> bool:
    return state.game_over


def winner(state: GameState) -> PlayerId | None:
    return state.winner


def attack(state: GameState, coord: Coord) -> tuple[GameState, AttackResult]:
    """Resolve the current player's attack on the opponent's board."""
    attacker = state.current_player
    defender = attacker.opponent

    if state.game_over:
        return state, _rejected(coord, ErrorKind.GAME_ALREADY_OVER, state.message)

    board = state.board(defender)
    if not board.in_bounds(coord):
        return state, _rejected(coord, ErrorKind.OUT_OF_BOUNDS, f"Target {coord} is out of bounds.")
    if board.is_revealed(coord):
        return state, _rejected(coord, ErrorKind.ALREADY_REVEALED, ALREADY_ATTACKED_MESSAGE)

    fleet = state.fleet(defender)
    target = ship_at(fleet, coord)
    prefix = f"({attacker.short} attacking {defender.short}) "
    sunk_id: str | None = None

    if _true_cell_state(board, target, coord) is CellState.EMPTY:
        outcome = AttackOutcome.MISS
        new_board = board.with_cells({coord: CellState.MISS})
        new_fleet = fleet
        message = f"{prefix}MISS at {coord}"
    else:
        outcome = AttackOutcome.HIT
        new_board = board.with_cells({coord: CellState.HIT})
        new_fleet = fleet
        message = f"{prefix}HIT at {coord}!"
        if target is not None:
            damaged = target.register_hit()
            new_fleet = replace_ship(fleet, damaged)
            message = f"{prefix}HIT {damaged.ship_id} at {coord}!"
            if damaged.is_sunk:
                sunk_id = damaged.ship_id
                message += f" {damaged.ship_id} SUNK!"

    history = state.history + (message,)
    game_over = sunk_id is not None and is_fleet_destroyed(new_fleet)
    status = message
    if game_over:
        status = f"GAME OVER! {attacker.value} Wins!"
        history += (status,)

    next_state = replace(
        state.with_player(defender, board=new_board, fleet=new_fleet),
        current_player=attacker if game_over else defender,
        game_over=game_over,
        winner=attacker if game_over else None,
        message=status,
        fortify_mode=False,
        selected_ship_id=None,
        history=history,
    )
    return next_state, AttackResult(
        outcome=outcome,
        coord=coord,
        message=message,
        ship_sunk=sunk_id,
        game_over=game_over,
        winner=attacker if game_over else None,
    )


def _true_cell_state(board: Board, target: Ship | None, coord: Coord) -> CellState:
    # A fleet ship on a cell not yet marked HIT counts as SHIP; otherwise trust the grid.
    if target is not None and board.cell(coord) is not CellState.HIT:
        return CellState.SHIP
    return board.cell(coord)


def _rejected(coord: Coord, error: ErrorKind, message: str) -> AttackResult:
    return AttackResult(outcome=AttackOutcome.REJECTED, coord=coord, message=message, error=error)
