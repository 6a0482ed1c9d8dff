"""Fortify mode: selecting an undamaged ship and repositioning it."""

from __future__ import annotations

from dataclasses import replace

from battlecommand.game.core.board import Board, ship_at
from battlecommand.game.core.fleet import replace_ship, ship_cells
from battlecommand.game.core.models import (
    CellState,
    Coord,
    ErrorKind,
    Fleet,
    FortifyOutcome,
    FortifyResult,
    Ship,
)
from battlecommand.game.core.rules import ATTACK_MODE_MESSAGE, GameState

FORTIFY_MODE_MESSAGE = "Fortify Mode: Select undamaged ship."


def toggle_fortify_mode(state: GameState) -> GameState:
    """Switch between attack and fortify mode, dropping any selection."""
    if state.game_over:
        return state
    enabled = not state.fortify_mode
    return replace(
        state,
        fortify_mode=enabled,
        selected_ship_id=None,
        message=FORTIFY_MODE_MESSAGE if enabled else ATTACK_MODE_MESSAGE,
    )


def proposed_coordinates(ship: Ship, anchor: Coord) -> tuple[Coord, ...]:
    """Cells the ship would occupy with ``anchor`` as its first coordinate."""
    return ship_cells(anchor, ship.orientation, ship.size)


def validate_move(
    board: Board, fleet: Fleet, ship: Ship, proposed: tuple[Coord, ...]
) -> tuple[ErrorKind, str] | None:
    """Return the first failed check for moving ``ship`` to ``proposed``, or None."""
    for coord in proposed:
        if not board.in_bounds(coord):
            return ErrorKind.OUT_OF_BOUNDS, "Out of bounds."
    for coord in proposed:
        if board.is_revealed(coord):
            return ErrorKind.CELL_REVEALED, "Cannot move to MISS/HIT."
    for other in fleet:
        if other.ship_id == ship.ship_id:
            continue
        if any(other.occupies(coord) for coord in proposed):
            return ErrorKind.SHIP_COLLISION, f"Collides with {other.ship_id}."
    if len(proposed) == len(ship.coordinates) and set(proposed) == set(ship.coordinates):
        return ErrorKind.NO_OP_MOVE, "Already at that location."
    return None


def select_or_move(state: GameState, coord: Coord) -> tuple[GameState, FortifyResult]:
    """Handle a click on the acting player's own board."""
    player = state.current_player
    prefix = f"({player.short} Fortifying) "

    if state.game_over:
        return state, FortifyResult(
            outcome=FortifyOutcome.REJECTED,
            message=state.message,
            error=ErrorKind.GAME_ALREADY_OVER,
        )
    if not state.fortify_mode:
        return state, FortifyResult(
            outcome=FortifyOutcome.INFO,
            message=f"{player.value}: Attack {player.opponent.short}'s grid or select Fortify.",
        )

    clicked = ship_at(state.fleet(player), coord)
    selected = state.selected_ship()

    if selected is None:
        if clicked is None:
            return state, FortifyResult(
                outcome=FortifyOutcome.INFO,
                message=f"{prefix}Click one of your undamaged ships.",
            )
        if clicked.is_damaged:
            return state, FortifyResult(
                outcome=FortifyOutcome.REJECTED,
                message=f"{prefix}{clicked.ship_id} is damaged.",
                ship_id=clicked.ship_id,
                error=ErrorKind.SHIP_DAMAGED,
            )
        message = f"{prefix}{clicked.ship_id} selected. Click destination."
        return replace(state, selected_ship_id=clicked.ship_id, message=message), FortifyResult(
            outcome=FortifyOutcome.SELECTED,
            message=message,
            ship_id=clicked.ship_id,
        )

    if clicked is not None and clicked.ship_id == selected.ship_id:
        message = f"{prefix}Ship deselected."
        return replace(state, selected_ship_id=None, message=message), FortifyResult(
            outcome=FortifyOutcome.DESELECTED,
            message=message,
            ship_id=selected.ship_id,
        )
    if clicked is not None:
        return state, FortifyResult(
            outcome=FortifyOutcome.INFO,
            message=f"{prefix}{selected.ship_id} selected. Click destination or deselect.",
            ship_id=selected.ship_id,
        )
    return _move(state, selected, coord, prefix)


def _move(
    state: GameState, ship: Ship, anchor: Coord, prefix: str
) -> tuple[GameState, FortifyResult]:
    player = state.current_player
    board = state.board(player)
    fleet = state.fleet(player)
    proposed = proposed_coordinates(ship, anchor)

    failure = validate_move(board, fleet, ship, proposed)
    if failure is not None:
        error, reason = failure
        return state, FortifyResult(
            outcome=FortifyOutcome.REJECTED,
            message=f"{prefix}Cannot move. {reason}",
            ship_id=ship.ship_id,
            error=error,
        )

    updates = {coord: CellState.EMPTY for coord in ship.coordinates}
    updates.update({coord: CellState.SHIP for coord in proposed})
    message = f"{prefix}{ship.ship_id} moved!"
    next_state = replace(
        state.with_player(
            player,
            board=board.with_cells(updates),
            fleet=replace_ship(fleet, ship.moved_to(proposed)),
        ),
        current_player=player.opponent,
        message=message,
        fortify_mode=False,
        selected_ship_id=None,
        history=state.history + (message,),
    )
    return next_state, FortifyResult(
        outcome=FortifyOutcome.MOVED,
        message=message,
        ship_id=ship.ship_id,
        coordinates=proposed,
    )
