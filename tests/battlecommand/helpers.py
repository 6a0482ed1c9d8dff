from __future__ import annotations

from dataclasses import replace

from battlecommand.game.core.fleet import make_ship
from battlecommand.game.core.models import Coord, Fleet, Orientation, PlayerId
from battlecommand.game.core.rules import GameState


def scenario_layouts() -> dict[PlayerId, Fleet]:
    return {
        PlayerId.PLAYER_1: (make_ship("S", 2, Coord(4, 3), Orientation.HORIZONTAL),),
        PlayerId.PLAYER_2: (make_ship("D", 3, Coord(0, 1), Orientation.VERTICAL),),
    }


def as_player(state: GameState, player: PlayerId) -> GameState:
    return replace(state, current_player=player)
