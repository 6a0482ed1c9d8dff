from __future__ import annotations

import logging

import pytest

from battlecommand.game.core.rules import GameState, new_game
from tests.battlecommand.helpers import scenario_layouts


@pytest.fixture
def fresh_state() -> GameState:
    return new_game()


@pytest.fixture
def scenario_state() -> GameState:
    return new_game(layouts=scenario_layouts())


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
