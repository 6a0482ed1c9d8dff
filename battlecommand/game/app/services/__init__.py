"""Application service-layer helpers."""

from battlecommand.game.app.services.battle import BattleService

__all__ = ["BattleService"]
