"""Service layer exports."""

from .errors import FactoryError
from .game_manager import GameManager
from .game_session import GameSession
from .selection import Selection, select_enemy_mode, select_weapon_kind

__all__ = [
    "FactoryError",
    "GameManager",
    "GameSession",
    "Selection",
    "select_enemy_mode",
    "select_weapon_kind",
]
