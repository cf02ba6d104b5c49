"""Domain model exports."""

from .character import Character
from .enemies import Enemy
from .weapons import Weapon

__all__ = [
    "Character",
    "Enemy",
    "Weapon",
]
