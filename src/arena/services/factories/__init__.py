"""Factory helpers for runtime entities."""

from .enemy_factory import EnemyFactory, GoblinFactory, create_enemy, enemy_factory_for
from .weapon_factory import BowFactory, SwordFactory, WeaponFactory, create_weapon, weapon_factory_for

__all__ = [
    "BowFactory",
    "EnemyFactory",
    "GoblinFactory",
    "SwordFactory",
    "WeaponFactory",
    "create_enemy",
    "create_weapon",
    "enemy_factory_for",
    "weapon_factory_for",
]
