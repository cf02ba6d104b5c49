"""Translate raw menu input into variant selections."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, Mapping, TypeVar

from arena.core.types import EnemyMode, WeaponKind

logger = logging.getLogger(__name__)

T = TypeVar("T")

WEAPON_CHOICES: Mapping[str, WeaponKind] = {"1": WeaponKind.SWORD, "2": WeaponKind.BOW}
DEFAULT_WEAPON = WeaponKind.SWORD
INVALID_WEAPON_NOTICE = "Invalid choice. Using default weapon (Sword)."

ENEMY_MODE_CHOICES: Mapping[str, EnemyMode] = {"1": EnemyMode.FRESH, "2": EnemyMode.CLONE}
DEFAULT_ENEMY_MODE = EnemyMode.FRESH
INVALID_ENEMY_MODE_NOTICE = "Invalid choice. Creating a new enemy (Goblin)."


@dataclass(frozen=True)
class Selection(Generic[T]):
    """Outcome of parsing a selector; notice is set when the default was used."""

    value: T
    notice: str | None = None

    @property
    def used_default(self) -> bool:
        return self.notice is not None


def _select(raw: str, choices: Mapping[str, T], default: T, notice: str) -> Selection[T]:
    key = raw.strip()
    if key in choices:
        return Selection(value=choices[key])
    logger.debug("Unrecognized selector %r, falling back to %s", raw, default)
    return Selection(value=default, notice=notice)


def select_weapon_kind(raw: str) -> Selection[WeaponKind]:
    """Map a weapon selector to a kind; anything unrecognized becomes a sword."""
    return _select(raw, WEAPON_CHOICES, DEFAULT_WEAPON, INVALID_WEAPON_NOTICE)


def select_enemy_mode(raw: str) -> Selection[EnemyMode]:
    """Map an enemy-creation selector to a mode; anything unrecognized creates fresh."""
    return _select(raw, ENEMY_MODE_CHOICES, DEFAULT_ENEMY_MODE, INVALID_ENEMY_MODE_NOTICE)
