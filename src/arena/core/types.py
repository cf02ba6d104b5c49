"""Shared enumerations for the core and domain layers."""
from __future__ import annotations

from enum import Enum


class WeaponKind(Enum):
    """Closed set of weapon variants."""

    SWORD = "sword"
    BOW = "bow"


class EnemyKind(Enum):
    """Closed set of enemy variants."""

    GOBLIN = "goblin"


class EnemyMode(Enum):
    """How the entry point obtains the enemy for a session."""

    FRESH = "fresh"
    CLONE = "clone"


__all__ = ["EnemyKind", "EnemyMode", "WeaponKind"]
