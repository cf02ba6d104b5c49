"""Player character model."""
from __future__ import annotations

from dataclasses import dataclass

from .weapons import Weapon

NO_WEAPON_TEXT = "No weapon equipped!"


@dataclass(slots=True)
class Character:
    """Holds at most one equipped weapon and attacks with it."""

    weapon: Weapon | None = None

    def equip(self, weapon: Weapon) -> None:
        """Equip a weapon, replacing any weapon already held."""
        self.weapon = weapon

    def attack(self) -> str:
        if self.weapon is None:
            return NO_WEAPON_TEXT
        return self.weapon.attack()
