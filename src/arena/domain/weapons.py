"""Weapon variants."""
from __future__ import annotations

from dataclasses import dataclass

from arena.core.types import WeaponKind

_ATTACK_TEXT: dict[WeaponKind, str] = {
    WeaponKind.SWORD: "Attacking with a sword!",
    WeaponKind.BOW: "Shooting arrows with a bow!",
}


@dataclass(frozen=True, slots=True)
class Weapon:
    """An immutable weapon identified by its variant."""

    kind: WeaponKind

    @property
    def name(self) -> str:
        return self.kind.value.title()

    def attack(self) -> str:
        """Return the attack description for this variant."""
        return _ATTACK_TEXT[self.kind]
