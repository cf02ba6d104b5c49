"""Enemy variants and their prototype copy."""
from __future__ import annotations

from dataclasses import dataclass, replace

from arena.core.types import EnemyKind

_ATTACK_TEXT: dict[EnemyKind, str] = {
    EnemyKind.GOBLIN: "Goblin attacks!",
}


@dataclass(frozen=True, slots=True)
class Enemy:
    """An immutable enemy identified by its variant."""

    kind: EnemyKind

    def attack(self) -> str:
        """Return the attack description for this variant."""
        return _ATTACK_TEXT[self.kind]

    def clone(self) -> Enemy:
        """Return an independent copy with the same state."""
        return replace(self)
