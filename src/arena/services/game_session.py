"""A single run of the game: one character against a list of enemies."""
from __future__ import annotations

import logging
from typing import List

from arena.domain.character import Character
from arena.domain.enemies import Enemy

logger = logging.getLogger(__name__)


class GameSession:
    """Orchestrates the attack sequence printout for one run."""

    def __init__(self, character: Character) -> None:
        self._character = character
        self._enemies: List[Enemy] = []

    @property
    def enemies(self) -> tuple[Enemy, ...]:
        """Enemies in the order they were added."""
        return tuple(self._enemies)

    def add_enemy(self, enemy: Enemy) -> None:
        self._enemies.append(enemy)

    def run(self) -> None:
        """Print the character attack followed by every enemy attack."""
        logger.debug("Running session with %d enemies", len(self._enemies))
        print("\n=== Game Start ===")
        print("Your character attacks with:")
        print(self._character.attack())

        print("\nEnemies attack:")
        for enemy in self._enemies:
            print(enemy.attack())
        print("=== Game Over ===")
