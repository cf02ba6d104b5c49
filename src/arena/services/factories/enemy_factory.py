"""Factory method for enemy variants."""
from __future__ import annotations

import logging
from typing import Dict, Protocol

from arena.core.types import EnemyKind
from arena.domain.enemies import Enemy
from arena.services.errors import FactoryError

logger = logging.getLogger(__name__)


class EnemyFactory(Protocol):
    """Creates one enemy variant."""

    def create_enemy(self) -> Enemy:
        ...


class GoblinFactory:
    def create_enemy(self) -> Enemy:
        return Enemy(kind=EnemyKind.GOBLIN)


_FACTORIES: Dict[EnemyKind, EnemyFactory] = {
    EnemyKind.GOBLIN: GoblinFactory(),
}


def enemy_factory_for(kind: EnemyKind) -> EnemyFactory:
    """Return the factory registered for the given enemy kind."""
    try:
        return _FACTORIES[kind]
    except KeyError as exc:
        raise FactoryError(f"Enemy kind '{kind}' has no registered factory.") from exc


def create_enemy(kind: EnemyKind = EnemyKind.GOBLIN) -> Enemy:
    """Instantiate a new enemy, a goblin unless another kind is requested."""
    enemy = enemy_factory_for(kind).create_enemy()
    logger.debug("Created enemy %s", enemy.kind.value)
    return enemy
