"""Abstract factory for weapon variants."""
from __future__ import annotations

import logging
from typing import Dict, Protocol

from arena.core.types import WeaponKind
from arena.domain.weapons import Weapon
from arena.services.errors import FactoryError

logger = logging.getLogger(__name__)


class WeaponFactory(Protocol):
    """Creates one weapon variant."""

    def create_weapon(self) -> Weapon:
        ...


class SwordFactory:
    def create_weapon(self) -> Weapon:
        return Weapon(kind=WeaponKind.SWORD)


class BowFactory:
    def create_weapon(self) -> Weapon:
        return Weapon(kind=WeaponKind.BOW)


_FACTORIES: Dict[WeaponKind, WeaponFactory] = {
    WeaponKind.SWORD: SwordFactory(),
    WeaponKind.BOW: BowFactory(),
}


def weapon_factory_for(kind: WeaponKind) -> WeaponFactory:
    """Return the factory registered for the given weapon kind."""
    try:
        return _FACTORIES[kind]
    except KeyError as exc:
        raise FactoryError(f"Weapon kind '{kind}' has no registered factory.") from exc


def create_weapon(kind: WeaponKind) -> Weapon:
    """Instantiate a new weapon of the given kind."""
    weapon = weapon_factory_for(kind).create_weapon()
    logger.debug("Created weapon %s", weapon.kind.value)
    return weapon
