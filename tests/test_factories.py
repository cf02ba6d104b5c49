import pytest

from arena.core.types import EnemyKind, WeaponKind
from arena.domain import Enemy, Weapon
from arena.services.errors import FactoryError
from arena.services.factories import (
    BowFactory,
    GoblinFactory,
    SwordFactory,
    create_enemy,
    create_weapon,
    enemy_factory_for,
    weapon_factory_for,
)


def test_weapon_factory_for_returns_matching_factory() -> None:
    assert isinstance(weapon_factory_for(WeaponKind.SWORD), SwordFactory)
    assert isinstance(weapon_factory_for(WeaponKind.BOW), BowFactory)


@pytest.mark.parametrize("kind", list(WeaponKind))
def test_create_weapon_builds_requested_variant(kind: WeaponKind) -> None:
    weapon = create_weapon(kind)

    assert isinstance(weapon, Weapon)
    assert weapon.kind is kind


def test_create_weapon_returns_new_instance_each_call() -> None:
    assert create_weapon(WeaponKind.SWORD) is not create_weapon(WeaponKind.SWORD)


def test_create_weapon_unknown_kind_raises_clean_error() -> None:
    with pytest.raises(FactoryError):
        create_weapon("axe")  # type: ignore[arg-type]


def test_enemy_factory_defaults_to_goblin() -> None:
    enemy = create_enemy()

    assert isinstance(enemy, Enemy)
    assert enemy.kind is EnemyKind.GOBLIN
    assert isinstance(enemy_factory_for(EnemyKind.GOBLIN), GoblinFactory)


def test_create_enemy_unknown_kind_raises_clean_error() -> None:
    with pytest.raises(FactoryError):
        create_enemy("dragon")  # type: ignore[arg-type]
