import pytest

from arena.core.types import EnemyMode, WeaponKind
from arena.services.selection import (
    INVALID_ENEMY_MODE_NOTICE,
    INVALID_WEAPON_NOTICE,
    select_enemy_mode,
    select_weapon_kind,
)


def test_weapon_selectors_map_to_kinds() -> None:
    assert select_weapon_kind("1").value is WeaponKind.SWORD
    assert select_weapon_kind("2").value is WeaponKind.BOW
    assert not select_weapon_kind(" 2 ").used_default


@pytest.mark.parametrize("raw", ["", "0", "3", "9", "sword", "1.0", "-1"])
def test_unrecognized_weapon_selector_defaults_to_sword(raw: str) -> None:
    selection = select_weapon_kind(raw)

    assert selection.value is WeaponKind.SWORD
    assert selection.notice == INVALID_WEAPON_NOTICE


def test_enemy_mode_selectors_map_to_modes() -> None:
    assert select_enemy_mode("1").value is EnemyMode.FRESH
    assert select_enemy_mode("2").value is EnemyMode.CLONE
    assert select_enemy_mode("1").notice is None


@pytest.mark.parametrize("raw", ["", "3", "9", "clone"])
def test_unrecognized_enemy_mode_takes_fresh_path(raw: str) -> None:
    selection = select_enemy_mode(raw)

    assert selection.value is EnemyMode.FRESH
    assert selection.value is select_enemy_mode("1").value
    assert selection.notice == INVALID_ENEMY_MODE_NOTICE
