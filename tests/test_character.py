from arena.core.types import WeaponKind
from arena.domain.character import NO_WEAPON_TEXT, Character
from arena.domain.weapons import Weapon


def test_character_without_weapon_reports_no_weapon() -> None:
    character = Character()

    assert character.weapon is None
    assert character.attack() == NO_WEAPON_TEXT == "No weapon equipped!"


def test_equip_sets_weapon_used_for_attack() -> None:
    character = Character()
    character.equip(Weapon(WeaponKind.SWORD))

    assert character.attack() == "Attacking with a sword!"


def test_equip_replaces_previous_weapon() -> None:
    character = Character()
    sword = Weapon(WeaponKind.SWORD)
    bow = Weapon(WeaponKind.BOW)

    character.equip(sword)
    character.equip(bow)

    assert character.weapon is bow
    assert character.attack() == "Shooting arrows with a bow!"
