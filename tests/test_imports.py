def test_import_arena_package() -> None:
    import importlib

    module = importlib.import_module("arena")
    assert module is not None


def test_import_factories_no_side_effects(capsys) -> None:
    from arena.services.factories import create_weapon
    from arena.core.types import WeaponKind

    weapon = create_weapon(WeaponKind.BOW)
    assert weapon.kind is WeaponKind.BOW
    assert capsys.readouterr().out == ""
