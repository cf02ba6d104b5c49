"""Console-driven game flow."""
from __future__ import annotations

import logging
import sys

from arena.core.types import EnemyMode
from arena.domain.character import Character
from arena.domain.enemies import Enemy
from arena.domain.weapons import Weapon
from arena.services import GameManager, GameSession, select_enemy_mode, select_weapon_kind
from arena.services.factories import create_enemy, create_weapon

from .config import load_config, resolve_log_level
from .render import render_menu, render_notice

logger = logging.getLogger(__name__)

_CHOICE_PROMPT = "Enter your choice: "


def main() -> None:
    """Run one interactive game."""
    setup_logging(resolve_log_level(load_config()))
    play(GameManager.instance())


def setup_logging(level: int) -> None:
    """Send diagnostics to stderr so stdout carries only game text."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s [%(name)s] %(message)s"))
    root = logging.getLogger("arena")
    root.handlers[:] = [handler]
    root.setLevel(level)
    root.propagate = False


def play(manager: GameManager) -> None:
    """Wire weapon, character and enemy together and run a single session."""
    print("Welcome to the Game!")

    weapon = _choose_weapon()

    manager.start()

    character = Character()
    character.equip(weapon)

    enemy = _choose_enemy()

    session = GameSession(character)
    session.add_enemy(enemy)
    session.run()

    print("\nThanks for playing the Game!")


def _read_choice() -> str:
    try:
        return input(_CHOICE_PROMPT)
    except EOFError:
        return ""


def _choose_weapon() -> Weapon:
    render_menu("Select your weapon type:", ["Sword", "Bow"])
    selection = select_weapon_kind(_read_choice())
    render_notice(selection.notice)
    return create_weapon(selection.value)


def _choose_enemy() -> Enemy:
    render_menu("Create an enemy (Goblin) by cloning:", ["Clone", "Create New"])
    selection = select_enemy_mode(_read_choice())
    render_notice(selection.notice)
    return build_enemy(selection.value)


def build_enemy(mode: EnemyMode) -> Enemy:
    """Produce the session's enemy either fresh from the factory or as a prototype copy."""
    if mode is EnemyMode.CLONE:
        prototype = create_enemy()
        logger.debug("Cloning enemy prototype %s", prototype.kind.value)
        return prototype.clone()
    return create_enemy()
