"""Process-wide game manager."""
from __future__ import annotations

import logging
from typing import ClassVar

logger = logging.getLogger(__name__)

START_TEXT = "Game started!"


class GameManager:
    """Singleton obtained through GameManager.instance()."""

    _instance: ClassVar[GameManager | None] = None
    _constructing: ClassVar[bool] = False

    def __init__(self) -> None:
        if not GameManager._constructing:
            raise RuntimeError("Use GameManager.instance() to obtain the game manager.")

    @classmethod
    def instance(cls) -> GameManager:
        """Return the shared manager, creating it on first access."""
        if cls._instance is None:
            cls._constructing = True
            try:
                cls._instance = cls()
            finally:
                cls._constructing = False
            logger.debug("GameManager initialized")
        return cls._instance

    def start(self) -> None:
        """Announce the start of the game."""
        print(START_TEXT)
