"""Shared CLI rendering helpers."""
from __future__ import annotations

from typing import Sequence


def render_menu(title: str, options: Sequence[str]) -> None:
    """Display a menu with numbered options."""
    print(f"\n{title}")
    for idx, label in enumerate(options, start=1):
        print(f"{idx}. {label}")


def render_notice(notice: str | None) -> None:
    """Print a fallback notice when one was produced."""
    if notice:
        print(notice)
