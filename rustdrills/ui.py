"""Coloured status lines shown to the learner."""

from __future__ import annotations

import os

from rich.console import Console


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _emit(symbol: str, fallback: str, message: str, style: str) -> None:
    prefix = fallback if no_emoji() else symbol
    console = Console(highlight=False, soft_wrap=True)
    console.print(f"{prefix} {message}", style=style, markup=False, emoji=False)


def warn(message: str) -> None:
    """Print a red warning line."""
    _emit("⚠️ ", "!", message, "red")


def success(message: str) -> None:
    """Print a green success line."""
    _emit("✅", "✓", message, "green")