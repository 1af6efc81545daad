"""Worked answers for the string exercises and the string-transforming machine."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass

_COLOR_WORDS = frozenset({"green", "blue", "red"})


class CommandKind(enum.Enum):
    """What the transformer does to a string."""

    UPPERCASE = "uppercase"
    TRIM = "trim"
    APPEND = "append"


@dataclass(frozen=True)
class Command:
    """A transformation; ``times`` says how often "bar" is appended."""

    kind: CommandKind
    times: int = 0

    def __post_init__(self) -> None:
        if self.times < 0:
            raise ValueError("times must not be negative")


def _apply(text: str, command: Command) -> str:
    match command.kind:
        case CommandKind.UPPERCASE:
            return text.upper()
        case CommandKind.TRIM:
            return text.strip()
        case CommandKind.APPEND:
            return text + "bar" * command.times
    raise ValueError(f"unknown command {command.kind!r}")


def transformer(inputs: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string and collect the results in order."""
    return [_apply(text, command) for text, command in inputs]


def current_favorite_color() -> str:
    """Return the favourite colour."""
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """True for the colour words green, blue and red."""
    return attempt in _COLOR_WORDS


def trim_me(text: str) -> str:
    """Remove whitespace from both ends."""
    return text.strip()


def compose_me(text: str) -> str:
    """Append " world!"."""
    return f"{text} world!"


def replace_me(text: str) -> str:
    """Replace every "cars" with "balloons"."""
    return text.replace("cars", "balloons")