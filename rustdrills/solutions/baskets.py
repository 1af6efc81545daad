"""Worked answers for the hash map exercises: fruit baskets and a scores table."""

from __future__ import annotations

import enum
from collections.abc import MutableMapping
from dataclasses import dataclass

_U8_MAX = 255
_DIGITS = frozenset("0123456789")
_NEW_FRUIT_AMOUNT = 2


class Fruit(enum.Enum):
    """The kinds of fruit that can go into a basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def default_basket() -> dict[str, int]:
    """A basket of at least three kinds of fruit and at least five pieces."""
    basket = {"banana": 2}
    basket["apple"] = 3
    basket["mango"] = 1
    return basket


def fill_basket(basket: MutableMapping[Fruit, int]) -> None:
    """Add every kind of fruit that is missing, leaving existing counts alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, _NEW_FRUIT_AMOUNT)


@dataclass
class Team:
    """A team's name with the goals it scored and conceded."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0

    def record(self, scored: int, conceded: int) -> None:
        """Add one match's goals, keeping both totals within 0..=255."""
        new_scored = self.goals_scored + scored
        new_conceded = self.goals_conceded + conceded
        if new_scored > _U8_MAX or new_conceded > _U8_MAX:
            raise OverflowError("attempt to add with overflow")
        self.goals_scored = new_scored
        self.goals_conceded = new_conceded


def _parse_goals(text: str) -> int:
    digits = text[1:] if text.startswith("+") else text
    if not digits or not _DIGITS.issuperset(digits):
        raise ValueError(f"invalid goal count {text!r}")
    value = int(digits)
    if value > _U8_MAX:
        raise ValueError(f"goal count {text!r} is too large")
    return value


def _lines(text: str) -> list[str]:
    if not text:
        return []
    pieces = text.split("\n")
    if text.endswith("\n"):
        pieces.pop()
    return [p[:-1] if p.endswith("\r") else p for p in pieces]


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of teams from lines of "team1,team2,goals1,goals2".

    Raises ValueError for a line with fewer than four fields or a bad goal count.
    """
    scores: dict[str, Team] = {}
    for line in _lines(results):
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line {line!r}")
        team_1_name, team_2_name, team_1_text, team_2_text = fields[:4]
        team_1_score = _parse_goals(team_1_text)
        team_2_score = _parse_goals(team_2_text)
        scores.setdefault(team_1_name, Team(team_1_name)).record(
            team_1_score, team_2_score
        )
        scores.setdefault(team_2_name, Team(team_2_name)).record(
            team_2_score, team_1_score
        )
    return scores