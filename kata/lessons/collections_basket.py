"""Dictionary lessons: fruit baskets and a football scores table."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_U8_MAX = 255
_UNSIGNED = re.compile(r"\+?[0-9]+")


def default_fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds of fruit and at least five fruits."""
    basket = {"banana": 2}
    basket["mango"] = 102030
    basket["aple"] = 1
    return basket


class Fruit(Enum):
    """Kinds of fruit that can go in a basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add every missing kind of fruit, leaving the ones present untouched."""
    for index, fruit in enumerate(Fruit, start=1):
        if fruit not in basket:
            basket[fruit] = index + index


@dataclass
class Team:
    """A team's name with its goals scored and conceded."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0


def _parse_goals(text: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise ValueError(f"invalid goal count: {text!r}")
    value = int(text)
    if value > _U8_MAX:
        raise ValueError(f"goal count too large: {text!r}")
    return value


def _add_goals(a: int, b: int) -> int:
    total = a + b
    if total > _U8_MAX:
        raise OverflowError("attempt to add with overflow")
    return total


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table from lines of "team1,team2,score1,score2"."""
    scores: dict[str, Team] = {}

    def update(name: str, scored: int, conceded: int) -> None:
        team = scores.setdefault(name, Team(name))
        team.goals_scored = _add_goals(team.goals_scored, scored)
        team.goals_conceded = _add_goals(team.goals_conceded, conceded)

    for line in _lines(results):
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1, team_2 = fields[0], fields[1]
        score_1, score_2 = _parse_goals(fields[2]), _parse_goals(fields[3])
        update(team_1, score_1, score_2)
        update(team_2, score_2, score_1)
    return scores