"""Dictionaries and lists: fruit baskets, score tables and doubled numbers."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_U8_MAX = 255
_DIGITS = frozenset("0123456789")
_REFILL_AMOUNT = 25


class Fruit(enum.Enum):
    """Kinds of fruit that can go into a basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


@dataclass
class Team:
    """Goals a team scored and conceded over a set of matches."""

    goals_scored: int = 0
    goals_conceded: int = 0


def default_basket() -> dict[str, int]:
    """A basket of at least three kinds of fruit and at least five pieces."""
    return {"banana": 2, "mango": 4, "blueberry": 20}


def fill_basket(basket: dict[Fruit, int]) -> None:
    """Add every missing kind of fruit, leaving the kinds already present alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, _REFILL_AMOUNT)


def _parse_goals(text: str) -> int:
    digits = text[1:] if text[:1] == "+" else text
    if not digits or not set(digits) <= _DIGITS:
        raise ValueError(f"invalid goal count: {text!r}")
    value = int(digits)
    if value > _U8_MAX:
        raise ValueError(f"goal count out of range: {text!r}")
    return value


def _lines(text: str) -> list[str]:
    if not text:
        return []
    parts = text.split("\n")
    if text.endswith("\n"):
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def _add(team: Team, scored: int, conceded: int) -> None:
    team.goals_scored += scored
    team.goals_conceded += conceded
    if team.goals_scored > _U8_MAX or team.goals_conceded > _U8_MAX:
        raise OverflowError("goal total exceeds 255")


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of goals per team from "team1,team2,goals1,goals2" lines.

    Raises ValueError for a line with too few fields or a bad goal count.
    """
    scores: dict[str, Team] = {}
    for line in _lines(results):
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1, team_2 = fields[0], fields[1]
        goals_1, goals_2 = _parse_goals(fields[2]), _parse_goals(fields[3])
        _add(scores.setdefault(team_1, Team()), goals_1, goals_2)
        _add(scores.setdefault(team_2, Team()), goals_2, goals_1)
    return scores


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed tuple and a list holding the same elements."""
    fixed = (10, 20, 30, 40)
    return fixed, list(fixed)


def vec_loop(v: list[int]) -> list[int]:
    """Double every element in place and return the same list."""
    v[:] = [element * 2 for element in v]
    return v


def vec_map(v: list[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [element * 2 for element in v]