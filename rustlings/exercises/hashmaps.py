"""Hash map exercises: fruit baskets and a football scores table."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

_GOALS_MAX = 255


def default_basket() -> dict[str, int]:
    """A basket holding at least three kinds of fruit and five fruits in total."""
    return {"banana": 2, "apple": 2, "pear": 2}


class Fruit(Enum):
    APPLE = auto()
    BANANA = auto()
    MANGO = auto()
    LYCHEE = auto()
    PINEAPPLE = auto()


def fill_basket(basket: dict[Fruit, int]) -> None:
    """Add one of every fruit kind missing from the basket, leaving the others alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


@dataclass
class Team:
    goals_scored: int = 0
    goals_conceded: int = 0


def _goals(text: str) -> int:
    if not text.isdigit() or not text.isascii():
        raise ValueError(f"invalid goal count: {text!r}")
    value = int(text)
    if value > _GOALS_MAX:
        raise ValueError(f"goal count too large: {text!r}")
    return value


def _add(total: int, goals: int) -> int:
    result = total + goals
    if result > _GOALS_MAX:
        raise OverflowError("goal total does not fit in 0..=255")
    return result


def build_scores_table(results: str) -> dict[str, Team]:
    """Build goals scored and conceded per team from lines ``team1,team2,goals1,goals2``."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score, team_2_score = _goals(fields[2]), _goals(fields[3])

        team_1 = scores.setdefault(team_1_name, Team())
        team_1.goals_scored = _add(team_1.goals_scored, team_1_score)
        team_1.goals_conceded = _add(team_1.goals_conceded, team_2_score)

        team_2 = scores.setdefault(team_2_name, Team())
        team_2.goals_scored = _add(team_2.goals_scored, team_2_score)
        team_2.goals_conceded = _add(team_2.goals_conceded, team_1_score)
    return scores