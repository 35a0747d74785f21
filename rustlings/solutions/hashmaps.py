"""Solutions to the hash map exercises."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from rustlings.solutions.error_handling import parse_int

_U8_MAX = 255


def fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds of fruit and at least five fruits."""
    return {"banana": 2, "apple": 3, "mango": 1}


class Fruit(Enum):
    """The kinds of fruit that can go into the cake basket."""

    APPLE = auto()
    BANANA = auto()
    MANGO = auto()
    LYCHEE = auto()
    PINEAPPLE = auto()


def fill_fruit_basket(basket: dict[Fruit, int]) -> dict[Fruit, int]:
    """Add one of every kind of fruit that is missing, leaving the others alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)
    return basket


@dataclass
class Team:
    """A team's goal record."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0

    def record(self, scored: int, conceded: int) -> None:
        """Add the goals of one match, keeping each total within 0..=255."""
        goals_scored = self.goals_scored + scored
        goals_conceded = self.goals_conceded + conceded
        if goals_scored > _U8_MAX or goals_conceded > _U8_MAX:
            raise OverflowError("attempt to add with overflow")
        self.goals_scored = goals_scored
        self.goals_conceded = goals_conceded


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def build_scores_table(results: str) -> dict[str, Team]:
    """Build the table of goals per team from "team1,team2,goals1,goals2" lines."""
    scores: dict[str, Team] = {}
    for line in _lines(results):
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"expected 4 fields in result line {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score = parse_int(fields[2], bits=8, signed=False)
        team_2_score = parse_int(fields[3], bits=8, signed=False)
        scores.setdefault(team_1_name, Team(team_1_name)).record(team_1_score, team_2_score)
        scores.setdefault(team_2_name, Team(team_2_name)).record(team_2_score, team_1_score)
    return scores