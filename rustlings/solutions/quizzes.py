"""Solutions to the quizzes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, TypeVar, Union

G = TypeVar("G")


def calculate_price_of_apples(quantity: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    if quantity > 40:
        return quantity
    return quantity * 2


@dataclass(frozen=True)
class Uppercase:
    """Upper-case the text."""

    def apply(self, text: str) -> str:
        return text.upper()


@dataclass(frozen=True)
class Trim:
    """Remove whitespace from both ends of the text."""

    def apply(self, text: str) -> str:
        return text.strip()


@dataclass(frozen=True)
class Append:
    """Append "bar" to the text a number of times."""

    count: int

    def apply(self, text: str) -> str:
        if self.count < 0:
            raise ValueError("count must not be negative")
        return text + "bar" * self.count


Command = Union[Uppercase, Trim, Append]


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string and return the results in order."""
    return [command.apply(text) for text, command in items]


@dataclass
class ReportCard(Generic[G]):
    """A report card whose grade may be numeric or alphabetical."""

    grade: G
    student_name: str
    student_age: int

    def print(self) -> str:
        return f"{self.student_name} ({self.student_age}) - achieved a grade of {self.grade}"