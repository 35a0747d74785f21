"""Solutions to the iterator exercises."""

from __future__ import annotations

import math
from enum import Enum, auto
from typing import Iterable, Mapping

_U64_MAX = (1 << 64) - 1


def capitalize_first(text: str) -> str:
    """Upper-case the first character: "hello" -> "Hello"."""
    return text[:1].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalise each word: ["hello", "world"] -> ["Hello", "World"]."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalise each word and join them: ["hello", " ", "world"] -> "Hello World"."""
    return "".join(capitalize_first(word) for word in words)


class DivisionError(ArithmeticError):
    """A division could not give an exact integer result."""


class NotDivisibleError(DivisionError):
    """The dividend is not evenly divisible by the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotDivisibleError):
            return NotImplemented
        return (self.dividend, self.divisor) == (other.dividend, other.divisor)

    def __hash__(self) -> int:
        return hash((self.dividend, self.divisor))


class DivideByZeroError(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")


def divide(a: int, b: int) -> int:
    """Return a / b when a is evenly divisible by b."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


_NUMBERS = (27, 297, 38502, 81)


def result_with_list() -> list[int]:
    """Divide each number by 27; the first failure is raised."""
    return [divide(n, 27) for n in _NUMBERS]


def _try_divide(a: int, b: int) -> int | DivisionError:
    try:
        return divide(a, b)
    except DivisionError as exc:
        return exc


def list_of_results() -> list[int | DivisionError]:
    """Divide each number by 27, keeping each outcome: a quotient or the error."""
    return [_try_divide(n, 27) for n in _NUMBERS]


def factorial(num: int) -> int:
    """Return num! for a value that fits in an unsigned 64-bit integer."""
    if num < 0:
        raise ValueError("factorial is defined for non-negative numbers only")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError("attempt to multiply with overflow")
    return result


class Progress(Enum):
    """How far an exercise has come."""

    NONE = auto()
    SOME = auto()
    COMPLETE = auto()


def count_progress(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count the exercises in the map that have the given progress."""
    return sum(1 for progress in progress_map.values() if progress is value)


def count_collection_progress(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count the exercises with the given progress across several maps."""
    return sum(count_progress(progress_map, value) for progress_map in collection)