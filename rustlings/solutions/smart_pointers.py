"""Solutions to the smart pointer and generics exercises."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, Sequence, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """A cons cell: a value followed by the rest of the list."""

    value: int
    next: Union["Cons", Nil]


def create_empty_list() -> Nil:
    return Nil()


def create_non_empty_list() -> Cons:
    return Cons(1, Nil())


class Cow(Generic[T]):
    """A sequence that is copied the first time it must be changed."""

    def __init__(self, data: Sequence[T], owned: bool) -> None:
        self._data = data
        self._owned = owned

    @classmethod
    def borrowed(cls, data: Sequence[T]) -> Cow[T]:
        return cls(data, owned=False)

    @classmethod
    def owned(cls, data: Iterable[T]) -> Cow[T]:
        return cls(data if isinstance(data, list) else list(data), owned=True)

    @property
    def is_owned(self) -> bool:
        return self._owned

    @property
    def data(self) -> Sequence[T]:
        return self._data

    def to_mut(self) -> list[T]:
        """Return the owned list, copying borrowed data first."""
        if not self._owned:
            self._data = list(self._data)
            self._owned = True
        return self._data  # type: ignore[return-value]

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> T:
        return self._data[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)


def abs_all(cow: Cow[int]) -> Cow[int]:
    """Make every value non-negative, copying only if something changes."""
    for index, value in enumerate(list(cow)):
        if value < 0:
            cow.to_mut()[index] = -value
    return cow


def offset_sums(numbers: Iterable[int], workers: int = 8) -> list[int]:
    """Sum, in parallel threads, the values congruent to each offset modulo workers."""
    if workers <= 0:
        raise ValueError("workers must be positive")
    shared = tuple(numbers)

    def sum_offset(offset: int) -> int:
        return sum(n for n in shared if n % workers == offset)

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(sum_offset, range(workers)))


@dataclass
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T