"""Solutions to the error handling exercises."""

from __future__ import annotations

from dataclasses import dataclass

_DIGITS = frozenset("0123456789")


class ParseIntError(ValueError):
    """Text could not be read as an integer of the requested width."""


def parse_int(text: str, bits: int = 32, signed: bool = True) -> int:
    """Parse a decimal integer that must fit in a fixed-width integer type.

    An optional leading "+" is accepted, and a leading "-" for signed types.
    No surrounding whitespace is allowed.
    """
    if bits <= 0:
        raise ValueError("bits must be positive")
    if not text:
        raise ParseIntError("cannot parse integer from empty string")
    negative = False
    digits = text
    if text[0] == "+" or (signed and text[0] == "-"):
        negative = text[0] == "-"
        digits = text[1:]
        if not digits:
            raise ParseIntError("invalid digit found in string")
    if not set(digits) <= _DIGITS:
        raise ParseIntError("invalid digit found in string")
    value = -int(digits) if negative else int(digits)
    if signed:
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        low, high = 0, (1 << bits) - 1
    if value > high:
        raise ParseIntError("number too large to fit in target type")
    if value < low:
        raise ParseIntError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return the nametag text; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Cost in tokens of the typed quantity: 5 per item plus a fee of 1."""
    processing_fee = 1
    cost_per_item = 5
    quantity = parse_int(item_quantity)
    cost = quantity * cost_per_item + processing_fee
    if not -(1 << 31) <= cost < (1 << 31):
        raise OverflowError("attempt to compute the total cost with overflow")
    return cost


class CreationError(ValueError):
    """A PositiveNonzeroInteger could not be created."""

    message = "invalid value"

    def __init__(self) -> None:
        super().__init__(self.message)


class NegativeError(CreationError):
    message = "number is negative"


class ZeroError(CreationError):
    message = "number is zero"


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    @classmethod
    def new(cls, value: int) -> PositiveNonzeroInteger:
        """Create the integer; raise NegativeError or ZeroError when invalid."""
        if value < 0:
            raise NegativeError()
        if value == 0:
            raise ZeroError()
        return cls(value)


class ParsePosNonzeroError(ValueError):
    """Parsing a positive non-zero integer failed; `error` holds the cause."""

    def __init__(self, error: ParseIntError | CreationError) -> None:
        super().__init__(str(error))
        self.error = error


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text as a 64-bit integer and check that it is positive and non-zero."""
    try:
        value = parse_int(text, bits=64)
    except ParseIntError as exc:
        raise ParsePosNonzeroError(exc) from exc
    try:
        return PositiveNonzeroInteger.new(value)
    except CreationError as exc:
        raise ParsePosNonzeroError(exc) from exc