"""Solutions to the trait exercises."""

from __future__ import annotations

import functools
from typing import Any


@functools.singledispatch
def append_bar(value: Any) -> Any:
    """Append "Bar" to a string, or the string "Bar" to a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Something that carries licensing information."""

    def licensing_info(self) -> str:
        return "some information"


class SomeSoftware(Licensed):
    """Licensed software using the default information."""


class OtherSoftware(Licensed):
    """Other licensed software using the default information."""


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Whether both pieces of software carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()


class SomeTrait:
    def some_function(self) -> bool:
        return True


class OtherTrait:
    def other_function(self) -> bool:
        return True


class SomeStruct(SomeTrait, OtherTrait):
    """Has both behaviours."""


class OtherStruct(SomeTrait, OtherTrait):
    """Also has both behaviours."""


def some_func(item: Any) -> bool:
    """Call both behaviours of an item that has them."""
    return item.some_function() and item.other_function()