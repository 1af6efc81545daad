"""Worked answers for the trait exercises: shared behaviour across types."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch

_BAR = "Bar"


@singledispatch
def append_bar(value: object) -> object:
    """Append "Bar" to a string, or add "Bar" as a new element of a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + _BAR


@append_bar.register
def _(value: list) -> list:
    return [*value, _BAR]


class Licensed:
    """Anything that carries licensing information."""

    def licensing_info(self) -> str:
        """Return the licensing information shared by every implementor."""
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    version_number: int


@dataclass
class OtherSoftware(Licensed):
    version_number: str


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """True when both pieces of software carry the same licensing information."""
    for item in (software, software_two):
        if not isinstance(item, Licensed):
            raise TypeError(f"{type(item).__name__} is not licensed")
    return software.licensing_info() == software_two.licensing_info()


class _SomeTrait:
    def some_function(self) -> bool:
        return True


class _OtherTrait:
    def other_function(self) -> bool:
        return True


class SomeStruct(_SomeTrait, _OtherTrait):
    """A type with both behaviours."""


class OtherStruct(_SomeTrait, _OtherTrait):
    """Another type with both behaviours."""


def some_func(item: object) -> bool:
    """Require both behaviours and combine their results."""
    if not isinstance(item, _SomeTrait) or not isinstance(item, _OtherTrait):
        raise TypeError(f"{type(item).__name__} lacks the required behaviour")
    return item.some_function() and item.other_function()