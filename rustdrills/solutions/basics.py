"""Worked answers for the first exercises: variables, functions, if and vectors."""

from __future__ import annotations

from collections.abc import Iterable

_BULK_THRESHOLD = 40
_PRICE = 2
_BULK_PRICE = 1


def calculate_price_of_apples(quantity: int) -> int:
    """Price an apple order: 2 each, or 1 each when more than 40 are bought."""
    unit = _BULK_PRICE if quantity > _BULK_THRESHOLD else _PRICE
    return quantity * unit


def bigger(a: int, b: int) -> int:
    """Return the larger of two numbers."""
    return b if a < b else a


def foo_if_fizz(fizzish: str) -> str:
    """Map "fizz" to "foo", "fuzz" to "bar" and anything else to "baz"."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def is_even(num: int) -> bool:
    """True when the number is divisible by two."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Take 10 off an even price and 3 off an odd one."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """Return the number multiplied by itself."""
    return num * num


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """Return a fixed array and a growable list holding the same elements."""
    array = (10, 20, 30, 40)
    vector = [10, 20, 30, 40]
    return array, vector


def vec_loop(values: list[int]) -> list[int]:
    """Double every element of the list in place and return the same list."""
    values[:] = [value * 2 for value in values]
    return values


def vec_map(values: Iterable[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [value * 2 for value in values]