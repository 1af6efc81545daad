"""Worked answers for the smart pointer exercises: lists, copy-on-write and sharing."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

_PLANET_NAMES = frozenset(
    {"Mercury", "Venus", "Earth", "Mars", "Jupiter", "Saturn", "Uranus", "Neptune"}
)


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""

    def __repr__(self) -> str:
        return "Nil"


@dataclass(frozen=True)
class Cons:
    """A cons list cell: a value and the rest of the list."""

    value: int
    rest: Cons | Nil

    def __repr__(self) -> str:
        return f"Cons({self.value}, {self.rest!r})"


def create_empty_list() -> Nil:
    """Return the empty cons list."""
    return Nil()


def create_non_empty_list() -> Cons:
    """Return a cons list holding one value."""
    return Cons(1, Nil())


class CowList:
    """A sequence of integers that is borrowed until it must be changed.

    A borrowed list is never modified; the first call to ``to_mut`` copies it.
    """

    def __init__(self, data: Sequence[int], *, owned: bool = False) -> None:
        if owned and not isinstance(data, list):
            raise TypeError("owned data must be a list")
        self._data = data
        self._owned = owned

    @property
    def is_owned(self) -> bool:
        return self._owned

    @property
    def data(self) -> Sequence[int]:
        return self._data

    def to_mut(self) -> list[int]:
        """Return the owned list, copying borrowed data first."""
        if not self._owned:
            self._data = list(self._data)
            self._owned = True
        return self._data  # type: ignore[return-value]

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> int:
        return self._data[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __repr__(self) -> str:
        kind = "Owned" if self._owned else "Borrowed"
        return f"{kind}({list(self._data)!r})"


def abs_all(cow: CowList) -> CowList:
    """Make every value non-negative, copying borrowed data only when needed."""
    negatives = [(i, -value) for i, value in enumerate(cow) if value < 0]
    if negatives:
        data = cow.to_mut()
        for i, value in negatives:
            data[i] = value
    return cow


class Sun:
    """The sun shared by every planet."""

    def __repr__(self) -> str:
        return "Sun"


@dataclass(frozen=True)
class Planet:
    """A planet that shares ownership of the sun it revolves around."""

    name: str
    sun: Sun

    def __post_init__(self) -> None:
        if self.name not in _PLANET_NAMES:
            raise ValueError(f"unknown planet {self.name!r}")

    def __repr__(self) -> str:
        return f"{self.name}({self.sun!r})"

    def details(self) -> str:
        """Print and return a greeting from the planet."""
        line = f"Hi from {self!r}!"
        print(line)
        return line


def offset_sums(numbers: Sequence[int], workers: int = 8) -> list[int]:
    """Sum, in one thread per offset, the numbers whose value modulo ``workers`` is that offset."""
    if workers <= 0:
        raise ValueError("workers must be positive")
    shared = tuple(numbers)

    def sum_offset(offset: int) -> int:
        total = sum(n for n in shared if n % workers == offset)
        print(f"Sum of offset {offset} is {total}")
        return total

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(sum_offset, range(workers)))