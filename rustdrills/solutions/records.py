"""Worked answers for the struct and enum exercises."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


def _format_grade(grade: object) -> str:
    if isinstance(grade, float):
        if math.isnan(grade):
            return "NaN"
        if grade.is_integer():
            return str(int(grade))
    return str(grade)


@dataclass
class ReportCard:
    """A report card whose grade may be numeric (2.1) or alphabetic ("A+")."""

    grade: float | str
    student_name: str
    student_age: int

    def __post_init__(self) -> None:
        if not 0 <= self.student_age <= 255:
            raise ValueError("student_age must be between 0 and 255")

    def print(self) -> str:
        """Return the one-line summary of the card."""
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {_format_grade(self.grade)}"
        )


@dataclass(frozen=True)
class Order:
    """An order; derive new ones from a template with dataclasses.replace."""

    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    """Return the template order placed by e-mail."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


@dataclass(frozen=True)
class Package:
    """A parcel between two countries; its weight must be positive."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams <= 0:
            raise ValueError("Can not ship a weightless package.")

    def is_international(self) -> bool:
        """True when sender and recipient countries differ."""
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        """Shipping fee in cents."""
        return cents_per_gram * self.weight_in_grams


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class ChangeColor:
    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class Echo:
    text: str


@dataclass(frozen=True)
class Move:
    point: Point


Message = ChangeColor | Quit | Echo | Move


@dataclass
class Machine:
    """State changed by processing messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(red, green, blue):
                self.color = (red, green, blue)
            case Quit():
                self.quit = True
            case Echo(text):
                print(text)
            case Move(point):
                self.position = point
            case _:
                raise TypeError(f"unknown message {message!r}")