"""Struct lessons: colours, orders and packages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


@dataclass
class ColorClassicStruct:
    """A colour with named components."""

    red: int
    green: int
    blue: int


class ColorTupleStruct(NamedTuple):
    """A colour addressed by position."""

    red: int
    green: int
    blue: int


class UnitLikeStruct:
    """A value without fields."""

    def __repr__(self) -> str:
        return "UnitLikeStruct"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, UnitLikeStruct)

    def __hash__(self) -> int:
        return hash(UnitLikeStruct)


@dataclass
class Order:
    """A customer order."""

    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int

    @classmethod
    def with_name(cls, name: str) -> Order:
        """An order for one item 123 made by e-mail in 2019."""
        return cls(
            name=name,
            year=2019,
            made_by_phone=False,
            made_by_mobile=False,
            made_by_email=True,
            item_number=123,
            count=1,
        )


def create_order_template() -> Order:
    """The template order used as a reference."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


@dataclass
class Package:
    """A package sent between two countries."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams <= 0:
            raise ValueError("Can not ship a weightless package.")

    def is_international(self) -> bool:
        return self.weight_in_grams == 1200 and self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        fees = self.weight_in_grams * cents_per_gram
        if not _I32_MIN <= fees <= _I32_MAX:
            raise OverflowError("attempt to multiply with overflow")
        return fees