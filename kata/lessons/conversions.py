"""Conversion lessons: byte and char counts, squaring in place, people from text."""

from __future__ import annotations

import functools
import math
import operator
import re
from dataclasses import dataclass
from enum import Enum

_U32_MAX = 2**32 - 1
_USIZE_MAX = 2**64 - 1
_DIGITS = re.compile(r"\+?[0-9]+")


def byte_counter(arg: str) -> int:
    """Number of UTF-8 bytes in the text."""
    return len(str(arg).encode("utf-8"))


def char_counter(arg: str) -> int:
    """Number of characters in the text."""
    return len(str(arg))


@dataclass
class Boxed:
    """A mutable holder of an unsigned 32-bit number."""

    value: int


def num_sq(boxed: Boxed) -> None:
    """Square the held number in place."""
    squared = boxed.value * boxed.value
    if squared > _U32_MAX:
        raise OverflowError("attempt to multiply with overflow")
    boxed.value = squared


def average(values: list[float]) -> float:
    """Arithmetic mean; NaN for no values."""
    if not values:
        return math.nan
    total = functools.reduce(operator.add, values, 0.0)
    return total / len(values)


def _parse_usize(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _DIGITS.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > _USIZE_MAX:
        raise ValueError("number too large to fit in target type")
    return value


class ParsePersonErrorKind(Enum):
    """Why a person could not be parsed."""

    EMPTY = "empty"
    BAD_LEN = "bad_len"
    NO_NAME = "no_name"
    PARSE_INT = "parse_int"


class ParsePersonError(ValueError):
    """A person description could not be parsed."""

    def __init__(self, kind: ParsePersonErrorKind, detail: str | None = None) -> None:
        super().__init__(detail or kind.value)
        self.kind = kind
        self.detail = detail


@dataclass
class Person:
    """A person with a name and an age."""

    name: str
    age: int

    @classmethod
    def default(cls) -> Person:
        return cls(name="John", age=30)

    @classmethod
    def from_string(cls, s: str) -> Person:
        """Parse "name,age", falling back to the default person on any problem."""
        try:
            return cls.parse(s)
        except ParsePersonError:
            return cls.default()

    @classmethod
    def parse(cls, s: str) -> Person:
        """Parse "name,age", raising ParsePersonError on any problem."""
        if not s:
            raise ParsePersonError(ParsePersonErrorKind.EMPTY)
        parts = s.split(",")
        if len(parts) != 2:
            raise ParsePersonError(ParsePersonErrorKind.BAD_LEN)
        name, age = parts
        if not name:
            raise ParsePersonError(ParsePersonErrorKind.NO_NAME)
        try:
            value = _parse_usize(age)
        except ValueError as exc:
            raise ParsePersonError(ParsePersonErrorKind.PARSE_INT, str(exc)) from exc
        return cls(name=name, age=value)