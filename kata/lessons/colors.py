"""Fallible conversion of integer triples into RGB colours."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


class IntoColorError(ValueError):
    """The values do not make a colour."""


class BadLength(IntoColorError):
    """A slice did not hold exactly three values."""


class IntConversion(IntoColorError):
    """A component lies outside 0..=255."""


def _in_range(value: int) -> bool:
    return 0 <= value <= 255


def _exactly_three(values: Sequence[int], kind: str) -> None:
    if len(values) != 3:
        raise TypeError(f"a colour {kind} holds exactly three values, got {len(values)}")


@dataclass(frozen=True)
class Color:
    """An RGB colour with components in 0..=255."""

    red: int
    green: int
    blue: int

    @classmethod
    def _checked(cls, red: int, green: int, blue: int) -> Color:
        if not all(_in_range(v) for v in (red, green, blue)):
            raise IntConversion(f"component out of range in ({red}, {green}, {blue})")
        return cls(red=red, green=green, blue=blue)

    @classmethod
    def from_tuple(cls, rgb: tuple[int, int, int]) -> Color:
        """Build a colour from a three-tuple."""
        _exactly_three(rgb, "tuple")
        return cls._checked(*rgb)

    @classmethod
    def from_array(cls, values: Sequence[int]) -> Color:
        """Build a colour from a fixed three-element array."""
        _exactly_three(values, "array")
        return cls._checked(*values)

    @classmethod
    def from_slice(cls, values: Sequence[int]) -> Color:
        """Build a colour from a sequence of any length, checking it holds three."""
        if len(values) != 3:
            raise BadLength(f"expected 3 values, got {len(values)}")
        return cls._checked(*values)