"""Basic lessons: conditions, functions, lifetimes, vectors, generics and indexing."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


def bigger(a: int, b: int) -> int:
    """The larger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    """"foo" for "fizz", "bar" for "fuzz", "baz" otherwise."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def longest(x: str, y: str) -> str:
    """The text with more UTF-8 bytes; the second one on a tie."""
    return x if len(x.encode("utf-8")) > len(y.encode("utf-8")) else y


@dataclass(frozen=True)
class Book:
    """A book's author and title."""

    author: str
    title: str

    def __str__(self) -> str:
        return f"{self.title} by {self.author}"


def is_even(num: int) -> bool:
    """Whether the number is even."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Ten off an even price, three off an odd one."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """The number times itself."""
    return num * num


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed array and a list holding the same elements."""
    a = (10, 20, 30, 40)
    v = [10, 20, 30, 40]
    return a, v


def vec_loop(values: list[int]) -> list[int]:
    """Double every element, returning the list."""
    for i, value in enumerate(values):
        values[i] = value * 2
    return values


def vec_map(values: Sequence[int]) -> list[int]:
    """A new list with every element doubled."""
    return [value * 2 for value in values]


@dataclass
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T


def nice_slice(values: Sequence[T]) -> Sequence[T]:
    """Elements at positions 1 to 3."""
    if len(values) < 4:
        raise IndexError(f"range end index 4 out of range for length {len(values)}")
    return values[1:4]


def second_of(numbers: Sequence[T]) -> T:
    """The second element."""
    return numbers[1]