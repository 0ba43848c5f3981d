"""Smart pointer lessons: cons lists, copy-on-write and shared data across threads."""

from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """A value followed by the rest of a cons list."""

    value: int
    rest: Cons | Nil


def create_empty_list() -> Nil:
    """An empty cons list."""
    return Nil()


def create_non_empty_list() -> Cons:
    """A cons list holding a single value."""
    return Cons(11, Nil())


@dataclass
class Cow:
    """Borrowed data that is copied the first time it is changed."""

    data: Sequence[int]
    owned: bool = False

    @classmethod
    def borrow(cls, data: Sequence[int]) -> Cow:
        return cls(data=data, owned=False)

    @classmethod
    def own(cls, data: Sequence[int]) -> Cow:
        return cls(data=list(data), owned=True)

    def to_mut(self) -> list[int]:
        """Return the data for changing, copying it first if it is borrowed."""
        if not self.owned:
            self.data = list(self.data)
            self.owned = True
        return self.data

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, index: int) -> int:
        return self.data[index]


def abs_all(cow: Cow) -> Cow:
    """Make every value non-negative, copying only if a change is needed."""
    for i, value in enumerate(cow.data):
        if value < 0:
            cow.to_mut()[i] = -value
    return cow


def offset_sums(numbers: Sequence[int], workers: int = 8) -> list[int]:
    """Sum the numbers by remainder modulo workers, one thread per remainder."""
    if workers <= 0:
        raise ValueError("workers must be positive")
    shared = tuple(numbers)

    def sum_offset(offset: int) -> int:
        total = sum(n for n in shared if n % workers == offset)
        print(f"Sum of offset {offset} is {total}")
        return total

    with ThreadPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(sum_offset, range(workers)))