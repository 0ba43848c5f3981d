"""Option lessons: ice cream left in the fridge."""

from __future__ import annotations


def maybe_icecream(time_of_day: int) -> int | None:
    """Ice creams left at the hour: 5 before 22, 0 until 24, None after."""
    if time_of_day < 22:
        return 5
    if time_of_day < 24:
        return 0
    return None


def get_number(num: int | None) -> int:
    """The contained number, or 0 for none."""
    return 0 if num is None else num