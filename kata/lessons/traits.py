"""Trait lessons: appending "Bar", shared licensing info and combined capabilities."""

import functools
from dataclasses import dataclass


@functools.singledispatch
def append_bar(value):
    """Append "Bar" to a string, or add "Bar" as a new item to a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register(str)
def _append_bar_to_str(value: str) -> str:
    return value + "Bar"


@append_bar.register(list)
def _append_bar_to_list(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Anything that carries licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    """Software with a numeric version."""

    version_number: int = 0


@dataclass
class OtherSoftware(Licensed):
    """Software with a textual version."""

    version_number: str = ""


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Whether both carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()


class _SomeTrait:
    def some_function(self) -> bool:
        return True


class _OtherTrait:
    def other_function(self) -> bool:
        return True


class SomeStruct(_SomeTrait, _OtherTrait):
    """A value with both capabilities."""


class OtherStruct(_SomeTrait, _OtherTrait):
    """Another value with both capabilities."""


def some_func(item: _SomeTrait) -> bool:
    """Call both capabilities of the item and combine the results."""
    return item.some_function() and item.other_function()