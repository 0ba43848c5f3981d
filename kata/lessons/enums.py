"""Enum lessons: messages processed by a small state machine."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point:
    """A position on the board."""

    x: int
    y: int


@dataclass(frozen=True)
class Quit:
    """Ask the state to quit."""


@dataclass(frozen=True)
class Echo:
    """Some text to echo."""

    text: str


@dataclass(frozen=True)
class Move:
    """Move to a point."""

    point: Point


@dataclass(frozen=True)
class ChangeColor:
    """Change to an RGB colour."""

    red: int
    green: int
    blue: int


Message = Quit | Echo | Move | ChangeColor


@dataclass
class State:
    """Colour, position and whether to quit."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(red=r, green=g, blue=b):
                self.color = (r, g, b)
            case Move(point=point):
                self.position = point
            case Quit():
                self.quit = True
            case _:
                print("No")