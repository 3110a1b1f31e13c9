"""A rover moving on a grid under single-letter commands."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Orientation(Enum):
    """The compass direction a rover faces."""

    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"


_LEFT = {
    Orientation.NORTH: Orientation.WEST,
    Orientation.SOUTH: Orientation.EAST,
    Orientation.EAST: Orientation.NORTH,
    Orientation.WEST: Orientation.SOUTH,
}
_RIGHT = {facing: turned for turned, facing in _LEFT.items()}
_STEP = {
    Orientation.NORTH: (0, 1),
    Orientation.SOUTH: (0, -1),
    Orientation.EAST: (1, 0),
    Orientation.WEST: (-1, 0),
}


@dataclass
class Rover:
    """A rover at ``(x, y)`` facing ``orientation`` (an Orientation or its letter)."""

    x: int
    y: int
    orientation: Orientation

    def __post_init__(self) -> None:
        self.orientation = Orientation(self.orientation)

    def rotate_left(self) -> None:
        """Turn ninety degrees anticlockwise."""
        self.orientation = _LEFT[self.orientation]

    def rotate_right(self) -> None:
        """Turn ninety degrees clockwise."""
        self.orientation = _RIGHT[self.orientation]

    def move_forward(self) -> None:
        """Advance one cell in the direction faced."""
        dx, dy = _STEP[self.orientation]
        self.x += dx
        self.y += dy

    def process(self, message: str) -> None:
        """Follow a command string: ``L`` and ``R`` turn, any other letter moves."""
        for command in message:
            if command == "L":
                self.rotate_left()
            elif command == "R":
                self.rotate_right()
            else:
                self.move_forward()

    def position(self) -> tuple[int, int, Orientation]:
        """Return the coordinates and orientation."""
        return self.x, self.y, self.orientation

    def __str__(self) -> str:
        return f"{self.x} {self.y} {self.orientation.value}"