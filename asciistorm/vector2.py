"""Integer screen coordinates and console text colours."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar


class Color(IntEnum):
    """Console text attribute values: blue, green, red and intensity bits."""

    BLACK = 0
    GRAY = 8
    DARK_GRAY = 8
    BLUE = 0x1
    GREEN = 0x2
    RED = 0x4
    INTENSITY = 0x8
    WHITE = BLUE | GREEN | RED
    YELLOW = RED | GREEN | INTENSITY


@dataclass(frozen=True)
class Vector2:
    """A point or offset on the character grid."""

    x: int = 0
    y: int = 0

    ZERO: ClassVar[Vector2]
    ONE: ClassVar[Vector2]
    UP: ClassVar[Vector2]
    RIGHT: ClassVar[Vector2]

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


Vector2.ZERO = Vector2(0, 0)
Vector2.ONE = Vector2(1, 1)
Vector2.UP = Vector2(0, 1)
Vector2.RIGHT = Vector2(1, 0)