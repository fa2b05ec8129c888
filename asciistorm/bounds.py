"""Axis-aligned rectangles on the character grid."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Bounds:
    """A rectangle given by its top-left corner and size."""

    x: int
    y: int
    width: int = 1
    height: int = 1

    @property
    def max_x(self) -> int:
        return self.x + self.width

    @property
    def max_y(self) -> int:
        return self.y + self.height

    def intersects(self, other: Bounds) -> bool:
        """Whether the two rectangles overlap; touching edges count."""
        if other.x > self.max_x:
            return False
        if other.max_x < self.x:
            return False
        if other.y > self.max_y:
            return False
        if other.max_y < self.y:
            return False
        return True