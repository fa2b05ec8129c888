"""Collectable items that fall down the screen."""

from __future__ import annotations

from typing import ClassVar

from asciistorm.actor import Actor
from asciistorm.engine import Engine
from asciistorm.vector2 import Vector2


class Item(Actor):
    """A glyph falling at a fixed speed; collected by the player for coins."""

    MODEL_TYPES: ClassVar[tuple[str, ...]] = ("+", "-", "@", "&", "%")
    MODEL_COUNT: ClassVar[int] = len(MODEL_TYPES)

    def __init__(self, image: str, x: int, y: int, speed: float, color: int) -> None:
        super().__init__(image)
        self.move_speed = speed
        self.x_real = float(x)
        self.y_real = float(y)
        self.set_position(Vector2(x, y))
        self.color = color

    def tick(self, delta_time: float) -> None:
        self.y_real += self.move_speed * delta_time
        if self.y_real >= Engine.get().height:
            self.destroy()
        self.set_position(Vector2(int(self.x_real), int(self.y_real)))

    def take_damaged(self) -> None:
        """Remove the item once it has been picked up."""
        self.destroy()