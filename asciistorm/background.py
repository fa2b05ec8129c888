"""Scrolling background stars."""

from __future__ import annotations

from asciistorm.actor import Actor
from asciistorm.engine import Engine
from asciistorm.vector2 import Vector2


class Background(Actor):
    """A glyph that scrolls down and wraps back to the top of the screen."""

    def __init__(self, x: int, y: int, speed: float, image: str, color: int) -> None:
        super().__init__(image)
        self.move_speed = speed
        self.set_position(Vector2(x, y))
        self.y_real = float(y)
        self.color = color

    def tick(self, delta_time: float) -> None:
        super().tick(delta_time)
        self.y_real += self.move_speed * delta_time
        if self.y_real >= Engine.get().height:
            self.y_real = 0.0
        self.position = Vector2(self.position.x, int(self.y_real))