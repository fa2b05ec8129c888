"""Bullets fired by the player."""

from __future__ import annotations

import math

from asciistorm.actor import Actor
from asciistorm.vector2 import Color, Vector2

PI = 3.141592
FIELD_WIDTH = 200.0
FIELD_HEIGHT = 120.0


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


class PlayerBullet(Actor):
    """A bullet travelling in a straight line at an angle in degrees."""

    def __init__(self, position: Vector2, angle: float, speed: float) -> None:
        super().__init__("@", position, Color.BLUE)
        self.move_speed = speed
        self.x_position = float(position.x)
        self.y_position = float(position.y)
        radian = angle * (PI / 180.0)
        self.x_velocity = math.cos(radian) * speed
        self.y_velocity = math.sin(radian) * speed

    def tick(self, delta_time: float) -> None:
        super().tick(delta_time)
        self.x_position += self.x_velocity * delta_time
        self.y_position += self.y_velocity * delta_time
        if not (0.0 <= self.y_position < FIELD_HEIGHT and 0.0 <= self.x_position < FIELD_WIDTH):
            self.destroy()
            return
        self.set_position(
            Vector2(_round_half_up(self.x_position), _round_half_up(self.y_position))
        )