"""Bullets fired by enemies."""

from __future__ import annotations

import math

from asciistorm.actor import Actor
from asciistorm.engine import Engine
from asciistorm.vector2 import Color, Vector2

PI = 3.14


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


class EnemyBullet(Actor):
    """A bullet travelling in a straight line at an angle in degrees."""

    def __init__(self, position: Vector2, angle: float, move_speed: float = 60.0) -> None:
        super().__init__("*", position, Color.RED)
        self.move_speed = move_speed
        self.x_position = float(position.x)
        self.y_position = float(position.y)
        radian = angle * (PI / 180.0)
        self.x_velocity = math.cos(radian) * move_speed
        self.y_velocity = math.sin(radian) * move_speed

    def tick(self, delta_time: float) -> None:
        super().tick(delta_time)
        self.y_position += self.y_velocity * delta_time
        self.x_position += self.x_velocity * delta_time
        engine = Engine.get()
        if not (0 <= self.y_position < engine.height and 0 <= self.x_position < engine.width):
            self.destroy()
            return
        self.set_position(
            Vector2(_round_half_up(self.x_position), _round_half_up(self.y_position))
        )