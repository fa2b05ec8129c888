"""Enemy ships that cross the screen and fire at the player."""

from __future__ import annotations

import math
from enum import Enum

from asciistorm.actor import Actor
from asciistorm.effect import EnemyDestroyEffect
from asciistorm.engine import Engine
from asciistorm.enemy_bullet import EnemyBullet
from asciistorm.player import Player
from asciistorm.timer import Timer
from asciistorm.util import random_int, random_range
from asciistorm.vector2 import Vector2

TRIPLE_SPREAD = (-20.0, 0.0, 20.0)
RADIAL_BULLET_COUNT = 8
_DEGREES_PER_RADIAN = 180.0 / 3.14


class AttackPattern(Enum):
    """How an enemy fires."""

    SINGLE = 0
    TRIPLE = 1
    RADIAL = 2


class MoveDirection(Enum):
    """Which way an enemy crosses the screen."""

    NONE = -1
    LEFT = 0
    RIGHT = 1


class Enemy(Actor):
    """Enters from one side, drifts across and shoots at intervals."""

    def __init__(
        self,
        image: str = "(oOo)",
        y_position: int = 5,
        pattern: AttackPattern = AttackPattern.SINGLE,
    ) -> None:
        super().__init__(image)
        self.attack_pattern = pattern
        self.move_speed = 5.0
        if random_int(1, 10) % 2 == 0:
            self.direction = MoveDirection.LEFT
            self.x_position = float(Engine.get().width - self.width - 1)
        else:
            self.direction = MoveDirection.RIGHT
            self.x_position = 0.0
        self.set_position(Vector2(int(self.x_position), y_position))
        self.timer = Timer(random_range(1.0, 3.0))

    def tick(self, delta_time: float) -> None:
        super().tick(delta_time)
        player = Player.current()
        if player is None:
            return

        dx = float(player.position.x - self.position.x)
        dy = float(player.position.y - self.position.y)
        target_angle = math.atan2(dy, dx) * _DEGREES_PER_RADIAN

        sign = -1.0 if self.direction is MoveDirection.LEFT else 1.0
        self.x_position += self.move_speed * sign * delta_time

        if self.x_position + self.width < 0:
            self.destroy()
            return
        if self.x_position > Engine.get().width - 1:
            self.destroy()
            return

        self.set_position(Vector2(int(self.x_position), self.position.y))

        self.timer.tick(delta_time)
        if not self.timer.is_time_out():
            return
        self.timer.reset()

        spawn = Vector2(self.position.x + self.width // 2, self.position.y)
        speed = random_range(40.0, 60.0)
        if self.owner is None:
            return

        if self.attack_pattern is AttackPattern.SINGLE:
            angles = [target_angle]
        elif self.attack_pattern is AttackPattern.TRIPLE:
            angles = [target_angle + offset for offset in TRIPLE_SPREAD]
        else:
            step = 360.0 / RADIAL_BULLET_COUNT
            angles = [i * step for i in range(RADIAL_BULLET_COUNT)]
        for angle in angles:
            self.owner.add_new_actor(EnemyBullet(spawn, angle, speed))

    def on_damaged(self) -> None:
        """Remove the enemy and leave an explosion in its place."""
        self.destroy()
        if self.owner is None:
            raise RuntimeError("enemy is not in a level")
        self.owner.add_new_actor(EnemyDestroyEffect(self.position))