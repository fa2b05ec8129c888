"""Spawns falling obstacles at random intervals."""

from __future__ import annotations

from asciistorm.actor import Actor
from asciistorm.engine import Engine
from asciistorm.obstacle import Obstacle
from asciistorm.timer import Timer
from asciistorm.util import random_int, random_range

OBSTACLE_TYPES: tuple[str, ...] = (";:^:;", "zZwZz", "oO@Oo", "<-=->", ")qOp(")
OBSTACLE_MARGIN = 6


class ObstacleSpawner(Actor):
    """An invisible actor that adds an obstacle to its level every few seconds."""

    def __init__(self) -> None:
        super().__init__()
        self.timer = Timer(random_range(2.0, 3.0))

    def tick(self, delta_time: float) -> None:
        super().tick(delta_time)
        self.spawn_obstacle(delta_time)

    def spawn_obstacle(self, delta_time: float) -> None:
        """Advance the timer and, when it runs out, add a random obstacle."""
        self.timer.tick(delta_time)
        if not self.timer.is_time_out():
            return
        self.timer.reset()
        if self.owner is None:
            raise RuntimeError("spawner is not in a level")
        index = random_int(0, len(OBSTACLE_TYPES) - 1)
        x_position = random_int(0, Engine.get().width - OBSTACLE_MARGIN)
        speed = random_range(0.5, 3.5)
        hp = random_int(1, 5)
        self.owner.add_new_actor(Obstacle(OBSTACLE_TYPES[index], x_position, speed, hp))