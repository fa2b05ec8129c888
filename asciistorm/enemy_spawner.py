"""Spawns enemies at random intervals."""

from __future__ import annotations

from asciistorm.actor import Actor
from asciistorm.enemy import AttackPattern, Enemy
from asciistorm.timer import Timer
from asciistorm.util import random_int, random_range

ENEMY_TYPES: tuple[str, ...] = (";:^:;", "zZwZz", "oO@Oo", "<-=->", ")qOp(")

ENEMY_PATTERNS: tuple[AttackPattern, ...] = (
    AttackPattern.SINGLE,
    AttackPattern.SINGLE,
    AttackPattern.RADIAL,
    AttackPattern.TRIPLE,
    AttackPattern.TRIPLE,
)


class EnemySpawner(Actor):
    """An invisible actor that adds an enemy to its level every few seconds."""

    def __init__(self) -> None:
        super().__init__()
        self.timer = Timer(random_range(2.0, 3.0))

    def tick(self, delta_time: float) -> None:
        super().tick(delta_time)
        self.spawn_enemy(delta_time)

    def spawn_enemy(self, delta_time: float) -> None:
        """Advance the timer and, when it runs out, add a random enemy."""
        self.timer.tick(delta_time)
        if not self.timer.is_time_out():
            return
        self.timer.reset()
        if self.owner is None:
            raise RuntimeError("spawner is not in a level")
        index = random_int(0, len(ENEMY_TYPES) - 1)
        y_position = random_int(1, 100)
        self.owner.add_new_actor(Enemy(ENEMY_TYPES[index], y_position, ENEMY_PATTERNS[index]))