"""Spawns collectable items at a fixed interval."""

from __future__ import annotations

from asciistorm.actor import Actor
from asciistorm.engine import Engine
from asciistorm.item import Item
from asciistorm.timer import Timer
from asciistorm.util import random_int, random_range
from asciistorm.vector2 import Color

ITEM_TYPES: tuple[str, ...] = ("+", "-", "@", "&", "%")


class ItemSpawner(Actor):
    """An invisible actor that drops an item from the top of the screen."""

    def __init__(self) -> None:
        super().__init__()
        self.timer = Timer(random_range(5.0, 5.0))

    def tick(self, delta_time: float) -> None:
        super().tick(delta_time)
        self.spawn_item(delta_time)

    def spawn_item(self, delta_time: float) -> None:
        """Advance the timer and, when it runs out, add a random item."""
        self.timer.tick(delta_time)
        if not self.timer.is_time_out():
            return
        self.timer.reset()
        if self.owner is None:
            raise RuntimeError("spawner is not in a level")
        index = random_int(0, len(ITEM_TYPES) - 1)
        x = random_int(0, Engine.get().width - 1)
        speed = random_range(1.0, 5.5)
        self.owner.add_new_actor(Item(ITEM_TYPES[index], x, 0, speed, Color.YELLOW))