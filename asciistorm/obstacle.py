"""Falling obstacles that home in on the player."""

from __future__ import annotations

from asciistorm.actor import Actor
from asciistorm.effect import EnemyDestroyEffect
from asciistorm.engine import Engine
from asciistorm.item import Item
from asciistorm.player import Player
from asciistorm.util import random_int, random_range
from asciistorm.vector2 import Color, Vector2

ITEM_FALL_SPEED = 5.0


class Obstacle(Actor):
    """Drops from the top of the screen and chases a nearby player below it."""

    def __init__(
        self,
        image: str = "(-O-)",
        x_position: int = 0,
        speed: float = 0.0,
        hp: int = 0,
    ) -> None:
        super().__init__(image)
        # The start column is always random; ``x_position`` is not used.
        max_x = max(Engine.get().width - self.width - 1, 0)
        start_x = random_int(0, max_x)

        self.move_speed = speed
        self.hp = hp
        self.detection = 20.0
        self.vertical_speed = 3.0
        self.tracking_speed = 2.0
        self.item_drop_chance = 1.03

        self.x_real = float(start_x)
        self.y_real = 0.0
        self.x_position = self.x_real
        self.y_position = self.y_real
        self.set_position(Vector2(start_x, 0))

    def tick(self, delta_time: float) -> None:
        self.y_real += self.move_speed * delta_time
        player = Player.current()
        if player is not None:
            player_position = player.position
            if player_position.x > self.x_position:
                self.x_position += self.tracking_speed * delta_time
            elif player_position.x < int(self.x_position):
                self.x_position -= self.tracking_speed * delta_time
            self.follow_player(delta_time, player_position)
        if self.position.y >= Engine.get().height:
            self.destroy()

    def take_damaged(self, damage: int = 1) -> None:
        """Lose ``damage`` hit points; at zero drop an item and explode."""
        self.hp -= damage
        if self.hp > 0:
            return
        self.try_spawn_item()
        if self.owner is not None:
            self.owner.add_new_actor(EnemyDestroyEffect(self.position))
        self.destroy()

    def follow_player(self, delta_time: float, player_position: Vector2) -> None:
        """Step towards a player below and within range, then clamp to the screen."""
        chase = player_position.y >= self.y_real
        if chase:
            diff_x = float(player_position.x) - self.x_real
            diff_y = float(player_position.y) - self.y_real
            if diff_x * diff_x + diff_y * diff_y > self.detection * self.detection:
                chase = False
            if chase:
                step = self.move_speed * delta_time
                if diff_x > 0.1:
                    self.x_real += step
                elif diff_x < -0.1:
                    self.x_real -= step
                if diff_y > 0.1:
                    self.y_real += step
                elif diff_y < -0.1:
                    self.y_real -= step

        screen_width = Engine.get().width
        if self.y_real < 0.0:
            self.y_real = 0.0
        if self.x_real < 0.0:
            self.x_real = 0.0
        elif self.x_real + self.width > screen_width:
            self.x_real = float(screen_width - self.width)

        self.x_position = self.x_real
        self.y_position = self.y_real
        self.set_position(Vector2(int(self.x_real), int(self.y_real)))

    def try_spawn_item(self) -> None:
        """Maybe drop a random item where the obstacle is."""
        if random_range(0.0, 1.0) > self.item_drop_chance:
            return
        if self.owner is None:
            return
        index = random_int(0, Item.MODEL_COUNT - 1)
        self.owner.add_new_actor(
            Item(
                Item.MODEL_TYPES[index],
                int(self.x_real),
                int(self.y_real),
                ITEM_FALL_SPEED,
                Color.GREEN,
            )
        )