"""The player's ship: inertial movement, weapons and power-ups."""

from __future__ import annotations

import math
from enum import Enum
from typing import ClassVar, Optional

from asciistorm.actor import Actor
from asciistorm.effect import EnemyDestroyEffect
from asciistorm.engine import Engine
from asciistorm.input import Input, Key
from asciistorm.player_bullet import PlayerBullet
from asciistorm.timer import Timer
from asciistorm.vector2 import Color, Vector2

DIAGONAL_FACTOR = 0.7071
Y_ASPECT_RATIO = 0.98
COIN_COST = 5
SPEED_BOOST_DURATION = 5.01
SPEED_BOOST_MULTIPLIER = 2.3


class WeaponMode(Enum):
    """Firing patterns, cycled in order."""

    NONE = -1
    SINGLE_SHOT = 0
    TRIPLE_BURST = 1
    SERIES_SHOT = 2


# burst count, fire interval, bullet speed, delay between shots of a burst
_WEAPON_SETTINGS = {
    WeaponMode.SINGLE_SHOT: (1, 1.0, 150.0, 0.0),
    WeaponMode.TRIPLE_BURST: (3, 0.8, 180.0, 0.15),
    WeaponMode.SERIES_SHOT: (7, 1.5, 220.0, 0.1),
}


def apply_friction(current_velocity: float, friction: float, delta_time: float) -> float:
    """Slow a velocity towards zero without overshooting it."""
    amount = friction * delta_time
    if current_velocity > 0.0:
        return max(current_velocity - amount, 0.0)
    if current_velocity < 0.0:
        return min(current_velocity + amount, 0.0)
    return 0.0


def fire_angle(up: bool, down: bool, left: bool, right: bool) -> float:
    """Firing direction in degrees for the held arrow keys; 270 points up."""
    if up and right:
        return 315.0
    if up and left:
        return 225.0
    if down and right:
        return 45.0
    if down and left:
        return 135.0
    if up:
        return 270.0
    if down:
        return 90.0
    if left:
        return 180.0
    if right:
        return 0.0
    return 270.0


def _round(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class Player(Actor):
    """The ship steered with the arrow keys."""

    _instance: ClassVar[Optional[Player]] = None

    def __init__(self) -> None:
        super().__init__("<=A=>", Vector2.ZERO, Color.YELLOW)
        Player._instance = self
        self.facing_x = 0.0
        self.facing_y = -1.0

        self.timer = Timer()
        self.x_velocity = 0.0
        self.y_velocity = 0.0
        self.acceleration = 80.0
        self.friction = 40.0
        self.max_speed = 100.0

        self.is_speed_buff_active = False
        self.original_max_speed = 0.0
        self.original_acceleration = 0.0
        self.speed_buff_timer = Timer()

        self.current_mode = WeaponMode.NONE
        self.burst_count_total = 1
        self.fire_interval = 1.5
        self.bullet_speed = 0.0
        self.burst_delay = 0.08
        self.is_bursting = False
        self.burst_count_current = 0
        self.main_timer = Timer()
        self.burst_timer = Timer()

        engine = Engine.get()
        self.x_real = float(engine.width // 2 - self.width // 2)
        self.y_real = float(engine.height // 2 - self.height // 2)
        self.set_position(Vector2(int(self.x_real), int(self.y_real)))

        self.set_weapon_mode(WeaponMode.SINGLE_SHOT)
        self.sorting_order = 150

    @classmethod
    def get(cls) -> Player:
        """The current player; raises if there is none."""
        if cls._instance is None:
            raise RuntimeError("Player has not been created")
        return cls._instance

    @classmethod
    def current(cls) -> Optional[Player]:
        """The current player, or None."""
        return cls._instance

    def on_destroy(self) -> None:
        if Player._instance is self:
            Player._instance = None

    def activate_speed_boost(self, duration: float, boost_multiplier: float) -> None:
        """Multiply speed and acceleration for ``duration`` seconds."""
        if not self.is_speed_buff_active:
            self.is_speed_buff_active = True
            self.original_max_speed = self.max_speed
            self.original_acceleration = self.acceleration
            self.max_speed *= boost_multiplier
            self.acceleration *= boost_multiplier
        self.speed_buff_timer.target_time = duration
        self.speed_buff_timer.reset()

    def update_weapon_by_score(self, score: int) -> None:
        """Pick the weapon earned by the score: 20 and up, 10 and up, or the default."""
        if score >= 20:
            mode = WeaponMode.SERIES_SHOT
        elif score >= 10:
            mode = WeaponMode.TRIPLE_BURST
        else:
            mode = WeaponMode.SINGLE_SHOT
        if self.current_mode is not mode:
            self.set_weapon_mode(mode)

    def on_damaged(self) -> None:
        """Remove the ship and leave an explosion in its place."""
        self.destroy()
        if self.owner is not None:
            self.owner.add_new_actor(EnemyDestroyEffect(self.position))

    def tick(self, delta_time: float) -> None:
        super().tick(delta_time)
        keys = Input.get()

        if keys.get_key_down(Key.ESCAPE):
            from asciistorm.levels import TitleLevel

            Engine.get().set_new_level(TitleLevel())

        self.timer.tick(delta_time)

        current_accel = self.acceleration
        is_input_x = keys.get_key(Key.LEFT) or keys.get_key(Key.RIGHT)
        is_input_y = keys.get_key(Key.UP) or keys.get_key(Key.DOWN)
        if is_input_x and is_input_y:
            self.acceleration *= DIAGONAL_FACTOR

        if keys.get_key_down(Key.SPACE):
            self.change_weapon()

        if keys.get_key(Key.LEFT):
            self.move_left(delta_time)
        if keys.get_key(Key.RIGHT):
            self.move_right(delta_time)
        if keys.get_key(Key.UP):
            self.move_up(delta_time)
        if keys.get_key(Key.DOWN):
            self.move_down(delta_time)

        self.acceleration = current_accel

        if self.is_speed_buff_active:
            self.speed_buff_timer.tick(delta_time)
            if self.speed_buff_timer.is_time_out():
                self.max_speed = self.original_max_speed
                self.acceleration = self.original_acceleration
                self.is_speed_buff_active = False

        if keys.get_key_down(ord("1")) or keys.get_key_down(ord("2")):
            from asciistorm.levels import GameLevel

            level = GameLevel.get()
            if keys.get_key_down(ord("1")) and level.coin >= COIN_COST:
                level.coin -= COIN_COST
                level.kill_all_enemies()
            if keys.get_key_down(ord("2")) and level.coin >= COIN_COST:
                level.coin -= COIN_COST
                Player.get().activate_speed_boost(SPEED_BOOST_DURATION, SPEED_BOOST_MULTIPLIER)

        if not is_input_x:
            self.x_velocity = apply_friction(self.x_velocity, self.friction, delta_time)
        if not is_input_y:
            self.y_velocity = apply_friction(self.y_velocity, self.friction, delta_time)

        speed_sq = self.x_velocity ** 2 + self.y_velocity ** 2
        if speed_sq > self.max_speed ** 2:
            scale = self.max_speed / math.sqrt(speed_sq)
            self.x_velocity *= scale
            self.y_velocity *= scale

        self.x_real += self.x_velocity * delta_time
        self.y_real += self.y_velocity * Y_ASPECT_RATIO * delta_time

        self.apply_boundaries()
        self.set_position(Vector2(_round(self.x_real), _round(self.y_real)))

        self.process_firing(delta_time)

    def _face_up(self) -> None:
        self.facing_x = 0.0
        self.facing_y = -1.0

    def move_right(self, delta_time: float) -> None:
        self._face_up()
        self.x_velocity += self.acceleration * delta_time

    def move_left(self, delta_time: float) -> None:
        self._face_up()
        self.x_velocity -= self.acceleration * delta_time

    def move_up(self, delta_time: float) -> None:
        self._face_up()
        self.y_velocity -= self.acceleration * delta_time

    def move_down(self, delta_time: float) -> None:
        self._face_up()
        self.y_velocity += self.acceleration * delta_time

    def set_weapon_mode(self, mode: WeaponMode) -> None:
        """Switch weapon, restarting both firing timers and any burst."""
        if mode not in _WEAPON_SETTINGS:
            raise ValueError(f"no weapon settings for {mode}")
        self.current_mode = mode
        (
            self.burst_count_total,
            self.fire_interval,
            self.bullet_speed,
            self.burst_delay,
        ) = _WEAPON_SETTINGS[mode]
        self.main_timer.target_time = self.fire_interval
        self.main_timer.reset()
        self.burst_timer.target_time = self.burst_delay
        self.burst_timer.reset()
        self.is_bursting = False

    def process_firing(self, delta_time: float) -> None:
        """Start a burst when the weapon has reloaded, and fire its shots."""
        if not self.is_bursting:
            self.main_timer.tick(delta_time)
            if self.main_timer.is_time_out():
                self.main_timer.reset()
                self.is_bursting = True
                self.burst_count_current = 0
                self.burst_timer.reset()
            return

        self.burst_timer.tick(delta_time)
        if self.burst_count_current != 0 and not self.burst_timer.is_time_out():
            return
        self.burst_timer.reset()

        if self.owner is None:
            raise RuntimeError("player is not in a level")
        keys = Input.get()
        angle = fire_angle(
            keys.get_key(Key.UP),
            keys.get_key(Key.DOWN),
            keys.get_key(Key.LEFT),
            keys.get_key(Key.RIGHT),
        )
        spawn = Vector2(self.position.x + self.width // 2, self.position.y)
        self.owner.add_new_actor(PlayerBullet(spawn, angle, self.bullet_speed))

        self.burst_count_current += 1
        if self.burst_count_current >= self.burst_count_total:
            self.is_bursting = False

    def change_weapon(self) -> None:
        """Cycle to the next weapon mode."""
        self.set_weapon_mode(WeaponMode((self.current_mode.value + 1) % 3))

    def can_shoot(self) -> bool:
        return self.timer.is_time_out()

    def apply_boundaries(self) -> None:
        """Keep the ship on screen, stopping it against the edges."""
        engine = Engine.get()
        if self.x_real < 0.0:
            self.x_real = 0.0
            self.x_velocity = 0.0
        elif self.x_real + self.width > engine.width:
            self.x_real = float(engine.width - self.width)
            self.x_velocity = 0.0

        if self.y_real < 0.0:
            self.y_real = 0.0
            self.y_velocity = 0.0
        elif self.y_real + self.height >= engine.height - 1.0:
            self.y_real = float(engine.height - self.height) - 1.0
            self.y_velocity = 0.0