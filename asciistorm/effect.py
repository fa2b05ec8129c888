"""The short explosion animation played where an enemy is destroyed."""

from __future__ import annotations

from dataclasses import dataclass

from asciistorm.actor import Actor
from asciistorm.engine import Engine
from asciistorm.timer import Timer
from asciistorm.vector2 import Color, Vector2

EFFECT_IMAGE_LENGTH = 6


@dataclass(frozen=True)
class EffectFrame:
    """One frame of the animation: its text, how long it shows and its colour."""

    frame: str
    play_time: float = 0.05
    color: int = Color.RED


SEQUENCE: tuple[EffectFrame, ...] = (
    EffectFrame("  @  ", 0.08, Color.RED),
    EffectFrame(" @@  ", 0.08, Color.BLUE),
    EffectFrame(" @@@ ", 0.08, Color.GREEN),
    EffectFrame("@@@@ ", 0.08, Color.RED),
    EffectFrame("  +1 ", 0.5, Color.GREEN),
)


class EnemyDestroyEffect(Actor):
    """Plays the frame sequence once, then removes itself."""

    def __init__(self, position: Vector2) -> None:
        first = SEQUENCE[0]
        super().__init__(first.frame, position, Color.RED)
        # Keep the animation from running past the right edge of the screen.
        x = position.x
        if x + EFFECT_IMAGE_LENGTH > Engine.get().width:
            x -= EFFECT_IMAGE_LENGTH
        self.position = Vector2(x, position.y)
        self.sequence = SEQUENCE
        self.current_index = 0
        self.timer = Timer(first.play_time)
        self.color = first.color

    def tick(self, delta_time: float) -> None:
        super().tick(delta_time)
        self.timer.tick(delta_time)
        if not self.timer.is_time_out():
            return
        if self.current_index == len(self.sequence) - 1:
            self.destroy()
            return
        self.timer.reset()
        self.current_index += 1
        frame = self.sequence[self.current_index]
        self.timer.target_time = frame.play_time
        self.change_image(frame.frame)
        self.color = frame.color