"""An on-screen readout of the mouse cursor, shown on left click."""

from __future__ import annotations

from asciistorm.actor import Actor
from asciistorm.engine import Engine
from asciistorm.input import Input, Key
from asciistorm.player import Player
from asciistorm.vector2 import Vector2


class MouseTester(Actor):
    """Shows the cursor position at the bottom of the screen when clicked."""

    def __init__(self) -> None:
        engine = Engine.get()
        super().__init__(" ", Vector2(engine.width // 2, engine.height - 1))

    def tick(self, delta_time: float) -> None:
        super().tick(delta_time)
        keys = Input.get()
        if not keys.get_key_down(Key.LBUTTON):
            return
        if Player.current() is None:
            return
        if keys.get_mouse_button(0):
            mouse = keys.mouse_position
            self.change_image(f"cursor: ({mouse.x}, {mouse.y})")