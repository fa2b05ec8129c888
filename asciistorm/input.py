"""Keyboard and mouse state tracking with edge detection."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Iterable, Union

from asciistorm.vector2 import Vector2

KEY_COUNT = 255


class Key(IntEnum):
    """Virtual key codes used by the game. Letters and digits use their ASCII code."""

    LBUTTON = 0x01
    RBUTTON = 0x02
    RETURN = 0x0D
    ESCAPE = 0x1B
    SPACE = 0x20
    LEFT = 0x25
    UP = 0x26
    RIGHT = 0x27
    DOWN = 0x28


@dataclass(frozen=True)
class KeyEvent:
    """A key went down (``pressed``) or up."""

    key_code: int
    pressed: bool


@dataclass(frozen=True)
class MouseEvent:
    """Mouse position and button state."""

    x: int
    y: int
    left: bool = False
    right: bool = False


InputEvent = Union[KeyEvent, MouseEvent]


@dataclass
class _KeyState:
    is_down: bool = False
    was_down: bool = False


class Input:
    """Holds the current and previous state of every key."""

    _instance: ClassVar[Input | None] = None

    def __init__(self) -> None:
        self._states = [_KeyState() for _ in range(KEY_COUNT)]
        self._mouse_position = Vector2()
        Input._instance = self

    @classmethod
    def get(cls) -> Input:
        """The most recently created input manager."""
        if cls._instance is None:
            raise RuntimeError("Input has not been created")
        return cls._instance

    def _state(self, key_code: int) -> _KeyState:
        if not 0 <= key_code < KEY_COUNT:
            raise ValueError(f"key code out of range: {key_code}")
        return self._states[key_code]

    @staticmethod
    def _button_key(button_code: int) -> int:
        if button_code == 0:
            return Key.LBUTTON
        if button_code == 1:
            return Key.RBUTTON
        raise ValueError(f"mouse button must be 0 or 1, got {button_code}")

    def get_key_down(self, key_code: int) -> bool:
        """True only on the frame the key went down."""
        state = self._state(key_code)
        return state.is_down and not state.was_down

    def get_key_up(self, key_code: int) -> bool:
        """True only on the frame the key was released."""
        state = self._state(key_code)
        return not state.is_down and state.was_down

    def get_key(self, key_code: int) -> bool:
        """True while the key is held."""
        return self._state(key_code).is_down

    def get_mouse_button_down(self, button_code: int) -> bool:
        return self.get_key_down(self._button_key(button_code))

    def get_mouse_button_up(self, button_code: int) -> bool:
        return self.get_key_up(self._button_key(button_code))

    def get_mouse_button(self, button_code: int) -> bool:
        return self.get_key(self._button_key(button_code))

    @property
    def mouse_position(self) -> Vector2:
        return self._mouse_position

    def process_input(
        self, events: Iterable[InputEvent], screen_width: int, screen_height: int
    ) -> None:
        """Apply this frame's events to the key states."""
        for event in events:
            if isinstance(event, KeyEvent):
                self._state(event.key_code).is_down = event.pressed
            elif isinstance(event, MouseEvent):
                # Only the column is taken from the event; the row is kept and clamped.
                x = min(max(event.x, 0), screen_width - 1)
                y = min(max(self._mouse_position.y, 0), screen_height - 1)
                self._mouse_position = Vector2(x, y)
                self._states[Key.LBUTTON].is_down = event.left
                self._states[Key.RBUTTON].is_down = event.right

    def save_previous_input_states(self) -> None:
        """Remember the current states for next frame's edge detection."""
        for state in self._states:
            state.was_down = state.is_down