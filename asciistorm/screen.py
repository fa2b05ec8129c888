"""Character screen buffers and the terminal they are shown on."""

from __future__ import annotations

import time
from contextlib import ExitStack
from dataclasses import dataclass
from typing import Iterable

from blessed import Terminal

from asciistorm.input import Key, KeyEvent
from asciistorm.vector2 import Vector2

_RESET = "\x1b[0m"

_SEQUENCE_KEYS = {
    "KEY_LEFT": Key.LEFT,
    "KEY_RIGHT": Key.RIGHT,
    "KEY_UP": Key.UP,
    "KEY_DOWN": Key.DOWN,
    "KEY_ENTER": Key.RETURN,
    "KEY_ESCAPE": Key.ESCAPE,
}


@dataclass(frozen=True)
class Cell:
    """One character on screen with its colour attribute."""

    char: str = " "
    color: int = 0


def _sgr(color: int) -> str:
    ansi = (1 if color & 0x4 else 0) | (2 if color & 0x2 else 0) | (4 if color & 0x1 else 0)
    base = 90 if color & 0x8 else 30
    return f"\x1b[{base + ansi}m"


class ScreenBuffer:
    """A grid of cells the size of the screen."""

    def __init__(self, screen_size: Vector2) -> None:
        if screen_size.x <= 0 or screen_size.y <= 0:
            raise ValueError(f"invalid screen size {screen_size}")
        self.screen_size = screen_size
        self._cells = [Cell()] * (screen_size.x * screen_size.y)

    def clear(self) -> None:
        """Blank every character, keeping colours."""
        self._cells = [Cell(" ", cell.color) for cell in self._cells]

    def draw(self, cells: Iterable[Cell]) -> None:
        """Replace the buffer contents with a row-major list of cells."""
        cells = list(cells)
        if len(cells) != len(self._cells):
            raise ValueError(f"expected {len(self._cells)} cells, got {len(cells)}")
        self._cells = cells

    def render(self) -> str:
        """The buffer as lines of text with ANSI colour sequences."""
        width = self.screen_size.x
        lines = []
        for start in range(0, len(self._cells), width):
            parts = []
            current = None
            for cell in self._cells[start:start + width]:
                if cell.color != current:
                    parts.append(_sgr(cell.color))
                    current = cell.color
                parts.append(cell.char)
            parts.append(_RESET)
            lines.append("".join(parts))
        return "\n".join(lines)


def _key_code(key) -> int | None:
    if key.is_sequence:
        return _SEQUENCE_KEYS.get(key.name)
    ch = str(key)
    if ch in ("\r", "\n"):
        return Key.RETURN
    if ch == " ":
        return Key.SPACE
    if ch == "\x1b":
        return Key.ESCAPE
    if len(ch) == 1 and ch.isascii() and ch.isalnum():
        return ord(ch.upper())
    return None


class TerminalSession:
    """Full-screen terminal mode with non-blocking key reading."""

    HOLD_SECONDS = 0.35

    def __init__(self) -> None:
        self.terminal = Terminal()
        self._stack: ExitStack | None = None
        self._held: dict[int, float] = {}

    def __enter__(self) -> TerminalSession:
        stack = ExitStack()
        stack.enter_context(self.terminal.fullscreen())
        stack.enter_context(self.terminal.cbreak())
        stack.enter_context(self.terminal.hidden_cursor())
        self._stack = stack
        return self

    def __exit__(self, *args) -> None:
        if self._stack is not None:
            self._stack.close()
            self._stack = None
        self._held.clear()

    def read_events(self) -> list[KeyEvent]:
        """Key presses waiting now, and releases of keys no longer repeating."""
        now = time.monotonic()
        events = []
        while True:
            key = self.terminal.inkey(timeout=0)
            if not key:
                break
            code = _key_code(key)
            if code is None:
                continue
            if code not in self._held:
                events.append(KeyEvent(code, True))
            self._held[code] = now
        for code, seen in list(self._held.items()):
            if now - seen > self.HOLD_SECONDS:
                del self._held[code]
                events.append(KeyEvent(code, False))
        return events

    def show(self, text: str) -> None:
        """Write a rendered screen at the top-left corner."""
        stream = self.terminal.stream
        stream.write(self.terminal.home + text)
        stream.flush()