"""Double-buffered renderer that composes submitted text by sorting order."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, ClassVar, Optional

from asciistorm.screen import Cell, ScreenBuffer
from asciistorm.vector2 import Color, Vector2


@dataclass(frozen=True)
class RenderCommand:
    """Text to draw at a position with a colour and priority."""

    text: str
    position: Vector2
    color: int = Color.WHITE
    sorting_order: int = 0


class Frame:
    """The composed characters and their sorting orders for one frame."""

    def __init__(self, screen_size: Vector2) -> None:
        self.screen_size = screen_size
        count = screen_size.x * screen_size.y
        self.cells = [Cell()] * count
        self.sorting_orders = [-1] * count
        self.clear()

    def clear(self) -> None:
        """Blank every cell and reset priorities."""
        count = len(self.cells)
        self.cells = [Cell(" ", 0)] * count
        self.sorting_orders = [-1] * count

    def text_rows(self) -> list[str]:
        """The characters of each row as strings."""
        width = self.screen_size.x
        chars = [cell.char for cell in self.cells]
        return ["".join(chars[start:start + width]) for start in range(0, len(chars), width)]


Output = Callable[[str], None]


class Renderer:
    """Collects draw commands each frame and presents them."""

    _instance: ClassVar[Renderer | None] = None

    def __init__(self, screen_size: Vector2, output: Optional[Output] = None) -> None:
        self.screen_size = screen_size
        self.frame = Frame(screen_size)
        self._buffers = (ScreenBuffer(screen_size), ScreenBuffer(screen_size))
        for buffer in self._buffers:
            buffer.clear()
        self._current = 0
        self._output = output
        self._queue: list[RenderCommand] = []
        Renderer._instance = self
        self._present()

    @classmethod
    def get(cls) -> Renderer:
        """The most recently created renderer."""
        if cls._instance is None:
            raise RuntimeError("Renderer has not been created")
        return cls._instance

    @property
    def _current_buffer(self) -> ScreenBuffer:
        return self._buffers[self._current]

    def submit(
        self,
        text: str,
        position: Vector2,
        color: int = Color.WHITE,
        sorting_order: int = 0,
    ) -> None:
        """Queue text for this frame; positions off screen are dropped."""
        if not (0 <= position.x < self.screen_size.x and 0 <= position.y < self.screen_size.y):
            return
        self._queue.append(RenderCommand(text, position, color, sorting_order))

    def draw(self) -> None:
        """Compose queued commands into the frame and present it."""
        self._clear()
        width, height = self.screen_size.x, self.screen_size.y
        for command in self._queue:
            text = command.text
            y = command.position.y
            if not text or not 0 <= y < height:
                continue
            start_x = command.position.x
            end_x = start_x + len(text) - 1
            if end_x < 0 or start_x >= width:
                continue
            first = max(start_x, 0)
            last = min(end_x, width - 1)
            visible = text[first - start_x:last - start_x + 1]
            for x, char in enumerate(visible, first):
                index = y * width + x
                if self.frame.sorting_orders[index] > command.sorting_order:
                    continue
                self.frame.cells[index] = Cell(char, int(command.color))
                self.frame.sorting_orders[index] = command.sorting_order
        self._current_buffer.draw(self.frame.cells)
        self._present()
        self._queue.clear()

    def present_immediately(self) -> None:
        """Draw and present at once, also filling the other buffer."""
        self.draw()
        self._current_buffer.draw(self.frame.cells)
        self._present()

    def _clear(self) -> None:
        self.frame.clear()
        self._current_buffer.clear()

    def _present(self) -> None:
        if self._output is not None:
            self._output(self._current_buffer.render())
        self._current = 1 - self._current