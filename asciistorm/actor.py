"""The base class for everything that lives in a level."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from asciistorm.engine import Engine
from asciistorm.renderer import Renderer
from asciistorm.vector2 import Color, Vector2

if TYPE_CHECKING:
    from asciistorm.level import Level


class Actor:
    """A one-row text image with a position, colour and drawing priority."""

    def __init__(
        self,
        image: str = "",
        position: Vector2 = Vector2.ZERO,
        color: int = Color.WHITE,
    ) -> None:
        self.image = image
        self.position = position
        self.color = color
        self.height = 0
        self.owner: Optional[Level] = None
        self.sorting_order = 0
        self.has_began_play = False
        self.destroy_requested = False
        self._active = True

    @property
    def width(self) -> int:
        return len(self.image)

    @property
    def is_active(self) -> bool:
        return self._active and not self.destroy_requested

    def begin_play(self) -> None:
        self.has_began_play = True

    def tick(self, delta_time: float) -> None:
        """Per-frame update; does nothing by default."""

    def draw(self) -> None:
        """Submit the image to the renderer."""
        Renderer.get().submit(self.image, self.position, self.color, self.sorting_order)

    def destroy(self) -> None:
        """Ask to be removed from the level at the end of the frame."""
        self.destroy_requested = True
        self.on_destroy()

    def on_destroy(self) -> None:
        """Called when destruction is requested; does nothing by default."""

    def quit_game(self) -> None:
        Engine.get().quit_engine()

    def test_intersect(self, other: Actor) -> bool:
        """Whether the two one-row images overlap."""
        x_min = self.position.x
        x_max = self.position.x + self.width - 1
        other_x_min = other.position.x
        other_x_max = other.position.x + other.width - 1
        if other_x_min > x_max:
            return False
        if other_x_max < x_min:
            return False
        return self.position.y == other.position.y

    def change_image(self, new_image: str) -> None:
        self.image = new_image

    def set_position(self, new_position: Vector2) -> None:
        if self.position == new_position:
            return
        self.position = new_position