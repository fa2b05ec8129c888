"""A level owns every actor in play and relays frame events to them."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from asciistorm.actor import Actor


class Level:
    """Holds the actors of a scene; additions and removals apply between frames."""

    def __init__(self) -> None:
        self.actors: list[Actor] = []
        self.add_requested_actors: list[Actor] = []

    def begin_play(self) -> None:
        """Start every actor that has not been started yet."""
        for actor in self.actors:
            if not actor.has_began_play:
                actor.begin_play()

    def tick(self, delta_time: float) -> None:
        for actor in self.actors:
            actor.tick(delta_time)

    def draw(self) -> None:
        for actor in self.actors:
            if actor.is_active:
                actor.draw()

    def add_new_actor(self, new_actor: Actor) -> None:
        """Queue an actor to join the level at the end of the frame."""
        self.add_requested_actors.append(new_actor)
        new_actor.owner = self

    def process_add_and_destroy_actors(self) -> None:
        """Drop actors that asked to be destroyed, then add queued ones."""
        self.actors = [actor for actor in self.actors if not actor.destroy_requested]
        if not self.add_requested_actors:
            return
        self.actors.extend(self.add_requested_actors)
        self.add_requested_actors.clear()