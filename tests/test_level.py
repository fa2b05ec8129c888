from asciistorm.actor import Actor
from asciistorm.level import Level
from asciistorm.renderer import Renderer
from asciistorm.vector2 import Vector2


class RecordingActor(Actor):
    def __init__(self, image="x"):
        super().__init__(image)
        self.begin_calls = 0
        self.ticks = []
        self.draw_calls = 0

    def begin_play(self):
        super().begin_play()
        self.begin_calls += 1

    def tick(self, delta_time):
        self.ticks.append(delta_time)

    def draw(self):
        self.draw_calls += 1


def test_added_actor_waits_until_processed():
    level = Level()
    actor = RecordingActor()
    level.add_new_actor(actor)
    assert actor.owner is level
    assert level.actors == []
    level.process_add_and_destroy_actors()
    assert level.actors == [actor]
    assert level.add_requested_actors == []


def test_destroyed_actor_is_removed():
    level = Level()
    keep, drop = RecordingActor(), RecordingActor()
    level.add_new_actor(keep)
    level.add_new_actor(drop)
    level.process_add_and_destroy_actors()
    drop.destroy()
    level.process_add_and_destroy_actors()
    assert level.actors == [keep]


def test_begin_play_runs_once_per_actor():
    level = Level()
    actor = RecordingActor()
    level.add_new_actor(actor)
    level.process_add_and_destroy_actors()
    level.begin_play()
    level.begin_play()
    assert actor.begin_calls == 1
    assert actor.has_began_play


def test_tick_reaches_every_actor():
    level = Level()
    actors = [RecordingActor(), RecordingActor()]
    for actor in actors:
        level.add_new_actor(actor)
    level.process_add_and_destroy_actors()
    assert level.actors == actors
    level.tick(0.25)
    assert actors[0].ticks == [0.25]
    assert actors[1].ticks == [0.25]


def test_draw_skips_inactive_actors():
    level = Level()
    alive, dead = RecordingActor(), RecordingActor()
    level.add_new_actor(alive)
    level.add_new_actor(dead)
    level.process_add_and_destroy_actors()
    dead.destroy()
    level.draw()
    assert alive.draw_calls == 1
    assert dead.draw_calls == 0


def test_draw_submits_actor_images():
    renderer = Renderer(Vector2(8, 2))
    level = Level()
    level.add_new_actor(Actor("hi", Vector2(1, 1)))
    level.process_add_and_destroy_actors()
    level.draw()
    renderer.draw()
    assert renderer.frame.text_rows()[1] == " hi     "