"""The engine: settings, the fixed-rate game loop and level switching."""

from __future__ import annotations

import re
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, ClassVar, Iterable, Optional, Union

from asciistorm.input import Input, InputEvent
from asciistorm.level import Level
from asciistorm.renderer import Output, Renderer
from asciistorm.util import set_random_seed
from asciistorm.vector2 import Vector2

SCREEN_WIDTH = 200
SCREEN_HEIGHT = 120
DEFAULT_FRAMERATE = 60.0

_FLOAT = r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?"
_INT = r"[-+]?\d+"
_FIELDS = {
    "framerate": (re.compile(rf"framerate\s*=\s*({_FLOAT})"), float),
    "width": (re.compile(rf"width\s*=\s*({_INT})"), int),
    "height": (re.compile(rf"height\s*=\s*({_INT})"), int),
}

EventSource = Callable[[], Iterable[InputEvent]]


@dataclass
class EngineSetting:
    """Values read from the engine setting file."""

    framerate: float = 0.0
    width: int = 0
    height: int = 0


def parse_setting(text: str) -> EngineSetting:
    """Read ``name = value`` lines; unknown or malformed lines are ignored."""
    setting = EngineSetting()
    for line in text.split("\n"):
        words = line.split()
        if not words or words[0] not in _FIELDS:
            continue
        pattern, kind = _FIELDS[words[0]]
        match = pattern.match(line)
        if match:
            setattr(setting, words[0], kind(match.group(1)))
    return setting


def load_setting(path: Union[str, Path]) -> EngineSetting:
    """Read a setting file; a missing file raises ``FileNotFoundError``."""
    return parse_setting(Path(path).read_text())


class Engine:
    """Runs the game loop over the current level."""

    _instance: ClassVar[Engine | None] = None

    def __init__(
        self,
        setting_path: Optional[Union[str, Path]] = None,
        output: Optional[Output] = None,
        events: Optional[EventSource] = None,
    ) -> None:
        Engine._instance = self
        self.is_quit = False
        self.input = Input()
        self.setting = load_setting(setting_path) if setting_path is not None else EngineSetting()
        # The screen size is fixed regardless of the setting file.
        self.setting.width = SCREEN_WIDTH
        self.setting.height = SCREEN_HEIGHT
        self.renderer = Renderer(Vector2(self.setting.width, self.setting.height), output)
        self._events = events
        self.main_level: Optional[Level] = None
        self.next_level: Optional[Level] = None
        set_random_seed()

    @classmethod
    def get(cls) -> Engine:
        """The most recently created engine."""
        if cls._instance is None:
            raise RuntimeError("Engine has not been created")
        return cls._instance

    @property
    def width(self) -> int:
        return self.setting.width

    @property
    def height(self) -> int:
        return self.setting.height

    def run(self) -> None:
        """Step at the configured frame rate until asked to quit."""
        if self.setting.framerate == 0.0:
            self.setting.framerate = DEFAULT_FRAMERATE
        one_frame = 1.0 / self.setting.framerate
        previous = time.perf_counter()
        while not self.is_quit:
            current = time.perf_counter()
            delta = current - previous
            if delta >= one_frame:
                self.step(delta)
                previous = current
            else:
                time.sleep(one_frame - delta)
        self.shutdown()

    def step(self, delta_time: float) -> None:
        """Process one frame: input, play events, drawing and level changes."""
        events = self._events() if self._events is not None else ()
        self.input.process_input(events, self.width, self.height)
        if self.main_level is not None:
            self.main_level.begin_play()
            self.main_level.tick(delta_time)
            self.main_level.draw()
            self.renderer.draw()
        self.input.save_previous_input_states()
        if self.main_level is not None:
            self.main_level.process_add_and_destroy_actors()
        if self.next_level is not None:
            self.main_level = self.next_level
            self.next_level = None

    def quit_engine(self) -> None:
        self.is_quit = True

    def set_new_level(self, new_level: Level) -> None:
        """Switch to ``new_level`` at the end of the current frame."""
        self.next_level = new_level

    def shutdown(self) -> None:
        print("Engine has been shutdown....")