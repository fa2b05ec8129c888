"""A countdown timer driven by frame delta times."""

from __future__ import annotations


class Timer:
    """Accumulates elapsed time and reports when a target time is reached."""

    def __init__(self, target_time: float = 1.0) -> None:
        self.target_time = target_time
        self.elapsed_time = 0.0

    def tick(self, delta_time: float) -> None:
        """Advance the timer by ``delta_time`` seconds."""
        self.elapsed_time += delta_time

    def reset(self) -> None:
        """Set the elapsed time back to zero."""
        self.elapsed_time = 0.0

    def is_time_out(self) -> bool:
        """Whether at least the target time has elapsed."""
        return self.elapsed_time >= self.target_time