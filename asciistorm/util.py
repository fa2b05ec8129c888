"""Random numbers and clamping helpers shared by the engine and the game."""

from __future__ import annotations

import random
import time
from typing import Optional, TypeVar

T = TypeVar("T", int, float)

_rng = random.Random()


def set_random_seed(seed: Optional[int] = None) -> None:
    """Seed the shared generator; without a seed the current time is used."""
    _rng.seed(int(time.time()) if seed is None else seed)


def random_int(low: int, high: int) -> int:
    """A random integer between ``low`` and ``high``, both included."""
    return _rng.randint(low, high)


def random_range(low: float, high: float) -> float:
    """A random float between ``low`` and ``high``, both included."""
    return low + _rng.random() * (high - low)


def clamp(value: T, low: T, high: T) -> T:
    """Limit ``value`` to the range ``low`` to ``high``."""
    if value < low:
        return low
    if value > high:
        return high
    return value