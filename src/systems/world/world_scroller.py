"""
world_scroller.py
-----------------
Background scroll accumulator.

The offset decreases by GAME_SPEED every tick, unconditionally, so the world
keeps moving after the character has stopped at the wall. Visual wrapping
is left to the renderer's tiling.
"""

from dataclasses import dataclass

from src.core.debug.debug_logger import DebugLogger


@dataclass
class WorldScrollState:
    offset: float = 0.0


class WorldScroller:
    """Advances WorldScrollState at a constant rate."""

    __slots__ = ("state", "speed")

    def __init__(self, state: WorldScrollState, speed: float):
        self.state = state
        self.speed = speed

    def update(self, ticks: float):
        if ticks <= 0:
            return
        self.state.offset -= self.speed * ticks
        DebugLogger.trace(f"Scroll offset {self.state.offset:.1f}", category="world")

    def reset(self):
        self.state.offset = 0.0
