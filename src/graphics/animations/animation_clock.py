"""
animation_clock.py
------------------
Fixed-cadence frame counter for the character sprite.

The clock runs on its own accumulator, independent of the simulation tick
length, and only ever writes frame_index. Pose changes do not reset the
index; they only change the bound it wraps against.
"""

from src.core.debug.debug_logger import DebugLogger


class AnimationClock:
    """Cycles a 1-based frame index every interval_ms."""

    __slots__ = ("interval_ms", "max_frames_for", "_accumulator_ms")

    def __init__(self, interval_ms, max_frames_for):
        """
        Args:
            interval_ms: Cadence in milliseconds (50 in this scene)
            max_frames_for: Callable pose -> frame count
        """
        self.interval_ms = max(1.0, float(interval_ms))
        self.max_frames_for = max_frames_for
        self._accumulator_ms = 0.0

    def advance(self, character, dt_ms) -> int:
        """
        Accumulate dt_ms and step the frame index once per elapsed interval.

        Returns:
            int: Number of frame steps taken
        """
        if dt_ms <= 0:
            return 0

        self._accumulator_ms += dt_ms
        steps = 0
        while self._accumulator_ms >= self.interval_ms:
            self._accumulator_ms -= self.interval_ms
            character.frame_index = next_frame(character.frame_index,
                                               self.max_frames_for(character.pose))
            steps += 1

        if steps:
            DebugLogger.trace(f"Frame {character.frame_index} ({character.pose.key})",
                              category="animation")
        return steps

    def reset(self):
        self._accumulator_ms = 0.0


def next_frame(frame_index: int, max_frames: int) -> int:
    """Advance a 1-based frame index, wrapping to 1 past max_frames."""
    following = frame_index + 1
    return 1 if following > max_frames else following
