"""
character_state.py
------------------
Defines character-exclusive enumerations.

Responsibilities
----------------
- Pose: the discrete animation/behavior state of the character
- Facing: horizontal sprite orientation
- Intent: semantically named input actions consumed by the state machine
"""

from enum import Enum, IntEnum, auto


class Pose(IntEnum):
    """Character pose. Higher value wins when several flags are set."""

    IDLE = 0
    RUNNING = auto()
    CROUCHING = auto()
    JUMPING = auto()

    @property
    def key(self) -> str:
        """Lowercase name used by config tables and sprite folders."""
        return self.name.lower()


class Facing(Enum):
    LEFT = -1
    RIGHT = 1


class Intent(Enum):
    """Discrete input actions. Transient; never stored on the character."""

    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    MOVE_STOP = "move_stop"
    JUMP = "jump"
    CROUCH_START = "crouch_start"
    CROUCH_END = "crouch_end"
    TOGGLE_DEBUG = "toggle_debug"


MOVE_INTENTS = (Intent.MOVE_LEFT, Intent.MOVE_RIGHT)
