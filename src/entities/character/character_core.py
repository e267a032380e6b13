"""
character_core.py
-----------------
Character state and the state machine that consumes intents.

Responsibilities
----------------
- Hold the authoritative character fields (position, pose flags, facing,
  frame index, jump lock, wall latch).
- Translate intents into pose and facing changes.
- Run the jump cycle as deadlines checked against simulation time, so a
  reset never leaves a pending callback behind.
"""

from dataclasses import dataclass
from typing import Optional

from src.core.debug.debug_logger import DebugLogger
from src.entities.character.character_state import Pose, Facing, Intent


# ===========================================================
# Character State
# ===========================================================

@dataclass
class CharacterState:
    """
    Mutable character fields owned by the simulation.

    Pose is derived from the flags: jumping beats crouching, crouching beats
    running, running beats idle.
    """
    position_x: float
    vertical_offset: float = 0.0
    facing: Facing = Facing.RIGHT
    frame_index: int = 1
    moving: bool = False
    crouching: bool = False
    jumping: bool = False
    jump_locked: bool = False
    reached_wall: bool = False
    jump_ends_at: Optional[float] = None
    lock_ends_at: Optional[float] = None

    @property
    def pose(self) -> Pose:
        if self.jumping:
            return Pose.JUMPING
        if self.crouching:
            return Pose.CROUCHING
        if self.moving:
            return Pose.RUNNING
        return Pose.IDLE


# ===========================================================
# State Machine
# ===========================================================

class CharacterStateMachine:
    """Applies intents and jump deadlines to a CharacterState."""

    def __init__(self, state: CharacterState, jump_duration_ms: float, jump_cooldown_ms: float):
        self.state = state
        self.jump_duration_ms = jump_duration_ms
        self.jump_cooldown_ms = jump_cooldown_ms
        self._last_pose = state.pose

    # ===========================================================
    # Intents
    # ===========================================================

    def apply(self, intent: Intent, now_ms: float) -> bool:
        """
        Apply one intent at simulation time now_ms.

        Returns:
            bool: False when the intent was refused (locked jump, crouch mid-jump)
        """
        self.update(now_ms)
        s = self.state

        if intent is Intent.MOVE_LEFT or intent is Intent.MOVE_RIGHT:
            s.facing = Facing.LEFT if intent is Intent.MOVE_LEFT else Facing.RIGHT
            s.moving = True
            accepted = True

        elif intent is Intent.MOVE_STOP:
            s.moving = False
            accepted = True

        elif intent is Intent.JUMP:
            accepted = self._start_jump(now_ms)

        elif intent is Intent.CROUCH_START:
            accepted = not s.jumping
            if accepted:
                s.crouching = True
            else:
                DebugLogger.trace("Crouch refused mid-jump", category="character")

        elif intent is Intent.CROUCH_END:
            s.crouching = False
            accepted = True

        elif intent is Intent.TOGGLE_DEBUG:
            # Debug visibility is scene state, not character state
            accepted = True

        else:
            raise ValueError(f"Unknown intent: {intent!r}")

        self._log_pose_change()
        return accepted

    def _start_jump(self, now_ms: float) -> bool:
        s = self.state
        if s.jump_locked:
            DebugLogger.trace("Jump ignored while locked", category="character")
            return False

        s.jumping = True
        s.jump_locked = True
        s.jump_ends_at = now_ms + self.jump_duration_ms
        s.lock_ends_at = s.jump_ends_at + self.jump_cooldown_ms
        return True

    # ===========================================================
    # Deadlines
    # ===========================================================

    def update(self, now_ms: float):
        """Expire the active jump phase and the cooldown once their deadlines pass."""
        s = self.state

        if s.jumping and s.jump_ends_at is not None and now_ms >= s.jump_ends_at:
            s.jumping = False
            s.jump_ends_at = None

        if s.jump_locked and s.lock_ends_at is not None and now_ms >= s.lock_ends_at:
            s.jump_locked = False
            s.lock_ends_at = None

        self._log_pose_change()

    def reset(self):
        """Drop pending jump deadlines and return to the standing pose."""
        s = self.state
        s.jumping = False
        s.jump_locked = False
        s.jump_ends_at = None
        s.lock_ends_at = None
        s.moving = False
        s.crouching = False
        self._last_pose = s.pose

    # ===========================================================
    # Internal Helpers
    # ===========================================================

    def _log_pose_change(self):
        pose = self.state.pose
        if pose is not self._last_pose:
            DebugLogger.state(f"Pose {self._last_pose.name} -> {pose.name}", category="character")
            self._last_pose = pose
