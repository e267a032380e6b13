"""
sprite_frames.py
----------------
Maps pose and frame index to sprite asset paths.

Exported sprites are numbered on odd frames only, so frame n of a pose is
stored as file number 2n-1, zero-padded to four digits.
"""

import os

from src.core.runtime.game_settings import Render
from src.entities.character.character_state import Pose


SPRITE_FOLDERS = {
    Pose.IDLE: ("idle", ""),
    Pose.RUNNING: ("run", "run"),
    Pose.JUMPING: ("jump", "jump"),
    Pose.CROUCHING: ("crouch", "crouch"),
}


def frame_number(frame_index: int) -> str:
    """1 -> '0001', 2 -> '0003', 11 -> '0021'."""
    return str(max(1, frame_index) * 2 - 1).zfill(4)


def sprite_path(pose: Pose, frame_index: int, root: str = Render.SPRITE_ROOT) -> str:
    folder, prefix = SPRITE_FOLDERS[pose]
    return os.path.join(root, folder, f"{prefix}{frame_number(frame_index)}.png")
