"""
scene_state.py
--------------
Lifecycle states a scene moves through.
"""

from enum import Enum


class SceneState(Enum):
    INACTIVE = "inactive"       # Not entered yet, or exited
    ACTIVE = "active"           # Simulating and drawing
    PAUSED = "paused"           # Drawing only; simulation frozen
