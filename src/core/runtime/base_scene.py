"""
base_scene.py
-------------
Abstract base class for scenes driven by the game loop.
Defines the interface and common lifecycle management.
"""

from abc import ABC, abstractmethod
from src.core.runtime.scene_state import SceneState


class BaseScene(ABC):
    """
    Base class for all scenes.

    Attributes:
        state: Current lifecycle state
    """

    def __init__(self):
        self.state = SceneState.INACTIVE

    # ===========================================================
    # Lifecycle Hooks (Override in subclasses)
    # ===========================================================

    def on_enter(self):
        """Called when scene becomes active."""
        self.state = SceneState.ACTIVE

    def on_pause(self):
        self.state = SceneState.PAUSED

    def on_resume(self):
        self.state = SceneState.ACTIVE

    def on_exit(self):
        """Called before the scene is torn down."""
        self.state = SceneState.INACTIVE

    @property
    def is_active(self) -> bool:
        return self.state is SceneState.ACTIVE

    # ===========================================================
    # Standard Methods (Must implement in subclasses)
    # ===========================================================

    @abstractmethod
    def update(self, dt: float):
        """Advance scene logic by dt seconds."""

    @abstractmethod
    def draw(self, surface):
        """Render the scene onto a pygame surface."""

    @abstractmethod
    def handle_event(self, event) -> bool:
        """Handle one pygame event. Return True if consumed."""
