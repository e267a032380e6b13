"""
display_manager.py
------------------
Window creation and resize propagation.

Responsibilities:
- Create the (resizable) pygame window
- Expose the current size as an explicit ViewportSize
- Turn VIDEORESIZE into a ViewportResizedEvent instead of letting
  gameplay code read window globals
"""

import pygame

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_settings import Display
from src.core.runtime.viewport import ViewportSize
from src.core.services.event_manager import ViewportResizedEvent


class DisplayManager:
    """Owns the pygame window surface."""

    def __init__(self, events, width=Display.WIDTH, height=Display.HEIGHT,
                 resizable=Display.RESIZABLE):
        DebugLogger.init_entry("DisplayManager")
        self.events = events
        self.resizable = resizable
        self.window = self._create_window(width, height)
        DebugLogger.init_sub(f"Window {width}x{height} ({'resizable' if resizable else 'fixed'})")

    def _create_window(self, width, height):
        flags = pygame.RESIZABLE if self.resizable else 0
        return pygame.display.set_mode((max(1, int(width)), max(1, int(height))), flags)

    @property
    def viewport(self) -> ViewportSize:
        return ViewportSize.from_surface(self.window)

    def get_surface(self):
        return self.window

    def handle_event(self, event) -> bool:
        """Consume VIDEORESIZE and announce the new viewport."""
        if event.type != pygame.VIDEORESIZE:
            return False

        self.window = self._create_window(event.w, event.h)
        self.events.dispatch(ViewportResizedEvent(width=event.w, height=event.h))
        DebugLogger.state(f"Window resized -> {event.w}x{event.h}", category="display")
        return True

    def render(self):
        pygame.display.flip()
