"""
game_loop.py
------------
Defines the GameLoop class that hosts the chase scene.

Responsibilities
----------------
- Initialize pygame, the window, audio and the shared event manager
- Load scene configuration and build the chase scene
- Maintain the main timing loop (event -> fixed-step update -> render)
"""

import time

import pygame

from src.core.runtime.game_settings import Display, Physics, Debug
from src.core.runtime.scene_config import load_scene_config
from src.core.runtime.scene_state import SceneState
from src.core.services.display_manager import DisplayManager
from src.core.services.event_manager import get_events
from src.core.debug.debug_logger import DebugLogger
from src.audio.sound_manager import SoundManager
from src.graphics.chase_renderer import ChaseRenderer
from src.scenes.chase_scene import ChaseScene


class GameLoop:
    """Runtime controller for the chase scene window."""

    def __init__(self, config=None):
        DebugLogger.section("Initializing GameLoop")

        pygame.init()
        pygame.display.set_caption(Display.CAPTION)
        DebugLogger.init_entry("Pygame")

        self.events = get_events()
        self.config = config or load_scene_config()

        self.display = DisplayManager(self.events)
        self.sound = SoundManager(self.events)
        self.renderer = ChaseRenderer(self.config, self.display.viewport)
        self.scene = ChaseScene(self.config, self.display.viewport, self.events,
                                renderer=self.renderer)

        self.clock = pygame.time.Clock()
        self.running = True
        self._last_perf_warn_time = 0.0
        DebugLogger.init_sub("Game clock initialized")

    # ===========================================================
    # Core Runtime Loop
    # ===========================================================

    def run(self):
        """Main loop that runs until the window is closed."""
        DebugLogger.section("Game Loop")

        fixed_dt = Physics.FIXED_DT
        accumulator = 0.0
        self.scene.on_enter()

        while self.running:
            # Frame timing (with safety clamp)
            frame_time = self.clock.tick(Display.FPS) / 1000.0
            frame_time = min(frame_time, Physics.MAX_FRAME_TIME)
            accumulator += frame_time

            self._handle_events()

            while accumulator >= fixed_dt:
                self.scene.update(fixed_dt)
                accumulator -= fixed_dt

            self._draw()

        self.scene.on_exit()
        self.sound.stop_bgm()
        self.events.clear_all()
        pygame.quit()
        DebugLogger.system("Pygame terminated")

    # ===========================================================
    # Event Handling
    # ===========================================================

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                DebugLogger.action("Quit signal received")
                break

            if event.type == pygame.WINDOWFOCUSLOST and self.scene.is_active:
                self.scene.on_pause()
                continue
            if event.type == pygame.WINDOWFOCUSGAINED and self.scene.state is SceneState.PAUSED:
                self.scene.on_resume()
                continue

            if self.display.handle_event(event):
                continue

            self.scene.handle_event(event)

    # ===========================================================
    # Rendering
    # ===========================================================

    def _draw(self):
        start = time.perf_counter()

        self.scene.draw(self.display.get_surface())
        self.display.render()

        frame_time_ms = (time.perf_counter() - start) * 1000
        if frame_time_ms > Debug.FRAME_TIME_WARNING:
            now = time.perf_counter()
            if now - self._last_perf_warn_time > 1.0:
                self._last_perf_warn_time = now
                DebugLogger.warn(f"Slow frame: {frame_time_ms:.2f} ms", category="render")
