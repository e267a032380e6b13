"""
chase_scene.py
--------------
The single chase scene: wires input, simulation and presentation.

Responsibilities
----------------
- Own the SimulationClock and the InputManager for the scene's lifetime.
- Feed key events and held-key intents into the clock.
- Request background audio on enter; reset the clock on exit so no jump
  deadline survives the scene.
- Hand the renderer a fresh snapshot each paint.
"""

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.base_scene import BaseScene
from src.core.runtime.simulation_clock import SimulationClock
from src.core.services.event_manager import BackgroundAudioEvent, ViewportResizedEvent
from src.core.runtime.viewport import ViewportSize
from src.core.services.input_manager import InputManager


class ChaseScene(BaseScene):
    """Side-scrolling chase toward the invisible wall."""

    def __init__(self, config, viewport, events, renderer=None, input_manager=None):
        super().__init__()
        self.events = events
        self.renderer = renderer
        self.input_manager = input_manager or InputManager()
        self.clock = SimulationClock(config, viewport, events=events)
        DebugLogger.init_entry("ChaseScene")

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def on_enter(self):
        super().on_enter()
        self.events.subscribe(ViewportResizedEvent, self.on_viewport_resized)
        self.clock.reset()
        self.events.dispatch(BackgroundAudioEvent())
        DebugLogger.state("Chase scene entered", category="scene")

    def on_pause(self):
        # Key-up events are lost while unfocused
        for intent in self.input_manager.release_all():
            self.clock.dispatch(intent)
        super().on_pause()
        DebugLogger.state("Chase scene paused", category="scene")

    def on_resume(self):
        super().on_resume()
        DebugLogger.state("Chase scene resumed", category="scene")

    def on_exit(self):
        self.input_manager.release_all()
        self.clock.reset()
        self.events.unsubscribe(ViewportResizedEvent, self.on_viewport_resized)
        super().on_exit()
        DebugLogger.state("Chase scene exited", category="scene")

    def on_viewport_resized(self, event):
        self.clock.resize(ViewportSize(event.width, event.height))

    # ===========================================================
    # Frame
    # ===========================================================

    def handle_event(self, event) -> bool:
        intents = self.input_manager.handle_event(event)
        if not self.is_active:
            return bool(intents)

        for intent in intents:
            self.clock.dispatch(intent)
        return bool(intents)

    def update(self, dt: float):
        if not self.is_active:
            return
        for intent in self.input_manager.held_intents():
            self.clock.dispatch(intent)
        self.clock.simulate(dt)

    def draw(self, surface):
        if self.renderer is not None:
            self.renderer.draw(surface, self.clock.snapshot())

    def snapshot(self):
        return self.clock.snapshot()
