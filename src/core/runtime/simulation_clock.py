"""
simulation_clock.py
-------------------
Owns the chase scene state and advances it in one atomic step per frame.

Responsibilities
----------------
- Hold the character, pursuer and world-scroll state for the scene.
- Apply intents between ticks at the current simulation time.
- simulate(dt): expire jump deadlines, move the character (wall latch
  included), move the pursuer, scroll the world, then step the animation
  clock. Nothing else writes positions.
- Publish an immutable RenderSnapshot for the renderer.
"""

from dataclasses import dataclass

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_settings import Physics
from src.core.runtime.viewport import ViewportSize
from src.core.services.event_manager import get_events, WallReachedEvent, DebugToggledEvent
from src.entities.character.character_core import CharacterState, CharacterStateMachine
from src.entities.character.character_state import Pose, Facing, Intent, MOVE_INTENTS
from src.entities.character import character_movement as movement
from src.graphics.animations.animation_clock import AnimationClock
from src.systems.pursuer.pursuer_controller import PursuerState, PursuerController
from src.systems.world.world_scroller import WorldScrollState, WorldScroller


# ===========================================================
# Render Snapshot
# ===========================================================

@dataclass(frozen=True)
class RenderSnapshot:
    """Read-only view handed to the renderer once per paint."""
    character_position_x: float
    character_vertical_offset: float
    pose: Pose
    facing: Facing
    frame_index: int
    pursuer_position_x: float
    world_scroll_offset: float
    wall_x: float
    debug_visible: bool
    viewport: ViewportSize


# ===========================================================
# Simulation Clock
# ===========================================================

class SimulationClock:
    """Serializes every per-frame mutation of the chase scene."""

    def __init__(self, config, viewport: ViewportSize, events=None,
                 max_frame_time: float = Physics.MAX_FRAME_TIME):
        """
        Args:
            config: SceneConfig with the scene constants
            viewport: Initial host viewport
            events: EventManager (defaults to the shared singleton)
            max_frame_time: Upper bound for a single dt, in seconds
        """
        self.config = config
        self.viewport = viewport
        self.events = events or get_events()
        self.max_frame_time = max_frame_time

        self.character = CharacterState(position_x=config.start_x)
        self.pursuer = PursuerState()
        self.world = WorldScrollState()

        self.state_machine = CharacterStateMachine(
            self.character, config.jump_duration_ms, config.jump_cooldown_ms
        )
        self.animation = AnimationClock(config.animation_interval_ms, config.max_frames_for)
        self.pursuer_controller = PursuerController(self.pursuer, config)
        self.world_scroller = WorldScroller(self.world, config.game_speed)

        self.elapsed_ms = 0.0
        self.debug_visible = False

        self.reset()
        DebugLogger.init_entry("SimulationClock")
        DebugLogger.init_sub(f"Viewport {viewport.width:.0f}x{viewport.height:.0f}, "
                             f"wall at x={config.wall_x(viewport):.1f}")

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def reset(self):
        """Return every component to the scene-start state and drop pending deadlines."""
        c = self.character
        c.position_x = max(0.0, min(self.config.start_x, self.config.travel_max_x(self.viewport)))
        c.vertical_offset = 0.0
        c.facing = Facing.RIGHT
        c.frame_index = 1
        c.reached_wall = False

        self.state_machine.reset()
        self.animation.reset()
        self.world_scroller.reset()
        self.pursuer_controller.spawn(self.viewport)

        self.elapsed_ms = 0.0
        self.debug_visible = False
        DebugLogger.state("Simulation reset", category="scene")

    def resize(self, viewport: ViewportSize):
        """Adopt a new viewport; bounds are re-applied immediately."""
        self.viewport = viewport
        self.pursuer_controller.clamp(viewport)
        movement.clamp_to_screen(self.character, self.config, viewport)
        movement.clamp_to_wall(self.character, self.config, viewport)
        DebugLogger.state(f"Viewport resized to {viewport.width:.0f}x{viewport.height:.0f}",
                          category="display")

    # ===========================================================
    # Intents
    # ===========================================================

    def dispatch(self, intent: Intent) -> bool:
        """
        Apply one intent at the current simulation time.

        Returns:
            bool: False if the state machine refused it
        """
        if intent is Intent.TOGGLE_DEBUG:
            self.debug_visible = not self.debug_visible
            DebugLogger.action(f"Debug overlay: {'ON' if self.debug_visible else 'OFF'}",
                               category="scene")
            self.events.dispatch(DebugToggledEvent(visible=self.debug_visible))
            return True

        accepted = self.state_machine.apply(intent, self.elapsed_ms)
        if intent in MOVE_INTENTS:
            movement.apply_nudge(self.character, intent, self.config, self.viewport)
        return accepted

    # ===========================================================
    # Per-frame Step
    # ===========================================================

    def simulate(self, dt: float):
        """
        Advance the scene by dt seconds in one uninterrupted step.

        dt <= 0 changes nothing. dt above max_frame_time is clamped so a
        stalled host never replays a backlog.
        """
        if dt <= 0:
            return
        if dt > self.max_frame_time:
            DebugLogger.trace(f"Clamped frame time {dt:.3f}s", category="timing")
            dt = self.max_frame_time

        dt_ms = dt * 1000.0
        ticks = dt / self.config.reference_tick
        self.elapsed_ms += dt_ms

        self.state_machine.update(self.elapsed_ms)

        if movement.update_movement(self.character, self.config, self.viewport, ticks):
            self.events.dispatch(WallReachedEvent(
                wall_x=self.character.position_x, elapsed_ms=self.elapsed_ms
            ))

        character_x = movement.visible_position(self.character, self.config, self.viewport)
        self.pursuer_controller.update(character_x, self.viewport, ticks)
        self.world_scroller.update(ticks)

        self.animation.advance(self.character, dt_ms)

    # ===========================================================
    # Snapshot
    # ===========================================================

    def snapshot(self) -> RenderSnapshot:
        c = self.character
        return RenderSnapshot(
            character_position_x=movement.visible_position(c, self.config, self.viewport),
            character_vertical_offset=movement.vertical_offset_for(c.pose, self.config),
            pose=c.pose,
            facing=c.facing,
            frame_index=c.frame_index,
            pursuer_position_x=self.pursuer.position_x,
            world_scroll_offset=self.world.offset,
            wall_x=self.config.wall_x(self.viewport),
            debug_visible=self.debug_visible,
            viewport=self.viewport,
        )
