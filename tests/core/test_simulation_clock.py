"""
test_simulation_clock.py
------------------------
Scene-level tests for the atomic per-frame step.

Covers:
1. Initial snapshot and reset
2. Zero/negative dt, dt clamping, determinism
3. Wall latch timing and the one-shot WallReachedEvent
4. Jump cycle driven by simulation time
5. Animation cadence independent of tick length
6. Debug toggle and viewport resize
"""

import pytest

from src.core.runtime.scene_config import SceneConfig
from src.core.runtime.simulation_clock import SimulationClock
from src.core.runtime.viewport import ViewportSize
from src.core.services.event_manager import WallReachedEvent, DebugToggledEvent
from src.entities.character.character_state import Pose, Facing, Intent


@pytest.fixture
def recorded(events):
    """Collect WallReachedEvent and DebugToggledEvent in dispatch order."""
    received = []
    events.subscribe(WallReachedEvent, received.append)
    events.subscribe(DebugToggledEvent, received.append)
    return received


# ===========================================================
# Initial State
# ===========================================================

class TestInitialState:

    def test_initial_snapshot(self, clock):
        snap = clock.snapshot()

        assert snap.character_position_x == 100
        assert snap.character_vertical_offset == 0
        assert snap.pose is Pose.IDLE
        assert snap.facing is Facing.RIGHT
        assert snap.frame_index == 1
        assert snap.pursuer_position_x == 1080
        assert snap.world_scroll_offset == 0
        assert snap.wall_x == pytest.approx(448)
        assert snap.debug_visible is False

    def test_reset_restores_initial_snapshot(self, clock, run_ticks, config, viewport, events):
        fresh = SimulationClock(config, viewport, events=events).snapshot()

        clock.dispatch(Intent.MOVE_LEFT)
        clock.dispatch(Intent.JUMP)
        clock.dispatch(Intent.TOGGLE_DEBUG)
        run_ticks(clock, 120)
        clock.reset()

        assert clock.snapshot() == fresh
        assert clock.elapsed_ms == 0
        assert clock.character.reached_wall is False
        assert clock.character.jump_ends_at is None


# ===========================================================
# Timing
# ===========================================================

class TestTiming:

    @pytest.mark.parametrize("dt", [0, -0.016, -5])
    def test_non_positive_dt_changes_nothing(self, clock, dt):
        before = clock.snapshot()
        clock.simulate(dt)

        assert clock.snapshot() == before
        assert clock.elapsed_ms == 0

    def test_large_dt_is_clamped(self, clock):
        clock.simulate(5.0)

        assert clock.elapsed_ms == pytest.approx(100)
        assert clock.character.position_x == pytest.approx(100 + 8 * 6)

    def test_same_inputs_same_result(self, config, viewport, events, run_ticks):
        def play():
            sim = SimulationClock(config, viewport, events=events)
            run_ticks(sim, 5)
            sim.dispatch(Intent.MOVE_RIGHT)
            sim.dispatch(Intent.JUMP)
            run_ticks(sim, 20)
            sim.dispatch(Intent.MOVE_STOP)
            sim.dispatch(Intent.CROUCH_START)
            run_ticks(sim, 40, dt=0.021)
            return sim.snapshot()

        assert play() == play()

    def test_world_keeps_scrolling_after_wall(self, clock, run_ticks):
        run_ticks(clock, 100)

        assert clock.character.reached_wall is True
        assert clock.world.offset == pytest.approx(-800)


# ===========================================================
# Wall Latch
# ===========================================================

class TestWallLatch:

    @pytest.fixture
    def narrow(self, events):
        # Wall at exactly 180 px: 10 ticks of travel from x=100
        config = SceneConfig(wall_ratio=0.5, character_size=100)
        return SimulationClock(config, ViewportSize(360, 720), events=events)

    def test_reaches_wall_on_tenth_tick(self, narrow, run_ticks):
        run_ticks(narrow, 9)
        assert narrow.character.position_x == pytest.approx(172)
        assert narrow.character.reached_wall is False

        run_ticks(narrow, 1)
        assert narrow.character.position_x == 180
        assert narrow.character.reached_wall is True

    def test_wall_event_fires_once(self, narrow, run_ticks, recorded):
        run_ticks(narrow, 60)

        walls = [e for e in recorded if isinstance(e, WallReachedEvent)]
        assert len(walls) == 1
        assert walls[0].wall_x == 180

    def test_latch_survives_nudges(self, narrow, run_ticks):
        run_ticks(narrow, 10)

        for _ in range(5):
            narrow.dispatch(Intent.MOVE_LEFT)
            run_ticks(narrow, 1)
            assert narrow.snapshot().character_position_x == 180

    def test_position_never_exceeds_wall(self, clock, run_ticks):
        for _ in range(80):
            clock.dispatch(Intent.MOVE_RIGHT)
            run_ticks(clock, 1)
            assert clock.snapshot().character_position_x <= clock.config.wall_x(clock.viewport)


# ===========================================================
# Intents
# ===========================================================

class TestIntents:

    def test_nudges(self, clock):
        clock.dispatch(Intent.MOVE_RIGHT)
        assert clock.character.position_x == 115
        assert clock.snapshot().pose is Pose.RUNNING

        clock.dispatch(Intent.MOVE_LEFT)
        assert clock.character.position_x == 100
        assert clock.snapshot().facing is Facing.LEFT

    def test_jump_cycle_on_simulation_time(self, clock, run_ticks):
        assert clock.dispatch(Intent.JUMP) is True
        run_ticks(clock, 29)
        snap = clock.snapshot()
        assert snap.pose is Pose.JUMPING
        assert snap.character_vertical_offset == 100

        run_ticks(clock, 2)
        snap = clock.snapshot()
        assert snap.pose is Pose.IDLE
        assert snap.character_vertical_offset == 0

        # ~517 ms: cooldown until 600 ms
        assert clock.dispatch(Intent.JUMP) is False
        run_ticks(clock, 6)
        assert clock.dispatch(Intent.JUMP) is True

    def test_crouch_offset(self, clock, run_ticks):
        clock.dispatch(Intent.CROUCH_START)
        run_ticks(clock, 1)
        assert clock.snapshot().character_vertical_offset == clock.config.crouch_height

        clock.dispatch(Intent.CROUCH_END)
        assert clock.snapshot().pose is Pose.IDLE

    def test_debug_toggle(self, clock, recorded):
        clock.dispatch(Intent.TOGGLE_DEBUG)
        assert clock.snapshot().debug_visible is True

        clock.dispatch(Intent.TOGGLE_DEBUG)
        assert clock.snapshot().debug_visible is False

        assert recorded == [DebugToggledEvent(visible=True), DebugToggledEvent(visible=False)]


# ===========================================================
# Animation
# ===========================================================

class TestAnimation:

    def test_cadence_is_independent_of_step_length(self, clock):
        clock.simulate(0.025)
        assert clock.character.frame_index == 1

        clock.simulate(0.025)
        assert clock.character.frame_index == 2

        clock.simulate(0.05)
        assert clock.character.frame_index == 3

    def test_pose_change_keeps_frame(self, clock):
        clock.simulate(0.05)
        clock.simulate(0.05)
        clock.dispatch(Intent.JUMP)
        assert clock.snapshot().frame_index == 3


# ===========================================================
# Resize
# ===========================================================

class TestResize:

    def test_resize_moves_bounds(self, clock):
        clock.resize(ViewportSize(640, 720))
        snap = clock.snapshot()

        assert snap.wall_x == pytest.approx(224)
        assert snap.pursuer_position_x == 440
        assert snap.viewport == ViewportSize(640, 720)

    def test_resize_after_latch_repins(self, clock, run_ticks):
        run_ticks(clock, 60)
        clock.resize(ViewportSize(640, 720))

        assert clock.character.position_x == pytest.approx(224)

    def test_resize_before_latch_caps_visible_position(self, clock, run_ticks):
        run_ticks(clock, 30)
        clock.resize(ViewportSize(640, 720))
        assert clock.snapshot().character_position_x == pytest.approx(224)

        run_ticks(clock, 1)
        assert clock.character.reached_wall is True

    def test_degenerate_viewport(self, config, events, run_ticks):
        sim = SimulationClock(config, ViewportSize(-10, -10), events=events)
        sim.dispatch(Intent.MOVE_LEFT)
        run_ticks(sim, 10)

        snap = sim.snapshot()
        assert snap.wall_x == 0
        assert snap.character_position_x == 0
        assert snap.pursuer_position_x == 0


# ===========================================================
# Narrow Viewports (screen edge nearer than the wall)
# ===========================================================

class TestNarrowViewport:

    @pytest.fixture
    def tight(self, config, events):
        # screen_max_x = 50 < wall_x = 87.5
        return SimulationClock(config, ViewportSize(250, 720), events=events)

    def test_start_position_clamped_to_screen(self, tight, config):
        assert tight.snapshot().character_position_x == config.screen_max_x(tight.viewport)

    def test_latch_pins_to_screen_edge(self, tight, config, run_ticks, recorded):
        max_x = config.screen_max_x(tight.viewport)

        for _ in range(20):
            run_ticks(tight, 1)
            assert 0 <= tight.snapshot().character_position_x <= max_x

        assert tight.character.reached_wall is True
        assert tight.character.position_x == max_x
        assert [e.wall_x for e in recorded if isinstance(e, WallReachedEvent)] == [max_x]

    def test_nudges_stay_on_screen(self, tight, config, run_ticks):
        max_x = config.screen_max_x(tight.viewport)
        for intent in (Intent.MOVE_RIGHT, Intent.MOVE_LEFT, Intent.MOVE_RIGHT):
            tight.dispatch(intent)
            run_ticks(tight, 1)
            assert tight.character.position_x <= max_x

    def test_shrinking_resize_clamps_to_screen(self, clock, config, run_ticks):
        run_ticks(clock, 25)
        assert clock.character.reached_wall is False

        clock.resize(ViewportSize(250, 720))

        assert clock.character.position_x == config.screen_max_x(clock.viewport)
        assert clock.snapshot().character_position_x == 50
