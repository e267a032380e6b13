"""
test_chase_scene.py
-------------------
Tests for the chase scene lifecycle and its input wiring.
"""

from unittest.mock import MagicMock

import pygame
import pytest

from src.core.runtime.scene_state import SceneState
from src.core.runtime.viewport import ViewportSize
from src.core.services.event_manager import BackgroundAudioEvent, ViewportResizedEvent
from src.entities.character.character_state import Pose
from src.scenes.chase_scene import ChaseScene


TICK = 1 / 60


@pytest.fixture
def scene(config, viewport, events):
    return ChaseScene(config, viewport, events)


@pytest.fixture
def active_scene(scene):
    scene.on_enter()
    return scene


def key_down(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


# ===========================================================
# Lifecycle
# ===========================================================

class TestLifecycle:

    def test_enter_requests_background_audio_once(self, scene, events):
        received = []
        events.subscribe(BackgroundAudioEvent, received.append)

        scene.on_enter()

        assert scene.state is SceneState.ACTIVE
        assert received == [BackgroundAudioEvent()]

    def test_inactive_scene_does_not_simulate(self, scene):
        before = scene.snapshot()
        scene.update(TICK)
        scene.handle_event(key_down(pygame.K_RIGHT))

        assert scene.snapshot() == before

    def test_exit_resets_and_unsubscribes(self, active_scene, events):
        active_scene.handle_event(key_down(pygame.K_UP))
        for _ in range(20):
            active_scene.update(TICK)

        active_scene.on_exit()

        assert active_scene.state is SceneState.INACTIVE
        assert active_scene.snapshot().character_position_x == 100
        assert active_scene.clock.character.jump_ends_at is None
        assert events.subscriber_count(ViewportResizedEvent) == 0

    def test_pause_releases_keys_and_freezes(self, active_scene):
        active_scene.handle_event(key_down(pygame.K_RIGHT))
        assert active_scene.snapshot().pose is Pose.RUNNING

        active_scene.on_pause()
        before = active_scene.snapshot()
        active_scene.update(TICK)

        assert active_scene.state is SceneState.PAUSED
        assert before.pose is Pose.IDLE
        assert active_scene.snapshot() == before

    def test_resume_continues_simulation(self, active_scene):
        active_scene.on_pause()
        active_scene.on_resume()
        active_scene.update(TICK)

        assert active_scene.state is SceneState.ACTIVE
        assert active_scene.clock.character.position_x == pytest.approx(108)

    def test_reenter_listens_for_resize_again(self, active_scene, events):
        active_scene.on_exit()
        active_scene.on_enter()
        assert events.subscriber_count(ViewportResizedEvent) == 1


# ===========================================================
# Input & Frame
# ===========================================================

class TestFrame:

    def test_key_press_nudges_immediately(self, active_scene):
        assert active_scene.handle_event(key_down(pygame.K_RIGHT)) is True
        assert active_scene.snapshot().character_position_x == 115

    def test_held_key_repeats_from_next_frame(self, active_scene):
        active_scene.handle_event(key_down(pygame.K_RIGHT))

        active_scene.update(TICK)
        assert active_scene.clock.character.position_x == pytest.approx(123)

        active_scene.update(TICK)
        assert active_scene.clock.character.position_x == pytest.approx(146)

    def test_unbound_key_not_consumed(self, active_scene):
        assert active_scene.handle_event(key_down(pygame.K_q)) is False

    def test_debug_key_toggles_overlay(self, active_scene):
        active_scene.handle_event(key_down(pygame.K_d))
        assert active_scene.snapshot().debug_visible is True

    def test_resize_event_reaches_simulation(self, active_scene, events):
        events.dispatch(ViewportResizedEvent(width=640, height=720))

        snap = active_scene.snapshot()
        assert snap.viewport == ViewportSize(640, 720)
        assert snap.wall_x == pytest.approx(224)

    def test_draw_hands_snapshot_to_renderer(self, config, viewport, events):
        renderer = MagicMock()
        scene = ChaseScene(config, viewport, events, renderer=renderer)
        surface = object()

        scene.draw(surface)

        renderer.draw.assert_called_once_with(surface, scene.snapshot())
