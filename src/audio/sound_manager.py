"""
sound_manager.py
----------------
Background music playback for the chase scene.

Listens for BackgroundAudioEvent. Audio is optional: a missing mixer,
device or file is logged once and the scene keeps running silently.
"""

import pygame

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_settings import Audio
from src.core.services.event_manager import BackgroundAudioEvent

class SoundManager:
    ASSET_PATHS = {
        "background": Audio.BACKGROUND_TRACK,
    }

    def __init__(self, events, asset_paths=None):
        self.asset_paths = dict(asset_paths or self.ASSET_PATHS)
        self.available = self._init_mixer()
        self.current_track = None

        events.subscribe(BackgroundAudioEvent, self.on_background_audio)
        DebugLogger.init_entry("SoundManager", "OK" if self.available else "FAIL")

    def _init_mixer(self) -> bool:
        try:
            pygame.mixer.init()
            return True
        except pygame.error as e:
            DebugLogger.warn(f"Audio unavailable: {e}", category="audio")
            return False

    # ===========================================================
    # Event Handlers
    # ===========================================================

    def on_background_audio(self, event):
        self.play_bgm(event.track, loops=Audio.BACKGROUND_LOOPS)

    # ===========================================================
    # Playback
    # ===========================================================

    def play_bgm(self, name, loops=-1) -> bool:
        """Start a looping track; returns False if it could not be played."""
        if not self.available:
            return False
        if self.current_track == name:
            return True

        route = self.asset_paths.get(name)
        if route is None:
            DebugLogger.warn(f"Unknown track '{name}'", category="audio")
            return False

        try:
            pygame.mixer.music.load(route)
            pygame.mixer.music.play(loops=loops)
        except (pygame.error, FileNotFoundError) as e:
            DebugLogger.warn(f"Audio playback failed for {route}: {e}", category="audio")
            return False

        self.current_track = name
        DebugLogger.action(f"Playing {name}", category="audio")
        return True

    def stop_bgm(self):
        if self.available and self.current_track is not None:
            pygame.mixer.music.stop()
        self.current_track = None
