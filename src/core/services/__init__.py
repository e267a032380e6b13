"""
Core services exports.

Provides the event system, configuration loading and input mapping.
"""

from src.core.services.config_manager import load_config
from src.core.services.event_manager import (
    get_events,
    reset_events,
    BaseEvent,
    BackgroundAudioEvent,
    WallReachedEvent,
    DebugToggledEvent,
    ViewportResizedEvent,
)
from src.core.services.input_manager import InputManager

__all__ = [
    # Config
    'load_config',
    # Events
    'get_events',
    'reset_events',
    'BaseEvent',
    'BackgroundAudioEvent',
    'WallReachedEvent',
    'DebugToggledEvent',
    'ViewportResizedEvent',
    # Services
    'InputManager',
]
