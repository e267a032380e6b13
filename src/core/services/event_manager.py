"""
event_manager.py
----------------
Event-driven system for decoupled scene communication.
Lets the simulation announce fire-and-forget triggers (audio, wall latch,
debug toggle, resize) without depending on the presentation collaborators.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Type
from src.core.debug.debug_logger import DebugLogger


# ===========================================================
# Event Definitions
# ===========================================================

@dataclass(frozen=True)
class BaseEvent:
    """Base class for all events."""
    pass


@dataclass(frozen=True)
class BackgroundAudioEvent(BaseEvent):
    """Dispatched once at scene start to request the looping background track."""
    track: str = "background"


@dataclass(frozen=True)
class WallReachedEvent(BaseEvent):
    """Dispatched once when the character latches onto the invisible wall."""
    wall_x: float
    elapsed_ms: float


@dataclass(frozen=True)
class DebugToggledEvent(BaseEvent):
    """Dispatched when the debug overlay is switched on or off."""
    visible: bool


@dataclass(frozen=True)
class ViewportResizedEvent(BaseEvent):
    """Dispatched by the display when the host window changes size."""
    width: float
    height: float


# ===========================================================
# Event Manager
# ===========================================================

class EventManager:
    """Central event dispatcher using pub-sub pattern."""

    def __init__(self):
        self._subscribers: Dict[Type[BaseEvent], List[Callable]] = {}
        DebugLogger.init("EventManager initialized", category="event_manager")

    def subscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """
        Register a callback for an event type. Duplicate registrations are ignored.

        Args:
            event_type: Event class to listen for
            callback: Function to call when event fires
        """
        callbacks = self._subscribers.setdefault(event_type, [])
        if callback in callbacks:
            return

        callbacks.append(callback)
        DebugLogger.system(
            f"Subscribed '{getattr(callback, '__name__', repr(callback))}' to '{event_type.__name__}'",
            category="event_manager"
        )

    def unsubscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        callbacks = self._subscribers.get(event_type, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def dispatch(self, event: BaseEvent) -> int:
        """
        Send event to all registered callbacks.

        A failing subscriber is logged and skipped so a broken collaborator
        (missing audio device, renderer error) never stalls the loop.

        Returns:
            Number of callbacks that completed without raising
        """
        delivered = 0
        for callback in list(self._subscribers.get(type(event), ())):
            try:
                callback(event)
                delivered += 1
            except Exception as e:
                DebugLogger.warn(
                    f"{type(event).__name__} subscriber "
                    f"{getattr(callback, '__name__', repr(callback))} failed: {e}",
                    category="event"
                )
        return delivered

    def clear_all(self) -> None:
        """Remove all subscribers. Call on scene exit."""
        self._subscribers.clear()

    def subscriber_count(self, event_type: Type[BaseEvent]) -> int:
        return len(self._subscribers.get(event_type, ()))


# ===========================================================
# Singleton Access
# ===========================================================

_EVENTS = None


def get_events() -> EventManager:
    """Get or create the event manager singleton."""
    global _EVENTS
    if _EVENTS is None:
        _EVENTS = EventManager()
    return _EVENTS


def reset_events() -> None:
    """Drop the singleton. Call on full restart and between tests."""
    global _EVENTS
    _EVENTS = None
