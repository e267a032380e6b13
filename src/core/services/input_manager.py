"""
input_manager.py
----------------
Translates raw pygame key events into character intents.

Provides:
- Edge-triggered Jump and ToggleDebug on KEYDOWN
- Level-triggered crouch (KEYDOWN starts, KEYUP ends)
- Level-triggered movement: one intent on KEYDOWN, then one per frame
  from held_intents() until the key is released
- MoveStop once the last held direction key is released
"""

import pygame

from src.core.debug.debug_logger import DebugLogger
from src.entities.character.character_state import Intent


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    "move_left": [pygame.K_LEFT],
    "move_right": [pygame.K_RIGHT],
    "jump": [pygame.K_UP, pygame.K_SPACE],
    "crouch": [pygame.K_DOWN],
    "toggle_debug": [pygame.K_d],
}

_DIRECTION_INTENTS = {
    "move_left": Intent.MOVE_LEFT,
    "move_right": Intent.MOVE_RIGHT,
}


class InputManager:
    """
    Stateless-per-event key to intent mapper with held-direction tracking.

    Usage:
        for event in pygame.event.get():
            for intent in input_manager.handle_event(event):
                clock.dispatch(intent)

        for intent in input_manager.held_intents():   # once per frame
            clock.dispatch(intent)
    """

    def __init__(self, key_bindings=None):
        """
        Args:
            key_bindings: action name -> list of pygame key codes
                          (DEFAULT_KEY_BINDINGS when None)
        """
        DebugLogger.init_entry("InputManager")

        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS
        self._validate_bindings()
        self._key_to_action = self._build_lookup()
        self._held_directions = []
        self._pressed_this_frame = set()

    def _validate_bindings(self):
        unknown = set(self.key_bindings) - set(DEFAULT_KEY_BINDINGS)
        if unknown:
            raise ValueError(f"Unknown input actions: {sorted(unknown)}")

        seen = {}
        for action, keys in self.key_bindings.items():
            for key in keys:
                if key in seen and seen[key] != action:
                    DebugLogger.warn(
                        f"Key {key} bound to both '{seen[key]}' and '{action}'",
                        category="input"
                    )
                seen.setdefault(key, action)

    def _build_lookup(self):
        lookup = {}
        for action, keys in self.key_bindings.items():
            for key in keys:
                lookup.setdefault(key, action)
        return lookup

    # ===========================================================
    # Event Mapping
    # ===========================================================

    def handle_event(self, event) -> list:
        """
        Map one pygame event to zero or more intents.

        Args:
            event: pygame.event.Event (only KEYDOWN/KEYUP are consumed)
        """
        if event.type == pygame.KEYDOWN:
            return self._key_down(event.key)
        if event.type == pygame.KEYUP:
            return self._key_up(event.key)
        return []

    def _key_down(self, key) -> list:
        action = self._key_to_action.get(key)
        if action is None:
            return []

        if action in _DIRECTION_INTENTS:
            if action in self._held_directions:
                self._held_directions.remove(action)
            self._held_directions.append(action)
            self._pressed_this_frame.add(action)
            intents = [_DIRECTION_INTENTS[action]]
        elif action == "jump":
            intents = [Intent.JUMP]
        elif action == "crouch":
            intents = [Intent.CROUCH_START]
        else:
            intents = [Intent.TOGGLE_DEBUG]

        DebugLogger.trace(f"KEYDOWN {key} -> {[i.value for i in intents]}", category="input")
        return intents

    def _key_up(self, key) -> list:
        action = self._key_to_action.get(key)

        if action in _DIRECTION_INTENTS:
            if action in self._held_directions:
                self._held_directions.remove(action)
            return [] if self._held_directions else [Intent.MOVE_STOP]

        if action == "crouch":
            return [Intent.CROUCH_END]
        return []

    # ===========================================================
    # Held Keys
    # ===========================================================

    def held_intents(self) -> list:
        """
        Move intents for every direction key still held. Call once per frame.

        Keys pressed since the previous call already produced their intent
        from handle_event and are skipped this once.
        """
        intents = [_DIRECTION_INTENTS[action] for action in self._held_directions
                   if action not in self._pressed_this_frame]
        self._pressed_this_frame.clear()
        return intents

    def release_all(self) -> list:
        """Forget held keys (focus loss, scene exit)."""
        had_direction = bool(self._held_directions)
        self._held_directions.clear()
        self._pressed_this_frame.clear()
        return [Intent.MOVE_STOP] if had_direction else []
