"""
character_movement.py
---------------------
Handles character travel, the invisible-wall latch, and screen-edge logic.

Responsibilities
----------------
- Advance the character by the autoscroll speed each tick until the wall.
- Latch reached_wall permanently and pin the character there.
- Apply directional nudges, clamped to the screen, then to the wall.
- Derive the vertical offset from the current pose.
"""

from src.core.debug.debug_logger import DebugLogger
from src.entities.character.character_state import Pose, Intent


def update_movement(character, config, viewport, ticks):
    """
    Advance the character by one simulation step.

    Args:
        character (CharacterState): State being updated.
        config (SceneConfig): Scene constants.
        viewport (ViewportSize): Current host viewport.
        ticks (float): Step length in reference ticks (1.0 == one 60 Hz tick).

    Returns:
        bool: True if the wall latch was set during this step.
    """
    stop_x = config.travel_max_x(viewport)
    latched_now = False

    if not character.reached_wall:
        character.position_x += config.game_speed * ticks
        if character.position_x >= stop_x:
            character.position_x = stop_x
            character.reached_wall = True
            latched_now = True
            DebugLogger.action(f"Reached wall at x={stop_x:.1f}", category="character")
    else:
        character.position_x = stop_x

    character.vertical_offset = vertical_offset_for(character.pose, config)
    return latched_now


def apply_nudge(character, intent, config, viewport):
    """
    Move the character MOVE_SPEED pixels for one directional intent.

    The nudge is additive to the autoscroll and is clamped to the screen
    first, then to the wall.
    """
    if intent is Intent.MOVE_LEFT:
        character.position_x -= config.move_speed
    elif intent is Intent.MOVE_RIGHT:
        character.position_x += config.move_speed
    else:
        return

    clamp_to_screen(character, config, viewport)
    clamp_to_wall(character, config, viewport)


def clamp_to_screen(character, config, viewport):
    """Keep the character inside [0, screen_width - character_size]."""
    max_x = config.screen_max_x(viewport)
    character.position_x = max(0.0, min(character.position_x, max_x))


def clamp_to_wall(character, config, viewport):
    """Pin to the wall (or the screen edge, if nearer) once latched."""
    stop_x = config.travel_max_x(viewport)
    if character.reached_wall:
        character.position_x = stop_x


def visible_position(character, config, viewport) -> float:
    """Externally visible x: never past the wall or the screen edge."""
    return max(0.0, min(character.position_x, config.travel_max_x(viewport)))


def vertical_offset_for(pose, config) -> float:
    if pose is Pose.JUMPING:
        return config.jump_lift
    if pose is Pose.CROUCHING:
        return config.crouch_height
    return 0.0
