"""
game_settings.py
----------------
Centralized constants for the chase scene.

Values here are the defaults; src/config/chase_scene.json may override the
Scene tunables at load time (see scene_config.py).
"""


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Window configuration."""
    WIDTH: int = 1280
    HEIGHT: int = 720
    FPS: int = 60
    CAPTION: str = "Raccoon Run"
    RESIZABLE: bool = True


# ===========================================================
# Physics & Timing
# ===========================================================

class Physics:
    """Simulation timing."""
    UPDATE_RATE: int = 60
    FIXED_DT: float = 1 / UPDATE_RATE
    MAX_FRAME_TIME: float = 0.1

    # Per-tick constants below are expressed against this tick length
    REFERENCE_TICK: float = 1 / 60


# ===========================================================
# Scene Tunables
# ===========================================================

class Scene:
    """Chase scene constants (pixels per reference tick, milliseconds)."""
    GAME_SPEED: float = 8
    MOVE_SPEED: float = 15
    JUMP_HEIGHT: float = 300
    JUMP_LIFT: float = 100
    CHARACTER_SIZE: float = 200
    CROUCH_HEIGHT: float = CHARACTER_SIZE / 2

    JUMP_DURATION_MS: float = 500
    JUMP_COOLDOWN_MS: float = 100
    ANIMATION_INTERVAL_MS: float = 50

    GATE_SPEED: float = GAME_SPEED * 4
    PURSUER_NEAR_DISTANCE: float = 1000
    PURSUER_MULTIPLIER_CEILING = None

    WALL_RATIO: float = 0.35
    PURSUER_BAND_RATIO: float = 0.7
    PURSUER_RIGHT_MARGIN: float = 200

    START_X: float = 100

    MAX_FRAMES = {
        "idle": 11,
        "running": 11,
        "jumping": 11,
        "crouching": 11,
    }


# ===========================================================
# Rendering
# ===========================================================

class Render:
    """Presentation constants used by the renderer only."""
    GROUND_HEIGHT: int = 130
    CHARACTER_BASELINE: int = 60
    BODY_RATIO_CROUCHING: float = 0.5
    BODY_RATIO_STANDING: float = 0.8
    SPRITE_INSET_CROUCHING: int = 10
    SPRITE_INSET_STANDING: int = 20
    PORTAL_SIZE: tuple = (240, 370)
    PORTAL_CAPTION: str = "Raccoonlist Heaven"
    BACKGROUND_COLOR: tuple = (0, 0, 0)
    GROUND_COLOR: tuple = (26, 26, 26)
    GROUND_EDGE_COLOR: tuple = (42, 42, 42)
    DEBUG_WALL_COLOR: tuple = (255, 0, 0)
    CAPTION_COLOR: tuple = (255, 0, 0)

    BACKGROUND_IMAGE: str = "assets/background.jpg"
    PORTAL_IMAGE: str = "assets/portal.png"
    SPRITE_ROOT: str = "assets/raccoon"


# ===========================================================
# Audio
# ===========================================================

class Audio:
    BACKGROUND_TRACK: str = "assets/arcade.mp3"
    BACKGROUND_LOOPS: int = -1


# ===========================================================
# Debug Display
# ===========================================================

class Debug:
    """Visual debug toggles -- not related to logging."""
    WALL_LINE_WIDTH: int = 2
    FRAME_TIME_WARNING: float = 16.67
