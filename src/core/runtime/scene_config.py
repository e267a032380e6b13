"""
scene_config.py
---------------
Typed view over the chase scene tunables.

Responsibilities
----------------
- Merge chase_scene.json over the Scene class defaults.
- Derive viewport-dependent bounds (wall, screen edge, pursuer band).
- Keep every derived bound non-negative for degenerate viewports.
"""

from dataclasses import dataclass, field, asdict
from typing import Dict, Optional

from src.core.debug.debug_logger import DebugLogger, LoggerConfig
from src.core.runtime.game_settings import Scene, Physics
from src.core.services.config_manager import load_config


CONFIG_FILE = "chase_scene.json"


@dataclass(frozen=True)
class SceneConfig:
    """Scene constants. Speeds are per reference tick, durations in ms."""
    game_speed: float = Scene.GAME_SPEED
    move_speed: float = Scene.MOVE_SPEED
    jump_height: float = Scene.JUMP_HEIGHT
    jump_lift: float = Scene.JUMP_LIFT
    character_size: float = Scene.CHARACTER_SIZE
    crouch_height: float = Scene.CROUCH_HEIGHT
    jump_duration_ms: float = Scene.JUMP_DURATION_MS
    jump_cooldown_ms: float = Scene.JUMP_COOLDOWN_MS
    animation_interval_ms: float = Scene.ANIMATION_INTERVAL_MS
    gate_speed: float = Scene.GATE_SPEED
    pursuer_near_distance: float = Scene.PURSUER_NEAR_DISTANCE
    pursuer_multiplier_ceiling: Optional[float] = Scene.PURSUER_MULTIPLIER_CEILING
    wall_ratio: float = Scene.WALL_RATIO
    pursuer_band_ratio: float = Scene.PURSUER_BAND_RATIO
    pursuer_right_margin: float = Scene.PURSUER_RIGHT_MARGIN
    start_x: float = Scene.START_X
    reference_tick: float = Physics.REFERENCE_TICK
    max_frames: Dict[str, int] = field(default_factory=lambda: dict(Scene.MAX_FRAMES))

    # ===========================================================
    # Construction
    # ===========================================================

    @classmethod
    def from_dict(cls, data: dict) -> "SceneConfig":
        """Build from a flat dict, ignoring unknown keys."""
        known = cls.__dataclass_fields__
        values = {}
        for key, value in data.items():
            if key not in known:
                DebugLogger.warn(f"Unknown scene setting '{key}' ignored", category="loading")
                continue
            values[key] = value

        if "max_frames" in values:
            merged = dict(Scene.MAX_FRAMES)
            merged.update({k: int(v) for k, v in values["max_frames"].items()})
            values["max_frames"] = merged

        return cls(**values)

    def to_dict(self) -> dict:
        return asdict(self)

    # ===========================================================
    # Viewport-derived Bounds
    # ===========================================================

    def wall_x(self, viewport) -> float:
        """Invisible wall coordinate."""
        return max(0.0, viewport.width * self.wall_ratio)

    def screen_max_x(self, viewport) -> float:
        """Rightmost x a directional nudge may reach."""
        return max(0.0, viewport.width - self.character_size)

    def travel_max_x(self, viewport) -> float:
        """Where the wall latch pins the character: the wall, or the screen edge if nearer."""
        return min(self.wall_x(viewport), self.screen_max_x(viewport))

    def pursuer_band(self, viewport):
        """(low, high) travel band for the pursuer; collapses to high if inverted."""
        high = max(0.0, viewport.width - self.pursuer_right_margin)
        low = min(max(0.0, viewport.width * self.pursuer_band_ratio), high)
        return low, high

    def max_frames_for(self, pose) -> int:
        name = getattr(pose, "key", pose)
        return max(1, int(self.max_frames.get(name, 1)))


def load_scene_config(filename: str = CONFIG_FILE) -> SceneConfig:
    """
    Load chase_scene.json, apply its logging section, and return SceneConfig.

    Missing or unreadable files fall back to the Scene defaults.
    """
    defaults = {"scene": SceneConfig().to_dict(), "logging": {}}
    cfg = load_config(filename, defaults)

    LoggerConfig.apply(cfg.get("logging", {}))
    config = SceneConfig.from_dict(cfg.get("scene", {}))

    DebugLogger.system(
        f"Scene config: speed={config.game_speed} gate={config.gate_speed} "
        f"wall_ratio={config.wall_ratio}",
        category="loading"
    )
    return config
