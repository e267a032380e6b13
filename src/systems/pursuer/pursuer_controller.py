"""
pursuer_controller.py
---------------------
Rubber-band speed control for the portal that chases the character.

Responsibilities
----------------
- Compute a speed multiplier that grows as the gap to the character shrinks.
- Subtract the world scroll so the portal holds a steady gap once close.
- Keep the portal inside its travel band for any character position.

Speed rule (per reference tick):
    distance   = pursuer_x - character_x
    multiplier = max(1, (near_distance / distance) * 2)   distance > 0
               = 1                                         distance <= 0
    delta      = gate_speed * multiplier - game_speed
"""

from dataclasses import dataclass

from src.core.debug.debug_logger import DebugLogger


@dataclass
class PursuerState:
    position_x: float = 0.0


def speed_multiplier(distance: float, near_distance: float, ceiling=None) -> float:
    """
    Multiplier for the pursuer speed at a given gap.

    Args:
        distance: pursuer_x - character_x in pixels
        near_distance: Gap at which the multiplier reaches 2
        ceiling: Optional upper bound; None keeps the uncapped rule
    """
    if distance <= 0:
        multiplier = 1.0
    else:
        multiplier = max(1.0, (near_distance / distance) * 2)

    if ceiling is not None:
        multiplier = min(multiplier, max(1.0, float(ceiling)))
    return multiplier


class PursuerController:
    """Advances PursuerState toward the character each tick."""

    def __init__(self, state: PursuerState, config):
        self.state = state
        self.config = config

    def spawn(self, viewport):
        """Place the portal at the right edge of its band."""
        _, high = self.config.pursuer_band(viewport)
        self.state.position_x = high

    def update(self, character_x: float, viewport, ticks: float) -> float:
        """
        Move the portal one step and clamp it to the band.

        Returns:
            float: Multiplier used for this step
        """
        if ticks <= 0:
            return 1.0

        cfg = self.config
        distance = self.state.position_x - character_x
        multiplier = speed_multiplier(distance, cfg.pursuer_near_distance,
                                      cfg.pursuer_multiplier_ceiling)

        delta = cfg.gate_speed * multiplier - cfg.game_speed
        self.state.position_x += delta * ticks
        self.clamp(viewport)

        DebugLogger.trace(
            f"distance={distance:.1f} mult={multiplier:.2f} x={self.state.position_x:.1f}",
            category="pursuer"
        )
        return multiplier

    def clamp(self, viewport):
        low, high = self.config.pursuer_band(viewport)
        self.state.position_x = max(low, min(self.state.position_x, high))
