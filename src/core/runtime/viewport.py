"""
viewport.py
-----------
Explicit viewport value injected into the simulation.

The simulation never reads window dimensions from pygame directly; the host
supplies a ViewportSize at scene start and again on every resize.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ViewportSize:
    """Host viewport in pixels. Negative sizes are clamped to zero."""
    width: float
    height: float

    def __post_init__(self):
        object.__setattr__(self, "width", max(0.0, float(self.width)))
        object.__setattr__(self, "height", max(0.0, float(self.height)))

    @classmethod
    def from_surface(cls, surface):
        """Build from anything exposing get_size() (a pygame Surface)."""
        w, h = surface.get_size()
        return cls(w, h)
