"""
Runtime exports.

Provides scene constants, the viewport value, scene configuration and the
simulation clock. The pygame host loop is imported from game_loop directly
so headless users never pull in the window code.
"""

from src.core.runtime.game_settings import Display, Physics, Scene, Render, Audio, Debug
from src.core.runtime.viewport import ViewportSize
from src.core.runtime.scene_config import SceneConfig, load_scene_config
from src.core.runtime.simulation_clock import SimulationClock, RenderSnapshot

__all__ = [
    # Constants
    'Display',
    'Physics',
    'Scene',
    'Render',
    'Audio',
    'Debug',
    # Simulation
    'ViewportSize',
    'SceneConfig',
    'load_scene_config',
    'SimulationClock',
    'RenderSnapshot',
]
