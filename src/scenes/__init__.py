"""
Scene exports.
"""

from src.scenes.chase_scene import ChaseScene

__all__ = ['ChaseScene']
