"""
background_manager.py
---------------------
Horizontally tiled scrolling background.

The layer owns no scroll state: it paints at whatever offset the
simulation snapshot carries, wrapping by tiling.
"""

import math

import pygame

from src.core.debug.debug_logger import DebugLogger


FALLBACK_SIZE = (1536, 1024)
FALLBACK_COLOR = (30, 30, 60)


class BackgroundLayer:
    """
    Single repeat-x background image.

    The image is scaled to the viewport height so one row of tiles covers
    the screen.
    """

    __slots__ = ("image_path", "source", "image", "width", "height")

    def __init__(self, image_path, viewport_height):
        """
        Args:
            image_path: Path to background image
            viewport_height: Height to scale the image to
        """
        self.image_path = image_path
        self.source = self._load_image(image_path)
        self.image = None
        self.width = 0
        self.height = 0
        self.fit(viewport_height)

    def _load_image(self, image_path):
        try:
            image = pygame.image.load(image_path)
            DebugLogger.init_sub(f"Loaded background: {image_path}")
            return image
        except (pygame.error, FileNotFoundError) as e:
            DebugLogger.warn(f"Failed to load {image_path}: {e}, using fallback", category="render")
            image = pygame.Surface(FALLBACK_SIZE)
            image.fill(FALLBACK_COLOR)
            return image

    def fit(self, viewport_height):
        """Rescale to a new viewport height (called on resize)."""
        src_w, src_h = self.source.get_size()
        target_h = max(1, int(viewport_height))
        target_w = max(1, int(src_w * target_h / max(1, src_h)))
        self.image = pygame.transform.scale(self.source, (target_w, target_h))
        self.width, self.height = target_w, target_h

    def render(self, surface, offset):
        """
        Draw the tiled row at a horizontal scroll offset.

        Args:
            surface: Target pygame surface
            offset: World scroll offset (decreasing as the world moves)
        """
        start_x = math.floor(offset % self.width) - self.width
        tiles = surface.get_width() // self.width + 2

        for tx in range(tiles):
            surface.blit(self.image, (start_x + tx * self.width, 0))
