"""
draw_manager.py
---------------
Image cache for the chase renderer.

Responsibilities:
- Load, scale and cache images by (path, size, flip)
- Substitute a labelled placeholder when an asset is missing, warning once
"""

import pygame

from src.core.debug.debug_logger import DebugLogger


class DrawManager:
    """Loads sprites on demand and never raises on a missing file."""

    def __init__(self):
        self.images = {}
        self._missing = set()
        DebugLogger.init_entry("DrawManager")

    def get_image(self, path, size, flip_x=False, fallback_color=(255, 50, 50)):
        """
        Return a cached surface for path, scaled to size and optionally mirrored.

        Args:
            path: Image file path
            size: (width, height) in pixels
            flip_x: Mirror horizontally (character facing left)
            fallback_color: Placeholder fill when the file cannot be read
        """
        size = (max(1, int(size[0])), max(1, int(size[1])))
        key = (path, size, flip_x)
        cached = self.images.get(key)
        if cached is not None:
            return cached

        try:
            image = pygame.transform.scale(pygame.image.load(path), size)
        except (pygame.error, FileNotFoundError) as e:
            if path not in self._missing:
                self._missing.add(path)
                DebugLogger.warn(f"Missing image {path}: {e}", category="render")
            image = self._generate_fallback(size, fallback_color)

        if flip_x:
            image = pygame.transform.flip(image, True, False)

        self.images[key] = image
        return image

    def _generate_fallback(self, size, color):
        img = pygame.Surface(size, pygame.SRCALPHA)
        img.fill((*color, 200))
        pygame.draw.rect(img, (255, 255, 255), img.get_rect(), 2)
        return img
