"""
chase_renderer.py
-----------------
Paints a RenderSnapshot onto a pygame surface.

The renderer reads the snapshot only; it never touches simulation state.
Missing assets degrade to placeholders, never to exceptions.

Draw order: background, ground, portal (with caption), character, debug wall.
With debug visible the character body box is outlined as well.
"""

import pygame

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_settings import Render, Debug
from src.entities.character.character_state import Pose, Facing
from src.graphics.background_manager import BackgroundLayer
from src.graphics.draw_manager import DrawManager
from src.graphics.animations.sprite_frames import sprite_path


class ChaseRenderer:
    """Stateless-per-frame painter for the chase scene."""

    def __init__(self, config, viewport, draw_manager=None):
        self.config = config
        self.draw_manager = draw_manager or DrawManager()
        self.background = BackgroundLayer(Render.BACKGROUND_IMAGE, viewport.height)
        self._viewport_height = viewport.height

        pygame.font.init()
        self.caption_font = pygame.font.SysFont("fantasy", 32, bold=True)
        self.caption = self.caption_font.render(Render.PORTAL_CAPTION, True, Render.CAPTION_COLOR)

        DebugLogger.init_entry("ChaseRenderer")

    # ===========================================================
    # Frame
    # ===========================================================

    def draw(self, surface, snapshot):
        """Render one frame from a snapshot."""
        if snapshot.viewport.height != self._viewport_height:
            self._viewport_height = snapshot.viewport.height
            self.background.fit(self._viewport_height)

        surface.fill(Render.BACKGROUND_COLOR)
        self.background.render(surface, snapshot.world_scroll_offset)
        self._draw_ground(surface)
        self._draw_portal(surface, snapshot)
        self._draw_character(surface, snapshot)

        if snapshot.debug_visible:
            self._draw_debug_wall(surface, snapshot)

    # ===========================================================
    # Layers
    # ===========================================================

    def _draw_ground(self, surface):
        width, height = surface.get_size()
        top = height - Render.GROUND_HEIGHT
        pygame.draw.rect(surface, Render.GROUND_COLOR, (0, top, width, Render.GROUND_HEIGHT))
        pygame.draw.rect(surface, Render.GROUND_EDGE_COLOR, (0, top, width, 4))

    def _draw_portal(self, surface, snapshot):
        height = surface.get_height()
        w, h = Render.PORTAL_SIZE
        left = int(snapshot.pursuer_position_x)
        top = height - 23 - h

        portal = self.draw_manager.get_image(Render.PORTAL_IMAGE, (w, h), fallback_color=(90, 0, 140))
        surface.blit(portal, (left, top))

        caption_rect = self.caption.get_rect(bottomright=(left + w - 50, top))
        surface.blit(self.caption, caption_rect)

    def _draw_character(self, surface, snapshot):
        size = int(self.config.character_size)
        body, sprite_pos = character_body(snapshot, self.config, surface.get_height())

        image = self.draw_manager.get_image(
            sprite_path(snapshot.pose, snapshot.frame_index),
            (size, size),
            flip_x=snapshot.facing is Facing.LEFT,
        )
        surface.blit(image, sprite_pos)

        if snapshot.debug_visible:
            pygame.draw.rect(surface, Render.DEBUG_WALL_COLOR, body, 1)

    def _draw_debug_wall(self, surface, snapshot):
        x = int(snapshot.wall_x)
        pygame.draw.line(surface, Render.DEBUG_WALL_COLOR,
                         (x, 0), (x, surface.get_height()), Debug.WALL_LINE_WIDTH)


def character_body(snapshot, config, surface_height):
    """
    Body box and sprite position for one frame.

    The box stands on the baseline raised by the vertical offset (plus the
    jump height mid-jump). It is half the sprite size tall while crouching
    and 0.8 of it otherwise. The sprite rests on the box floor, inset 10 px
    when crouching and 20 px otherwise.

    Returns:
        tuple: (pygame.Rect body, (x, y) sprite top-left)
    """
    size = config.character_size
    crouching = snapshot.pose is Pose.CROUCHING

    lift = snapshot.character_vertical_offset
    if snapshot.pose is Pose.JUMPING:
        lift += config.jump_height

    ratio = Render.BODY_RATIO_CROUCHING if crouching else Render.BODY_RATIO_STANDING
    inset = Render.SPRITE_INSET_CROUCHING if crouching else Render.SPRITE_INSET_STANDING

    x = int(snapshot.character_position_x)
    bottom = int(surface_height - Render.CHARACTER_BASELINE - lift)
    height = int(size * ratio)

    body = pygame.Rect(x, bottom - height, int(size), height)
    return body, (x, bottom - inset - int(size))
