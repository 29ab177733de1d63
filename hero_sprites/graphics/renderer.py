"""
Main Renderer
=============
Draws a complete frame: background, hero, debug overlays.
"""

import pygame

from hero_sprites.config import BACKGROUND_COLOR, GREEN, DEBUG_COLLISION


class Renderer:
    """
    Main renderer for the demo.
    """

    def __init__(self, background_color=BACKGROUND_COLOR):
        self.background_color = background_color

        # Debug
        self.debug_collision = DEBUG_COLLISION

    def render(self, surface: pygame.Surface, player):
        """
        Render complete frame.
        """
        surface.fill(self.background_color)

        player.draw(surface)

        if self.debug_collision:
            self._render_debug_collision(surface, player)

    def _render_debug_collision(self, surface: pygame.Surface, player):
        """Outline the player's declared collision box"""
        pygame.draw.rect(surface, GREEN, player.collision, 1)
