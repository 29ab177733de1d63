"""
Sprite Sheet Loading
====================
Load horizontal sprite sheets from disk into pygame surfaces.
"""

import os

import pygame


class SpriteSheetError(Exception):
    """Sprite sheet could not be loaded"""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not load sprite sheet '{path}': {reason}")


def load_sprite_sheet(path: str) -> pygame.Surface:
    """
    Load a sprite sheet image.

    Surfaces are converted for fast blitting once a display mode is set;
    without a display (tests, tooling) the raw surface is returned.
    """
    if not os.path.isfile(path):
        raise SpriteSheetError(path, "file not found")

    try:
        surface = pygame.image.load(path)
    except (pygame.error, FileNotFoundError) as e:
        raise SpriteSheetError(path, str(e)) from e

    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        surface = surface.convert_alpha()

    print(f"[Assets] Loaded {path} ({surface.get_width()}x{surface.get_height()})")
    return surface
