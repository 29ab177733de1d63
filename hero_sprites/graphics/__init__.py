"""
Graphics System Module
"""

from hero_sprites.graphics.renderer import Renderer
from hero_sprites.graphics.sprites import load_sprite_sheet, SpriteSheetError
from hero_sprites.graphics.animations import SpriteAnimation

__all__ = [
    'Renderer', 'load_sprite_sheet', 'SpriteSheetError', 'SpriteAnimation'
]
