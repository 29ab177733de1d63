"""
Player Module
"""

from hero_sprites.player.player import Player, MissingAnimationError

__all__ = ['Player', 'MissingAnimationError']
