"""
Player Character
================
Position, movement, and the directional animation set of the hero.
"""

from typing import Dict, Optional

import pygame

from hero_sprites.config import (
    AnimationKey, Direction,
    PLAYER_COLLISION_X, PLAYER_COLLISION_Y,
    PLAYER_COLLISION_WIDTH, PLAYER_COLLISION_HEIGHT,
    PLAYER_START_X, PLAYER_START_Y, PLAYER_SPEED
)
from hero_sprites.graphics.animations import SpriteAnimation
from hero_sprites.graphics.sprites import load_sprite_sheet


class MissingAnimationError(KeyError):
    """Requested animation was never registered on the player"""

    def __init__(self, key: AnimationKey):
        self.key = key
        super().__init__(f"No animation registered for {key}")

    def __str__(self) -> str:
        return self.args[0]


class Player:
    """
    The hero: one animation per (mode, direction) and a position.
    """

    def __init__(self, x: float = PLAYER_COLLISION_X, y: float = PLAYER_COLLISION_Y,
                 width: float = PLAYER_COLLISION_WIDTH,
                 height: float = PLAYER_COLLISION_HEIGHT,
                 speed: float = PLAYER_SPEED):
        # Declared for future collision work; nothing reads it yet
        self.collision = pygame.Rect(int(x), int(y), int(width), int(height))

        self.animations: Dict[AnimationKey, SpriteAnimation] = {}
        self.position = pygame.math.Vector2(PLAYER_START_X, PLAYER_START_Y)
        self.current_animation = AnimationKey.idle(Direction.DOWN)
        self.is_moving = False
        self.speed = speed

    def add_animation(self, key: AnimationKey, animation: SpriteAnimation):
        """Register (or replace) the animation for key"""
        self.animations[key] = animation

    def load_animation(self, key: AnimationKey, path: str,
                       frame_count: int, speed: int) -> SpriteAnimation:
        """Load a sprite sheet from disk and register it under key"""
        animation = SpriteAnimation(load_sprite_sheet(path), frame_count, speed)
        self.add_animation(key, animation)
        return animation

    def select_animation(self, key: AnimationKey):
        """Switch the active animation. Not validated until used."""
        self.current_animation = key

    def get_animation(self, key: Optional[AnimationKey] = None) -> SpriteAnimation:
        """Animation for key, defaulting to the active one"""
        if key is None:
            key = self.current_animation
        try:
            return self.animations[key]
        except KeyError:
            raise MissingAnimationError(key) from None

    def advance(self):
        """Fixed-step tick of the active animation"""
        self.get_animation().advance()

    def update(self, dt: float):
        """Time-based update of the active animation"""
        self.get_animation().update(dt)

    def move(self, direction: Direction):
        """Step one speed unit in direction and switch to its run cycle"""
        dx, dy = direction.offset
        self.position.x += dx * self.speed
        self.position.y += dy * self.speed
        self.is_moving = True
        self.select_animation(AnimationKey.run(direction))

    def stop(self, direction: Direction):
        """Fall back to the idle cycle facing direction"""
        self.is_moving = False
        self.select_animation(AnimationKey.idle(direction))

    def draw(self, surface: pygame.Surface) -> pygame.Rect:
        return self.get_animation().draw(surface, self.position)
