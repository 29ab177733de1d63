"""
Hero Sprites - Configuration & Constants
========================================
All demo settings, colors, and constants in one place.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Tuple, Dict

# =============================================================================
# DISPLAY SETTINGS
# =============================================================================

SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480
FPS = 60
GAME_TITLE = "Non-Hot Reloaded Game"

# =============================================================================
# COLORS
# =============================================================================

WHITE = (255, 255, 255)
GREEN = (50, 200, 50)

# 0x181818FF
BACKGROUND_COLOR = (24, 24, 24)

# =============================================================================
# PLAYER SETTINGS
# =============================================================================

# Collision box (declared, not resolved against anything)
PLAYER_COLLISION_X = 42.0
PLAYER_COLLISION_Y = 58.0
PLAYER_COLLISION_WIDTH = 12.0
PLAYER_COLLISION_HEIGHT = 28.0

PLAYER_START_X = 0.0
PLAYER_START_Y = 0.0
PLAYER_SPEED = 2.0  # pixels per update

# =============================================================================
# ANIMATION SETTINGS
# =============================================================================

HERO_FRAME_COUNT = 8
HERO_ANIMATION_SPEED = 20  # frames per second at FPS updates per second


class Direction(Enum):
    """Facing / movement direction"""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def offset(self) -> Tuple[int, int]:
        """Unit step in screen coordinates (y grows downward)"""
        return _DIRECTION_OFFSETS[self]


_DIRECTION_OFFSETS: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


class AnimationMode(Enum):
    """What the hero is doing"""
    IDLE = "idle"
    RUN = "run"


@dataclass(frozen=True)
class AnimationKey:
    """Lookup key for one directional animation (e.g. Run(LEFT))"""
    mode: AnimationMode
    direction: Direction

    @classmethod
    def idle(cls, direction: Direction) -> "AnimationKey":
        return cls(AnimationMode.IDLE, direction)

    @classmethod
    def run(cls, direction: Direction) -> "AnimationKey":
        return cls(AnimationMode.RUN, direction)

    def __str__(self) -> str:
        return f"{self.mode.value}_{self.direction.value}"


# =============================================================================
# ASSETS
# =============================================================================

ASSET_ROOT = "resources/Hero/Sprites"

# Sheet file per animation key, relative to the working directory
HERO_ANIMATION_FILES: Dict[AnimationKey, str] = {
    AnimationKey(mode, direction): f"{ASSET_ROOT}/{mode.name}/{mode.value}_{direction.value}.png"
    for mode in AnimationMode
    for direction in (Direction.DOWN, Direction.UP, Direction.RIGHT, Direction.LEFT)
}

# =============================================================================
# DEBUG FLAGS
# =============================================================================

DEBUG_FRAMERATE = False
DEBUG_COLLISION = False
