#!/usr/bin/env python3
"""
Hero Sprites - pygame sprite animation demo
===========================================
Entry point.

Run: hero-sprites   (or python -m hero_sprites.main)
Sprite sheets are read from resources/Hero/Sprites relative to the
current directory.
"""

import sys
import traceback
from typing import List, Optional

from hero_sprites.config import (
    GAME_TITLE, HERO_ANIMATION_FILES, HERO_FRAME_COUNT, HERO_ANIMATION_SPEED
)
from hero_sprites.graphics.sprites import SpriteSheetError
from hero_sprites.player.player import Player


def load_hero(player: Player):
    """Load every directional sheet onto the player"""
    for key, path in HERO_ANIMATION_FILES.items():
        player.load_animation(key, path, HERO_FRAME_COUNT, HERO_ANIMATION_SPEED)


def print_help():
    print(f"{GAME_TITLE} - sprite animation demo")
    print("\nUsage: hero-sprites")
    print("\nControls:")
    print("  W / A / S / D  - Move up / left / down / right")
    print("  Escape         - Quit")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point. Returns the process exit code."""
    if argv is None:
        argv = sys.argv[1:]

    if argv and argv[0] in ('--help', '-h'):
        print_help()
        return 0

    from hero_sprites.core.game import Game

    game = Game()
    player = Player()

    print("[Assets] Loading hero sprite sheets...")
    try:
        load_hero(player)
    except (SpriteSheetError, ValueError) as e:
        print(f"[Assets] {e}")
        game.close()
        return 1

    game.set_player(player)

    try:
        game.run()
    except KeyboardInterrupt:
        print("\n[Game] Stopped by user.")
    except Exception as e:
        print(f"\n[Game] Error: {e}")
        traceback.print_exc()
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
