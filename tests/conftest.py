"""Pytest configuration and fixtures."""

from __future__ import annotations

import os

# Headless SDL before pygame is imported anywhere
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from hero_sprites.config import AnimationKey, AnimationMode, Direction
from hero_sprites.graphics.animations import SpriteAnimation
from hero_sprites.player.player import Player


FRAME_WIDTH = 8
FRAME_HEIGHT = 16
FRAME_COUNT = 8


def frame_color(index: int) -> tuple:
    """Distinct solid color for frame index"""
    return (10 + index * 20, 200 - index * 20, 50)


def make_sheet(frame_count: int = FRAME_COUNT,
               frame_width: int = FRAME_WIDTH,
               frame_height: int = FRAME_HEIGHT) -> pygame.Surface:
    """Horizontal strip where every frame is filled with frame_color(i)."""
    sheet = pygame.Surface((frame_count * frame_width, frame_height))
    for i in range(frame_count):
        sheet.fill(frame_color(i), pygame.Rect(i * frame_width, 0, frame_width, frame_height))
    return sheet


@pytest.fixture
def sheet() -> pygame.Surface:
    """An 8-frame sprite sheet."""
    return make_sheet()


@pytest.fixture
def animation(sheet) -> SpriteAnimation:
    """8 frames at speed 20 (3 ticks per frame)."""
    return SpriteAnimation(sheet, FRAME_COUNT, 20)


@pytest.fixture
def player() -> Player:
    """Player with all eight directional animations registered."""
    hero = Player(speed=2.0)
    for mode in AnimationMode:
        for direction in Direction:
            hero.add_animation(AnimationKey(mode, direction),
                               SpriteAnimation(make_sheet(), FRAME_COUNT, 20))
    return hero
