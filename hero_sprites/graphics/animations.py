"""
Animation System
================
Frame-strip animation over a horizontal sprite sheet.
"""

import math
from typing import Tuple, Union

import pygame

from hero_sprites.config import FPS


class SpriteAnimation:
    """
    One looping animation cycle backed by a single sprite sheet.

    Frames are laid out left to right with equal width. Timing can be driven
    either by fixed-step ticks (advance) or by elapsed seconds (update).
    """

    def __init__(self, texture: pygame.Surface, frame_count: int, speed: int):
        if frame_count < 1:
            raise ValueError(f"frame_count must be at least 1, got {frame_count}")
        if speed < 1:
            raise ValueError(f"speed must be at least 1, got {speed}")
        if texture.get_width() < frame_count:
            raise ValueError(
                f"sheet is {texture.get_width()}px wide, too narrow for {frame_count} frames"
            )

        self.texture = texture
        self.frame_count = frame_count
        self.speed = speed
        self.frame_width = texture.get_width() // frame_count
        self.frame_height = texture.get_height()

        self.current_frame = 0
        self.frames_counter = 0
        self.elapsed = 0.0

    @property
    def ticks_per_frame(self) -> int:
        """Fixed-step ticks spent on each frame"""
        return max(1, FPS // self.speed)

    @property
    def frame_duration(self) -> float:
        """Seconds spent on each frame"""
        return 1.0 / self.speed

    def _next_frame(self):
        self.current_frame = (self.current_frame + 1) % self.frame_count

    def advance(self):
        """Advance one fixed-rate tick"""
        self.frames_counter += 1
        if self.frames_counter >= self.ticks_per_frame:
            self.frames_counter = 0
            self._next_frame()

    def update(self, dt: float):
        """Advance by elapsed time in seconds"""
        if dt <= 0:
            return

        self.elapsed += dt
        while self.elapsed >= self.frame_duration:
            self.elapsed -= self.frame_duration
            self._next_frame()

    def reset(self):
        """Back to the first frame"""
        self.current_frame = 0
        self.frames_counter = 0
        self.elapsed = 0.0

    @property
    def source_rect(self) -> pygame.Rect:
        """Region of the sheet holding the current frame"""
        return pygame.Rect(
            self.current_frame * self.frame_width,
            0,
            self.frame_width,
            self.frame_height
        )

    def draw(self, surface: pygame.Surface,
             position: Union[pygame.math.Vector2, Tuple[float, float]]) -> pygame.Rect:
        """Blit the current frame at position (floored to whole pixels), unscaled"""
        dest = (math.floor(position[0]), math.floor(position[1]))
        return surface.blit(self.texture, dest, area=self.source_rect)
