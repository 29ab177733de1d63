"""
Main Game Loop for Hero Sprites
"""

import pygame
from typing import Optional

from hero_sprites.config import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FPS, GAME_TITLE,
    DEBUG_FRAMERATE, WHITE
)
from hero_sprites.core.input_handler import InputHandler
from hero_sprites.core.controller import KeyboardController
from hero_sprites.graphics.renderer import Renderer


class Game:
    """
    Owns the window and clock; runs poll -> update -> render each frame.
    """

    def __init__(self):
        # Initialize Pygame
        pygame.init()

        # Display
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(GAME_TITLE)

        # Clock
        self.clock = pygame.time.Clock()
        self.running = True
        self.dt = 0.0  # Delta time in seconds
        self.fps = 0
        self.frame_count = 0

        # Core systems
        self.input_handler = InputHandler()
        self.renderer = Renderer()

        # Set once the hero is loaded
        self.player = None
        self.controller: Optional[KeyboardController] = None

    def set_player(self, player):
        """Attach the hero and its keyboard controller"""
        self.player = player
        self.controller = KeyboardController(player, self.input_handler)

    def run(self):
        """Main game loop"""
        if self.player is None:
            raise RuntimeError("Game.run() called before set_player()")

        print(f"[Game] Running at {FPS} FPS target")
        try:
            while self.running:
                self.dt = self.clock.tick(FPS) / 1000.0
                self.fps = self.clock.get_fps()
                self.frame_count += 1

                # Handle events
                self._handle_events()

                # Check quit
                if self.input_handler.should_quit():
                    self.running = False
                    continue

                # Update
                self._update()

                # Render
                self._render()

                # Flip display
                pygame.display.flip()
        finally:
            self.close()

    def _handle_events(self):
        """Process pygame events"""
        self.input_handler.update()
        for event in pygame.event.get():
            self.input_handler.process_event(event)

    def _update(self):
        """Update game logic"""
        self.controller.update()
        self.player.update(self.dt)

    def _render(self):
        """Render current frame"""
        self.renderer.render(self.screen, self.player)

        # Debug FPS
        if DEBUG_FRAMERATE:
            self._render_fps()

    def _render_fps(self):
        """Render FPS counter"""
        font = pygame.font.Font(None, 24)
        fps_text = font.render(f"FPS: {int(self.fps)}", True, WHITE)
        self.screen.blit(fps_text, (SCREEN_WIDTH - fps_text.get_width() - 10, 10))

    def close(self):
        """Clean up resources"""
        print(f"[Game] Shutting down after {self.frame_count} frames")
        pygame.quit()
