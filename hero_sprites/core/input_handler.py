"""
Input handling for the keyboard
"""

import pygame
from typing import Dict, Set
from dataclasses import dataclass, field


@dataclass
class InputState:
    """Current state of the keyboard"""
    keys_pressed: Set[int] = field(default_factory=set)
    keys_just_released: Set[int] = field(default_factory=set)

    # Special
    quit_requested: bool = False


class InputHandler:
    """
    Centralized input handling.
    Tracks held and just-released keys.
    """

    def __init__(self):
        self.state = InputState()

        # Key bindings (action -> key)
        self.bindings: Dict[str, int] = {
            'move_left': pygame.K_a,
            'move_right': pygame.K_d,
            'move_down': pygame.K_s,
            'move_up': pygame.K_w,
            'quit': pygame.K_ESCAPE,
        }

    def update(self):
        """
        Reset per-frame state. Call once per frame before processing events.
        """
        self.state.keys_just_released.clear()
        self.state.quit_requested = False

    def process_event(self, event: pygame.event.Event):
        """Process a single pygame event"""
        if event.type == pygame.QUIT:
            self.state.quit_requested = True

        elif event.type == pygame.KEYDOWN:
            self.state.keys_pressed.add(event.key)
            if event.key == self.bindings.get('quit'):
                self.state.quit_requested = True

        elif event.type == pygame.KEYUP:
            self.state.keys_pressed.discard(event.key)
            self.state.keys_just_released.add(event.key)

    def is_key_pressed(self, key: int) -> bool:
        """Check if key is currently held down"""
        return key in self.state.keys_pressed

    def is_key_just_released(self, key: int) -> bool:
        """Check if key was just released this frame"""
        return key in self.state.keys_just_released

    def is_action_pressed(self, action: str) -> bool:
        """Check if bound action key is pressed"""
        if action in self.bindings:
            return self.is_key_pressed(self.bindings[action])
        return False

    def is_action_just_released(self, action: str) -> bool:
        """Check if bound action key was just released"""
        if action in self.bindings:
            return self.is_key_just_released(self.bindings[action])
        return False

    def should_quit(self) -> bool:
        """Check if quit was requested"""
        return self.state.quit_requested
