"""
Keyboard Controller
===================
Turns held/released movement keys into player moves and animation changes.
"""

from typing import List, Tuple

from hero_sprites.config import Direction
from hero_sprites.core.input_handler import InputHandler
from hero_sprites.player.player import Player


# Processing order matters: with several keys held, the last one sets the facing
MOVE_ACTIONS: List[Tuple[str, Direction]] = [
    ('move_left', Direction.LEFT),
    ('move_right', Direction.RIGHT),
    ('move_down', Direction.DOWN),
    ('move_up', Direction.UP),
]


class KeyboardController:
    """
    Drives a Player from an InputHandler.
    """

    def __init__(self, player: Player, input_handler: InputHandler):
        self.player = player
        self.input = input_handler

    def update(self):
        """Apply this frame's input to the player"""
        for action, direction in MOVE_ACTIONS:
            if self.input.is_action_pressed(action):
                self.player.move(direction)

        for action, direction in MOVE_ACTIONS:
            if self.input.is_action_just_released(action):
                self.player.stop(direction)
