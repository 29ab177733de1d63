"""
Core game engine modules
"""

from .input_handler import InputHandler, InputState
from .controller import KeyboardController
from .game import Game

__all__ = ['InputHandler', 'InputState', 'KeyboardController', 'Game']
