"""
User interface module for the game.

Contains the decision contract the engine talks to and the console front-end
implementing it.
"""

from .cli_interface import ConsoleInterface
from .interface import PlayerInterface

__all__ = [
    # Import from cli_interface.py
    "ConsoleInterface",
    # Import from interface.py
    "PlayerInterface",
]
