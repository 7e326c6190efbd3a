"""
Combat system module for the game.

Contains the battle resolver and the boss decision logic.
"""

from .boss_ai import BOSS_MOVES, choose_boss_move
from .combat_manager import CombatManager

__all__ = [
    # Import from boss_ai.py
    "BOSS_MOVES",
    "choose_boss_move",
    # Import from combat_manager.py
    "CombatManager",
]
