"""
Action system module for the game.

Contains the skill model shared by the playable classes and the bosses.
"""

from .skill import Skill

__all__ = [
    "Skill",
]
