"""
Boss Rush: a turn-based console role-playing game.

The player picks a class and fights five bosses in a row, collecting potions,
upgrades and equipment between stages.
"""

__version__ = "1.0.0"
