"""
Unit system module for the game.

This module handles the combatants: the player's hero and the bosses, with
their stats, status effects, inventory, display helpers and the templates they
are built from.
"""

from .main import Unit, create_boss, create_player
from .unit_display import UnitDisplay
from .unit_effects import UnitEffects
from .unit_inventory import UnitInventory
from .unit_stats import UnitStats
from .unit_template import BossTemplate, ClassTemplate

__all__ = [
    # Import from main.py
    "Unit",
    "create_boss",
    "create_player",
    # Import from unit_display.py
    "UnitDisplay",
    # Import from unit_effects.py
    "UnitEffects",
    # Import from unit_inventory.py
    "UnitInventory",
    # Import from unit_stats.py
    "UnitStats",
    # Import from unit_template.py
    "BossTemplate",
    "ClassTemplate",
]
