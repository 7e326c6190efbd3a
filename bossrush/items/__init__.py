"""
Item system module for the game.

Contains the equipment and potion models and the loot generators that hand
them out after each stage.
"""

from .equipment import Equipment
from .loot import generate_equipment_offer, generate_potion_drop
from .potion import Potion

__all__ = [
    # Import from equipment.py
    "Equipment",
    # Import from loot.py
    "generate_equipment_offer",
    "generate_potion_drop",
    # Import from potion.py
    "Potion",
]
