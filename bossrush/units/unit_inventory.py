"""
Unit inventory module for the game.

Holds the equipment a unit has acquired and the potions it carries.
"""

from typing import Any

from bossrush.core.logging import log_debug, log_warning
from bossrush.items.equipment import Equipment
from bossrush.items.potion import Potion


class UnitInventory:
    """
    Manages the equipment and potions owned by a unit.

    Equipment is applied when added and only kept afterwards for display.
    Potions are consumed and removed when used.

    Attributes:
        equipment (list[Equipment]):
            Acquired equipment, in acquisition order.
        potions (list[Potion]):
            Carried potions, in acquisition order.

    """

    equipment: list[Equipment]
    potions: list[Potion]

    def __init__(self, owner: Any) -> None:
        """
        Initialize the UnitInventory with the owning unit.

        Args:
            owner (Any):
                The Unit instance this inventory belongs to.

        """
        self._owner = owner
        self.equipment = []
        self.potions = []

    def add_equipment(self, item: Equipment) -> None:
        """
        Adds a piece of equipment and applies its bonuses once.

        Args:
            item (Equipment):
                The equipment to acquire.

        """
        self.equipment.append(item)
        item.apply_to(self._owner)
        self._owner.add_to_battle_log(f"{self._owner.name} equipped {item.name}!")

    def add_potion(self, potion: Potion) -> None:
        self.potions.append(potion)
        log_debug(
            f"{self._owner.name} received {potion.name}",
            {"unit": self._owner.name, "potions": len(self.potions)},
        )

    def use_potion(self, index: int) -> bool:
        """
        Drinks the potion at the given position.

        Args:
            index (int):
                Zero-based position in the potion list.

        Returns:
            bool:
                True if a potion was used, False if the index is out of range.

        """
        if index < 0 or index >= len(self.potions):
            log_warning(
                f"{self._owner.name} has no potion at index {index}",
                {"unit": self._owner.name, "index": index, "potions": len(self.potions)},
            )
            return False
        potion = self.potions.pop(index)
        potion.use_on(self._owner)
        self._owner.add_to_battle_log(f"{self._owner.name} used {potion.name}!")
        return True
