"""
Equipment module for the game.

Defines the Equipment model: weapons, armor and accessories that grant a
permanent bonus to a unit's stats the moment they are acquired.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from bossrush.core.constants import EquipmentSlot
from bossrush.core.logging import log_debug


class Equipment(BaseModel):
    """
    Represents a piece of equipment that can be acquired by a unit.

    Equipment carries a static bonus quadruple (attack, health, defense, mana)
    that is applied exactly once, when the item enters the unit's inventory.
    It is never removed afterwards.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        description="The name of the equipment.",
    )
    description: str = Field(
        "",
        description="A brief description of the equipment.",
    )
    slot: EquipmentSlot = Field(
        description="The kind of equipment (weapon, armor, accessory).",
    )
    attack: int = Field(
        default=0,
        description="Permanent attack bonus.",
        ge=0,
    )
    health: int = Field(
        default=0,
        description="Permanent maximum health bonus.",
        ge=0,
    )
    defense: int = Field(
        default=0,
        description="Permanent defense bonus.",
        ge=0,
    )
    mana: int = Field(
        default=0,
        description="Permanent maximum mana bonus.",
        ge=0,
    )

    def model_post_init(self, _: Any) -> None:
        if not self.name:
            raise ValueError("Equipment name must not be empty.")

    @property
    def bonus_summary(self) -> str:
        """Returns the non-zero bonuses, e.g. '[ATK +10] [HP +30]'."""
        parts = []
        if self.attack > 0:
            parts.append(f"[ATK +{self.attack}]")
        if self.health > 0:
            parts.append(f"[HP +{self.health}]")
        if self.defense > 0:
            parts.append(f"[DEF +{self.defense}]")
        if self.mana > 0:
            parts.append(f"[MP +{self.mana}]")
        return " ".join(parts)

    def apply_to(self, unit: Any) -> None:
        """
        Applies the bonuses of this equipment to the unit.

        Args:
            unit (Unit):
                The unit receiving the bonuses.

        """
        log_debug(
            f"Applying {self.name} to {unit.name}",
            {"unit": unit.name, "equipment": self.name},
        )
        if self.attack > 0:
            unit.increase_attack(self.attack)
        if self.health > 0:
            unit.increase_max_health(self.health)
        if self.defense > 0:
            unit.increase_defense(self.defense)
        if self.mana > 0:
            unit.increase_max_mana(self.mana)

    def __str__(self) -> str:
        summary = f"{self.name} - {self.description}"
        if self.bonus_summary:
            summary += f" {self.bonus_summary}"
        return summary
