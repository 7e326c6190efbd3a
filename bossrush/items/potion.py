"""
Potion module for the game.

Defines consumable potions that restore health or mana once.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from bossrush.core.constants import PotionKind


class Potion(BaseModel):
    """
    A consumable that restores a fixed amount of health or mana.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        description="The name of the potion.",
    )
    amount: int = Field(
        description="How much health or mana the potion restores.",
        gt=0,
    )
    kind: PotionKind = Field(
        description="Whether the potion restores health or mana.",
    )

    @property
    def restores_health(self) -> bool:
        return self.kind == PotionKind.HEALTH

    def use_on(self, unit: Any) -> None:
        """
        Applies the potion to the unit.

        Args:
            unit (Unit):
                The unit drinking the potion.

        """
        if self.restores_health:
            unit.heal(self.amount)
        else:
            unit.restore_mana(self.amount)

    def __str__(self) -> str:
        return f"{self.name} - Restores {self.amount} {self.kind.short_name}"
