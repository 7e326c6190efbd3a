"""
Unit stats module for the game.

Holds the vital and combat stats of a Unit and the clamped adjustments that
keep health and mana inside their bounds.
"""

from typing import Any


class UnitStats:
    """
    Handles the stats of a Unit.

    Attributes:
        owner (Any):
            The Unit instance that owns these stats.
        health (int):
            Current health, always in [0, max_health].
        max_health (int):
            Maximum health, only ever raised.
        mana (int):
            Current mana, always in [0, max_mana].
        max_mana (int):
            Maximum mana, only ever raised.
        base_attack (int):
            Attack before temporary buffs and debuffs.
        current_attack (int):
            Attack used when dealing damage.
        defense (int):
            Flat damage reduction, never lowered.

    """

    def __init__(
        self,
        owner: Any,
        health: int,
        mana: int,
        attack: int,
        defense: int = 0,
    ) -> None:
        """
        Initializes the UnitStats with full health and mana.

        Args:
            owner (Any):
                The Unit instance that owns these stats.
            health (int):
                Maximum (and starting) health.
            mana (int):
                Maximum (and starting) mana.
            attack (int):
                Base attack.
            defense (int):
                Base defense.

        """
        if health <= 0:
            raise ValueError("Maximum health must be positive.")
        if mana < 0 or attack < 0 or defense < 0:
            raise ValueError("Mana, attack and defense must be non-negative.")
        self.owner: Any = owner
        self.max_health: int = health
        self.health: int = health
        self.max_mana: int = mana
        self.mana: int = mana
        self.base_attack: int = attack
        self.current_attack: int = attack
        self.defense: int = defense

    def adjust_health(self, amount: int) -> int:
        """
        Adjusts the current health by the specified amount.

        Args:
            amount (int):
                The amount to adjust health by (positive or negative).

        Returns:
            int:
                The actual amount adjusted (may be less than requested if at
                max or min).

        """
        new_health = max(0, min(self.health + amount, self.max_health))
        actual_adjustment = new_health - self.health
        self.health = new_health
        return actual_adjustment

    def adjust_mana(self, amount: int) -> int:
        """
        Adjusts the current mana by the specified amount.

        Args:
            amount (int):
                The amount to adjust mana by (positive or negative).

        Returns:
            int:
                The actual amount adjusted (may be less than requested if at
                max or min).

        """
        new_mana = max(0, min(self.mana + amount, self.max_mana))
        actual_adjustment = new_mana - self.mana
        self.mana = new_mana
        return actual_adjustment

    def raise_max_health(self, amount: int) -> None:
        """Raises maximum and current health by the same amount."""
        if amount < 0:
            raise ValueError("Maximum health can only be raised.")
        self.max_health += amount
        self.health = min(self.health + amount, self.max_health)

    def raise_max_mana(self, amount: int) -> None:
        """Raises maximum and current mana by the same amount."""
        if amount < 0:
            raise ValueError("Maximum mana can only be raised.")
        self.max_mana += amount
        self.mana = min(self.mana + amount, self.max_mana)

    def raise_attack(self, amount: int) -> None:
        """Raises the base attack; the current attack is reset to it."""
        self.base_attack += amount
        self.current_attack = self.base_attack

    def raise_defense(self, amount: int) -> None:
        if amount < 0:
            raise ValueError("Defense can only be raised.")
        self.defense += amount

    def reset_attack(self) -> None:
        self.current_attack = self.base_attack
