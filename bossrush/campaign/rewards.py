"""
Rewards module for the game.

Applies the permanent upgrade a player picks after clearing a stage.
"""

from bossrush.core.constants import (
    UPGRADE_ATTACK,
    UPGRADE_DEFENSE,
    UPGRADE_HEAL,
    UPGRADE_MANA,
    Upgrade,
)
from bossrush.core.logging import log_debug
from bossrush.units.main import Unit


def apply_upgrade(unit: Unit, upgrade: Upgrade) -> None:
    """
    Applies a stage-clear upgrade to the unit.

    Args:
        unit (Unit): The player's hero.
        upgrade (Upgrade): The chosen upgrade.

    """
    log_debug(f"Applying upgrade {upgrade.name} to {unit.name}")
    if upgrade == Upgrade.HEAL:
        unit.heal(UPGRADE_HEAL)
    elif upgrade == Upgrade.RESTORE_MANA:
        unit.restore_mana(UPGRADE_MANA)
    elif upgrade == Upgrade.ATTACK:
        unit.increase_attack(UPGRADE_ATTACK)
    elif upgrade == Upgrade.DEFENSE:
        unit.increase_defense(UPGRADE_DEFENSE)
