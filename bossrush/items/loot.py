"""
Loot module for the game.

Draws the rewards handed out after a boss is defeated.
"""

from collections.abc import Sequence

from bossrush.core.constants import (
    EQUIPMENT_OFFER_SIZE,
    MAX_POTION_DROP,
    MIN_POTION_DROP,
)
from bossrush.core.utils import RandomSource

from .equipment import Equipment
from .potion import Potion


def generate_equipment_offer(
    rng: RandomSource,
    catalog: Sequence[Equipment],
    count: int = EQUIPMENT_OFFER_SIZE,
) -> list[Equipment]:
    """
    Draws distinct equipment items from the catalog, without replacement.

    Args:
        rng (RandomSource): The random source.
        catalog (Sequence[Equipment]): Every equipment item that can drop.
        count (int): How many items to offer.

    Returns:
        list[Equipment]: The offered items, all different.

    Raises:
        ValueError: If the catalog holds fewer than `count` items.

    """
    if len(catalog) < count:
        raise ValueError(
            f"Cannot offer {count} items from a catalog of {len(catalog)}."
        )
    return rng.sample(catalog, count)


def generate_potion_drop(rng: RandomSource, potions: Sequence[Potion]) -> list[Potion]:
    """
    Draws between 1 and 3 potions, each picked uniformly from `potions`.

    Args:
        rng (RandomSource): The random source.
        potions (Sequence[Potion]): The potion kinds that can drop.

    Returns:
        list[Potion]: The dropped potions.

    """
    if not potions:
        raise ValueError("Cannot drop potions from an empty catalog.")
    amount = rng.randint(MIN_POTION_DROP, MAX_POTION_DROP)
    return [rng.choice(potions) for _ in range(amount)]
