"""
Boss decision module for the game.

Bosses do not plan: each turn they pick one of their three skills or a basic
attack with the same probability.
"""

from bossrush.core.constants import BossMove
from bossrush.core.utils import RandomSource

# Moves a boss picks from, each with probability 1/4.
BOSS_MOVES: tuple[BossMove, ...] = (
    BossMove.SKILL_1,
    BossMove.SKILL_2,
    BossMove.SKILL_3,
    BossMove.ATTACK,
)


def choose_boss_move(rng: RandomSource) -> BossMove:
    """
    Picks the boss move for this turn.

    Args:
        rng (RandomSource): The random source of the battle.

    Returns:
        BossMove: The chosen move.

    """
    return rng.choice(BOSS_MOVES)
