"""
Core system module for the game.

This module contains the fundamental components shared by the engine: game
constants and enumerations, content loading, logging, console helpers, the
random source and the battle log.
"""

from .constants import (
    BattleAction,
    BattleState,
    BossMove,
    CampaignOutcome,
    CoinSide,
    EquipmentSlot,
    PotionKind,
    Side,
    StatusKind,
    UnitClass,
    Upgrade,
)
from .utils import (
    BattleLog,
    RandomSource,
    ccapture,
    cprint,
    crule,
    make_bar,
)

__all__ = [
    # Import from constants.py
    "BattleAction",
    "BattleState",
    "BossMove",
    "CampaignOutcome",
    "CoinSide",
    "EquipmentSlot",
    "PotionKind",
    "Side",
    "StatusKind",
    "UnitClass",
    "Upgrade",
    # Import from utils.py
    "BattleLog",
    "RandomSource",
    "ccapture",
    "cprint",
    "crule",
    "make_bar",
]
