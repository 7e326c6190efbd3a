"""
Constants and enumerations for the game.

Defines tuning constants and the enumerations for unit classes, status
effects, battle actions, boss moves, upgrades, and battle/campaign outcomes
used throughout the engine.
"""

from enum import Enum, IntEnum

# Damage dealt by damage-over-time effects on each tick.
POISON_DAMAGE = 5
BLEED_DAMAGE = 3

# Attack adjustments applied while buffs/debuffs are ticking.
STRENGTH_UP_BONUS = 10
WEAKNESS_PENALTY = 5

# Boss growth per stage past the first. Stage 1 stats come from the BOSS class
# template: attack = base + 5(s-1), health = base + 20(s-1), defense = base + s - 1.
BOSS_ATTACK_PER_STAGE = 5
BOSS_HEALTH_PER_STAGE = 20
BOSS_DEFENSE_PER_STAGE = 1

# Campaign layout.
FINAL_STAGE = 5
MIN_POTION_DROP = 1
MAX_POTION_DROP = 3
EQUIPMENT_OFFER_SIZE = 3

# Stage-clear upgrades.
UPGRADE_HEAL = 30
UPGRADE_MANA = 20
UPGRADE_ATTACK = 5
UPGRADE_DEFENSE = 3


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.replace("_", " ").title()


class UnitClass(NiceEnum):
    """Defines the class of a combatant."""

    WARRIOR = "WARRIOR"
    ARCHER = "ARCHER"
    MAGE = "MAGE"
    BOSS = "BOSS"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this unit class."""
        return {
            UnitClass.WARRIOR: "🛡️",
            UnitClass.ARCHER: "🏹",
            UnitClass.MAGE: "🔮",
            UnitClass.BOSS: "👹",
        }.get(self, "❔")

    @property
    def color(self) -> str:
        """Returns the color string associated with this unit class."""
        return {
            UnitClass.WARRIOR: "bold yellow",
            UnitClass.ARCHER: "bold green",
            UnitClass.MAGE: "bold blue",
            UnitClass.BOSS: "bold red",
        }.get(self, "dim white")

    @property
    def colored_name(self) -> str:
        return self.colorize(self.display_name)

    def colorize(self, message: str) -> str:
        """Applies unit class color formatting to a message."""
        return f"[{self.color}]{message}[/]"


# Order of the class selection menu (choices 1-3).
PLAYABLE_CLASSES = (UnitClass.WARRIOR, UnitClass.ARCHER, UnitClass.MAGE)


class StatusKind(NiceEnum):
    """Defines the status effects a unit can suffer or enjoy."""

    NONE = "NONE"
    POISON = "POISON"
    BLEED = "BLEED"
    STUN = "STUN"
    STRENGTH_UP = "STRENGTH_UP"
    WEAKNESS = "WEAKNESS"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this status."""
        return {
            StatusKind.POISON: "☠️",
            StatusKind.BLEED: "🩸",
            StatusKind.STUN: "💫",
            StatusKind.STRENGTH_UP: "💪",
            StatusKind.WEAKNESS: "😩",
        }.get(self, "❔")

    @property
    def color(self) -> str:
        """Returns the color string associated with this status."""
        return {
            StatusKind.POISON: "bold green",
            StatusKind.BLEED: "bold red",
            StatusKind.STUN: "bold magenta",
            StatusKind.STRENGTH_UP: "bold yellow",
            StatusKind.WEAKNESS: "dim white",
        }.get(self, "dim white")

    @property
    def colored_name(self) -> str:
        return self.colorize(self.display_name)

    def colorize(self, message: str) -> str:
        """Applies status color formatting to a message."""
        return f"[{self.color}]{message}[/]"

    @property
    def is_attack_modifier(self) -> bool:
        """True for the statuses that rewrite the current attack."""
        return self in (StatusKind.STRENGTH_UP, StatusKind.WEAKNESS)


class EquipmentSlot(NiceEnum):
    """Defines the kind of equipment an item is."""

    WEAPON = "WEAPON"
    ARMOR = "ARMOR"
    ACCESSORY = "ACCESSORY"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this slot."""
        return {
            EquipmentSlot.WEAPON: "🗡️",
            EquipmentSlot.ARMOR: ":shield:",
            EquipmentSlot.ACCESSORY: "💍",
        }.get(self, "❔")


class PotionKind(NiceEnum):
    """Defines what a potion restores."""

    HEALTH = "HEALTH"
    MANA = "MANA"

    @property
    def short_name(self) -> str:
        return {PotionKind.HEALTH: "HP", PotionKind.MANA: "MP"}[self]


class CoinSide(IntEnum):
    """The two faces of the turn-order coin, numbered as in the menu."""

    HEADS = 1
    TAILS = 2

    @property
    def display_name(self) -> str:
        return self.name.title()


class BattleAction(IntEnum):
    """Actions offered to the player on each turn, numbered as in the menu."""

    ATTACK = 1
    SKILL = 2
    INVENTORY = 3
    PASS = 4

    @property
    def display_name(self) -> str:
        return {
            BattleAction.ATTACK: "Attack",
            BattleAction.SKILL: "Use Skills",
            BattleAction.INVENTORY: "Inventory",
            BattleAction.PASS: "Pass",
        }[self]


class BossMove(NiceEnum):
    """Moves a boss picks from, each with the same probability."""

    SKILL_1 = "SKILL_1"
    SKILL_2 = "SKILL_2"
    SKILL_3 = "SKILL_3"
    ATTACK = "ATTACK"

    @property
    def skill_slot(self) -> int | None:
        """The skill slot used by this move, None for a basic attack."""
        return {
            BossMove.SKILL_1: 1,
            BossMove.SKILL_2: 2,
            BossMove.SKILL_3: 3,
        }.get(self)


class Upgrade(IntEnum):
    """Permanent upgrades offered after a stage, numbered as in the menu."""

    HEAL = 1
    RESTORE_MANA = 2
    ATTACK = 3
    DEFENSE = 4

    @property
    def description(self) -> str:
        return {
            Upgrade.HEAL: f"Heal (+{UPGRADE_HEAL} HP)",
            Upgrade.RESTORE_MANA: f"Restore Mana (+{UPGRADE_MANA} MP)",
            Upgrade.ATTACK: f"Increase Attack (+{UPGRADE_ATTACK} ATK)",
            Upgrade.DEFENSE: f"Increase Defense (+{UPGRADE_DEFENSE} DEF)",
        }[self]


class Side(NiceEnum):
    """The two sides of a battle."""

    PLAYER = "PLAYER"
    BOSS = "BOSS"

    @property
    def opponent(self) -> "Side":
        return Side.BOSS if self == Side.PLAYER else Side.PLAYER


class BattleState(NiceEnum):
    """Lifecycle of a single battle."""

    AWAITING_TURN_ORDER = "AWAITING_TURN_ORDER"
    IN_PROGRESS = "IN_PROGRESS"
    PLAYER_WON = "PLAYER_WON"
    PLAYER_LOST = "PLAYER_LOST"

    @property
    def is_over(self) -> bool:
        return self in (BattleState.PLAYER_WON, BattleState.PLAYER_LOST)


class CampaignOutcome(NiceEnum):
    """Final outcome of a campaign."""

    WON = "WON"
    LOST = "LOST"
