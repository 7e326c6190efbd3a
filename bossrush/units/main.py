"""
Unit management module for the game.

Defines the Unit class, the combatant shared by the playable classes and the
bosses, and the factory functions that build units from their templates.
"""

from bossrush.actions.skill import Skill
from bossrush.core.constants import (
    BOSS_ATTACK_PER_STAGE,
    BOSS_DEFENSE_PER_STAGE,
    BOSS_HEALTH_PER_STAGE,
    StatusKind,
    UnitClass,
)
from bossrush.core.logging import log_debug
from bossrush.core.utils import BattleLog
from bossrush.items.equipment import Equipment
from bossrush.items.potion import Potion

from .unit_display import UnitDisplay
from .unit_effects import UnitEffects
from .unit_inventory import UnitInventory
from .unit_stats import UnitStats
from .unit_template import BossTemplate, ClassTemplate


class Unit:
    """
    Represents a combatant: the player's hero or a boss.

    The variants (Warrior, Archer, Mage, Boss) only differ in their base stats
    and in the three skills they carry, so a unit is a `UnitClass` tag plus a
    list of skills rather than a subclass per variant.

    Attributes:
        name (str):
            The name of the unit.
        unit_class (UnitClass):
            The class tag of the unit.
        skills (list[Skill]):
            The three skills of the unit, in slot order.
        battle_log (BattleLog):
            Narration of what happened to the unit. Bound to a shared log
            while in battle.

    """

    # === Static properties ===

    unit_class: UnitClass
    skills: list[Skill]
    battle_log: BattleLog

    # === Management Modules ===

    stats: UnitStats
    effects: UnitEffects
    inventory: UnitInventory
    display: UnitDisplay

    def __init__(
        self,
        name: str,
        unit_class: UnitClass,
        health: int,
        mana: int,
        attack: int,
        defense: int,
        skills: list[Skill],
    ) -> None:
        if len(skills) != 3:
            raise ValueError(f"A unit needs exactly 3 skills, got {len(skills)}.")
        self._name = name
        self.unit_class = unit_class
        self.skills = list(skills)
        self.battle_log = BattleLog()

        # Initialize modules.
        self.stats = UnitStats(
            owner=self, health=health, mana=mana, attack=attack, defense=defense
        )
        self.effects = UnitEffects(owner=self)
        self.inventory = UnitInventory(owner=self)
        self.display = UnitDisplay(owner=self)

    # ============================================================================
    # DELEGATED STAT PROPERTIES
    # ============================================================================

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_boss(self) -> bool:
        return self.unit_class == UnitClass.BOSS

    @property
    def health(self) -> int:
        return self.stats.health

    @property
    def max_health(self) -> int:
        return self.stats.max_health

    @property
    def mana(self) -> int:
        return self.stats.mana

    @property
    def max_mana(self) -> int:
        return self.stats.max_mana

    @property
    def base_attack(self) -> int:
        return self.stats.base_attack

    @property
    def current_attack(self) -> int:
        return self.stats.current_attack

    @property
    def defense(self) -> int:
        return self.stats.defense

    def is_alive(self) -> bool:
        return self.stats.health > 0

    def is_dead(self) -> bool:
        return self.stats.health <= 0

    def add_to_battle_log(self, message: str) -> None:
        self.battle_log.add(message)

    def clear_battle_log(self) -> None:
        self.battle_log.clear()

    # ============================================================================
    # DAMAGE, HEALING AND UPGRADES
    # ============================================================================

    def take_damage(self, amount: int, source: str = "", show_block: bool = True) -> int:
        """
        Applies damage to the unit, reduced by its defense.

        Defense reduces damage but never below 1 point.

        Args:
            amount:
                The raw damage.
            source:
                What dealt the damage, shown in the narration (e.g. "Poison").
            show_block:
                Whether to narrate how much damage the defense absorbed.

        Returns:
            int:
                The damage actually dealt, 0 if the unit was already dead.

        """
        if self.is_dead():
            log_debug(f"{self.name} is already dead, ignoring {amount} damage")
            return 0

        actual = max(1, amount - self.defense)
        prev_health = self.health
        self.stats.adjust_health(-actual)

        message = f"{self.name} took {actual} damage"
        if source:
            message += f" from {source}"
        message += f"! [{prev_health} -> {self.health}/{self.max_health} HP]"
        self.add_to_battle_log(message)

        if show_block and self.defense > 0 and actual < amount:
            self.add_to_battle_log(f"{self.name} blocked {amount - actual} damage!")
        return actual

    def heal(self, amount: int) -> int:
        """
        Increases health by the given amount, up to the maximum.

        Returns:
            int:
                The amount actually healed.

        """
        healed = self.stats.adjust_health(max(0, amount))
        self.add_to_battle_log(
            f"{self.name} healed {healed} HP! ({self.health}/{self.max_health})"
        )
        return healed

    def restore_mana(self, amount: int) -> int:
        """
        Increases mana by the given amount, up to the maximum.

        Returns:
            int:
                The amount actually restored.

        """
        restored = self.stats.adjust_mana(max(0, amount))
        self.add_to_battle_log(
            f"{self.name} restored {restored} MP! ({self.mana}/{self.max_mana})"
        )
        return restored

    def spend_mana(self, amount: int) -> bool:
        """
        Spends mana if the unit has enough of it.

        Returns:
            bool:
                True if the mana was spent, False if there was not enough.

        """
        if self.stats.mana < amount:
            return False
        self.stats.adjust_mana(-amount)
        return True

    def increase_max_health(self, amount: int) -> None:
        self.stats.raise_max_health(amount)
        self.add_to_battle_log(f"{self.name}'s max HP increased by {amount}!")

    def increase_max_mana(self, amount: int) -> None:
        self.stats.raise_max_mana(amount)
        self.add_to_battle_log(f"{self.name}'s max MP increased by {amount}!")

    def increase_attack(self, amount: int) -> None:
        self.stats.raise_attack(amount)
        self.add_to_battle_log(f"{self.name}'s attack increased by {amount}!")

    def increase_defense(self, amount: int) -> None:
        self.stats.raise_defense(amount)
        self.add_to_battle_log(f"{self.name}'s defense increased by {amount}!")

    # ============================================================================
    # STATUS EFFECTS
    # ============================================================================

    def add_status(self, kind: StatusKind, duration: int, source: str) -> bool:
        return self.effects.add_status(kind, duration, source)

    def has_status(self, kind: StatusKind) -> bool:
        return self.effects.has_status(kind)

    def clear_status(self, kind: StatusKind) -> bool:
        return self.effects.clear_status(kind)

    def process_status_effects(self) -> None:
        """Ticks every active status once. Called after each of the unit's turns."""
        self.effects.process()

    # ============================================================================
    # INVENTORY
    # ============================================================================

    def add_equipment(self, item: Equipment) -> None:
        self.inventory.add_equipment(item)

    def add_potion(self, potion: Potion) -> None:
        self.inventory.add_potion(potion)

    def use_potion(self, index: int) -> bool:
        return self.inventory.use_potion(index)

    @property
    def potions(self) -> list[Potion]:
        return self.inventory.potions

    # ============================================================================
    # COMBAT ACTIONS
    # ============================================================================

    def attack(self, target: "Unit") -> None:
        """
        Performs a basic attack dealing the current attack as damage.

        Args:
            target (Unit):
                The unit being attacked.

        """
        prev_health = target.health
        self.add_to_battle_log(
            f"{self.name} attacks {target.name} for {self.current_attack} damage!"
        )
        target.take_damage(self.current_attack)
        self.add_to_battle_log(
            f"{target.name}'s HP: {prev_health} -> {target.health}/{target.max_health}"
        )

    def get_skill(self, slot: int) -> Skill:
        """
        Returns the skill in the given slot.

        Args:
            slot (int):
                The skill slot, 1 to 3.

        Raises:
            ValueError:
                If the slot does not exist.

        """
        if slot not in (1, 2, 3):
            raise ValueError(f"Skill slot must be 1, 2 or 3, got {slot}.")
        return self.skills[slot - 1]

    def skill_name(self, slot: int) -> str:
        return self.get_skill(slot).name

    def skill_cost(self, slot: int) -> int:
        return self.get_skill(slot).cost

    def can_use_skill(self, slot: int) -> bool:
        return self.mana >= self.skill_cost(slot)

    def use_skill(self, slot: int, target: "Unit") -> bool:
        """
        Uses the skill in the given slot on the target.

        Args:
            slot (int):
                The skill slot, 1 to 3.
            target (Unit):
                The opposing unit.

        Returns:
            bool:
                False if there was not enough mana; the caller is expected to
                fall back to a basic attack.

        """
        return self.get_skill(slot).execute(self, target)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(name='{self.name}', class={self.unit_class}, "
            f"hp={self.health}/{self.max_health}, mp={self.mana}/{self.max_mana})"
        )


def create_player(name: str, template: ClassTemplate) -> Unit:
    """
    Builds the player's hero from a class template.

    Args:
        name (str):
            The hero's name.
        template (ClassTemplate):
            The class chosen by the player.

    Returns:
        Unit:
            The new hero, at full health and mana.

    """
    if template.unit_class == UnitClass.BOSS:
        raise ValueError("The player cannot be a boss.")
    return Unit(
        name=name,
        unit_class=template.unit_class,
        health=template.health,
        mana=template.mana,
        attack=template.attack,
        defense=template.defense,
        skills=[skill.model_copy() for skill in template.skills],
    )


def create_boss(stage: int, roster_entry: BossTemplate, template: ClassTemplate) -> Unit:
    """
    Builds the boss of a stage.

    The BOSS template gives the stage 1 stats. Every later stage adds 5
    attack, 20 health and 1 defense, so the default data yields
    attack = 10 + 5*stage, health = 70 + 20*stage, defense = stage - 1.

    Args:
        stage (int):
            The 1-based stage number.
        roster_entry (BossTemplate):
            Name and skill names of the boss.
        template (ClassTemplate):
            The BOSS class template providing the base stats and skill shapes.

    Returns:
        Unit:
            The boss.

    """
    if stage < 1:
        raise ValueError(f"Stage must be at least 1, got {stage}.")
    if template.unit_class != UnitClass.BOSS:
        raise ValueError("Bosses must be built from the BOSS class template.")
    growth = stage - 1
    skills = [
        skill.model_copy(update={"name": skill_name})
        for skill, skill_name in zip(template.skills, roster_entry.skill_names)
    ]
    return Unit(
        name=roster_entry.name,
        unit_class=UnitClass.BOSS,
        health=template.health + BOSS_HEALTH_PER_STAGE * growth,
        mana=template.mana,
        attack=template.attack + BOSS_ATTACK_PER_STAGE * growth,
        defense=template.defense + BOSS_DEFENSE_PER_STAGE * growth,
        skills=skills,
    )
