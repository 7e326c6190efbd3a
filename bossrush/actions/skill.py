"""
Skill module for the game.

Defines the Skill model. Every class skill (and every boss skill) has the same
shape: a mana cost plus any combination of damage, a status applied to the
target, a status applied to the caster, life drain and a flat self-heal.
"""

from typing import Any

from pydantic import BaseModel, Field

from bossrush.core.constants import StatusKind
from bossrush.core.logging import log_debug


class Skill(BaseModel):
    """
    A mana-costing action a unit can take instead of a basic attack.

    Damage skills deal `current_attack + damage_bonus` per hit through the
    target's damage pipeline. Status fields apply a timed entry to the target
    or to the caster.
    """

    name: str = Field(
        description="The name of the skill.",
    )
    description: str = Field(
        "",
        description="A brief description of the skill.",
    )
    cost: int = Field(
        description="Mana spent when the skill is used.",
        ge=0,
    )
    verb: str = Field(
        default="uses",
        description="Verb used in the narration, e.g. 'casts' or 'shoots'.",
    )
    damage_bonus: int | None = Field(
        default=None,
        description="Damage added to the caster's attack, None for no damage.",
    )
    hits: int = Field(
        default=1,
        description="Number of separate hits dealt.",
        ge=1,
    )
    target_status: StatusKind | None = Field(
        default=None,
        description="Status applied to the target.",
    )
    target_status_turns: int = Field(
        default=0,
        description="Duration of the target status.",
        ge=0,
    )
    self_status: StatusKind | None = Field(
        default=None,
        description="Status applied to the caster.",
    )
    self_status_turns: int = Field(
        default=0,
        description="Duration of the caster status.",
        ge=0,
    )
    drain: bool = Field(
        default=False,
        description="Whether the caster heals half of the damage dealt.",
    )
    self_heal: int = Field(
        default=0,
        description="Flat amount healed by the caster.",
        ge=0,
    )

    def model_post_init(self, _: Any) -> None:
        """Validates that status fields come with a positive duration."""
        if not self.name:
            raise ValueError("Skill name must not be empty.")
        for status, turns in (
            (self.target_status, self.target_status_turns),
            (self.self_status, self.self_status_turns),
        ):
            if status == StatusKind.NONE:
                raise ValueError(f"Skill '{self.name}' cannot apply the NONE status.")
            if status is not None and turns <= 0:
                raise ValueError(
                    f"Skill '{self.name}' applies {status} without a positive duration."
                )
        if self.drain and self.damage_bonus is None:
            raise ValueError(f"Skill '{self.name}' drains life but deals no damage.")

    @property
    def deals_damage(self) -> bool:
        return self.damage_bonus is not None

    def execute(self, actor: Any, target: Any) -> bool:
        """
        Uses the skill.

        Args:
            actor (Unit):
                The unit using the skill.
            target (Unit):
                The opposing unit.

        Returns:
            bool:
                False if the actor could not pay the mana cost, in which case
                nothing else happened.

        """
        if not actor.spend_mana(self.cost):
            actor.add_to_battle_log(f"Not enough MP for {self.name}!")
            return False

        log_debug(
            f"{actor.name} uses {self.name}",
            {"actor": actor.name, "target": target.name, "cost": self.cost},
        )

        target_prev_health = target.health
        target_prev_attack = target.current_attack
        actor_prev_health = actor.health
        actor_prev_attack = actor.current_attack

        damage = 0
        if self.deals_damage:
            damage = actor.current_attack + (self.damage_bonus or 0)
            message = f"{actor.name} {self.verb} {self.name} on {target.name} for {damage} damage"
            if self.hits > 1:
                message += f" x{self.hits}"
            actor.add_to_battle_log(message + "!")
            for _ in range(self.hits):
                # A dead target takes no damage beyond the killing blow.
                if target.is_dead():
                    break
                target.take_damage(damage)
        elif self.target_status is not None:
            actor.add_to_battle_log(f"{actor.name} {self.verb} {self.name} on {target.name}!")
        else:
            actor.add_to_battle_log(f"{actor.name} {self.verb} {self.name}!")

        if self.target_status is not None and target.is_alive():
            target.add_status(self.target_status, self.target_status_turns, actor.name)
        if self.self_status is not None:
            actor.add_status(self.self_status, self.self_status_turns, actor.name)
        if self.drain:
            actor.heal(damage // 2)
        if self.self_heal > 0:
            actor.heal(self.self_heal)

        # Before/after snapshots.
        if self.deals_damage:
            actor.add_to_battle_log(
                f"{target.name}'s HP: {target_prev_health} -> "
                f"{target.health}/{target.max_health}"
            )
        if self.target_status is not None and self.target_status.is_attack_modifier:
            actor.add_to_battle_log(
                f"{target.name}'s ATK: {target_prev_attack} -> {target.current_attack}"
            )
        if self.self_status is not None and self.self_status.is_attack_modifier:
            actor.add_to_battle_log(
                f"{actor.name}'s ATK: {actor_prev_attack} -> {actor.current_attack}"
            )
        if self.drain or self.self_heal > 0:
            actor.add_to_battle_log(
                f"{actor.name}'s HP: {actor_prev_health} -> "
                f"{actor.health}/{actor.max_health}"
            )
        return True

    def __str__(self) -> str:
        return f"{self.name} (Cost: {self.cost} MP)"
