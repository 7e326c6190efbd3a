"""
Unit template module for the game.

Defines the static data a unit is built from: the class templates of the
playable classes and of the bosses, and the boss roster entries.
"""

from typing import Any

from pydantic import BaseModel, Field

from bossrush.actions.skill import Skill
from bossrush.core.constants import UnitClass


class ClassTemplate(BaseModel):
    """
    Base stats and skills of a unit class.
    """

    unit_class: UnitClass = Field(
        description="The class this template describes.",
    )
    description: str = Field(
        "",
        description="Short summary shown in the class selection menu.",
    )
    health: int = Field(
        description="Starting maximum health.",
        gt=0,
    )
    mana: int = Field(
        description="Starting maximum mana.",
        ge=0,
    )
    attack: int = Field(
        description="Starting attack.",
        ge=0,
    )
    defense: int = Field(
        default=0,
        description="Starting defense.",
        ge=0,
    )
    skills: list[Skill] = Field(
        description="The three skills of the class, in menu order.",
    )

    def model_post_init(self, _: Any) -> None:
        if len(self.skills) != 3:
            raise ValueError(
                f"Class {self.unit_class} must define exactly 3 skills, "
                f"got {len(self.skills)}."
            )


class BossTemplate(BaseModel):
    """
    One entry of the boss roster: a name and the names of its three skills.

    The skills themselves follow the BOSS class template; only their names
    change from boss to boss.
    """

    name: str = Field(
        description="The name of the boss.",
    )
    skill_names: list[str] = Field(
        description="Names of the three boss skills, in slot order.",
    )

    def model_post_init(self, _: Any) -> None:
        if not self.name:
            raise ValueError("Boss name must not be empty.")
        if len(self.skill_names) != 3:
            raise ValueError(f"Boss {self.name} must name exactly 3 skills.")
