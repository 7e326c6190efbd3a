"""
Campaign module for the game.

Chains the five boss battles of a run and hands out the rewards between them.
"""

from pydantic import BaseModel, Field

from bossrush.combat.combat_manager import CombatManager
from bossrush.core.constants import (
    FINAL_STAGE,
    BattleState,
    CampaignOutcome,
    UnitClass,
    Upgrade,
)
from bossrush.core.content import ContentRepository
from bossrush.core.logging import log_info
from bossrush.core.utils import RandomSource
from bossrush.items.loot import generate_equipment_offer, generate_potion_drop
from bossrush.items.potion import Potion
from bossrush.ui.interface import PlayerInterface
from bossrush.units.main import Unit, create_boss

from .rewards import apply_upgrade


class CampaignResult(BaseModel):
    """
    How a campaign ended.
    """

    outcome: CampaignOutcome = Field(
        description="Whether the player cleared every stage.",
    )
    stages_cleared: int = Field(
        description="Number of bosses defeated.",
        ge=0,
    )
    defeated_at: int | None = Field(
        default=None,
        description="The stage the player fell in, None on a win.",
    )

    @property
    def won(self) -> bool:
        return self.outcome == CampaignOutcome.WON


class Campaign:
    """
    Runs the stages of a campaign in order.

    The player's health, mana and statuses carry over from one stage to the
    next. A defeat ends the campaign at once.

    Attributes:
        player (Unit): The player's hero.
        ui (PlayerInterface): Where decisions come from and narration goes.
        rng (RandomSource): Source of every random draw of the run.
        repo (ContentRepository): The boss roster and the loot catalogs.
        stage (int): The stage being played, 0 before the first one.

    """

    def __init__(
        self,
        player: Unit,
        ui: PlayerInterface,
        rng: RandomSource | None = None,
        repo: ContentRepository | None = None,
    ) -> None:
        self.player = player
        self.ui = ui
        self.rng = rng or RandomSource()
        self.repo = repo or ContentRepository()
        self.stage = 0

    def create_boss(self, stage: int) -> Unit:
        """Builds the boss guarding the given stage."""
        return create_boss(
            stage,
            self.repo.get_boss(stage),
            self.repo.get_class_template(UnitClass.BOSS),
        )

    def run_stage(self, stage: int) -> BattleState:
        """
        Fights the boss of a stage, and grants the rewards on a win.

        Returns:
            BattleState: PLAYER_WON or PLAYER_LOST.

        """
        self.stage = stage
        boss = self.create_boss(stage)
        log_info(f"Stage {stage} begins against {boss.name}")
        self.player.add_to_battle_log(f"=== STAGE {stage}: {boss.name} ===")

        battle = CombatManager(self.player, boss, self.ui, self.rng, stage=stage)
        state = battle.run()
        if state == BattleState.PLAYER_WON:
            self.grant_rewards(stage)
        return state

    def grant_rewards(self, stage: int) -> None:
        """
        Hands out the rewards of a cleared stage.

        Every stage drops potions. Every stage but the last one also offers a
        permanent upgrade and a pick among three equipment items.

        Raises:
            ValueError: If the interface answers outside of the menu ranges.

        """
        potions: list[Potion] = generate_potion_drop(self.rng, self.repo.potion_catalog)
        for potion in potions:
            self.player.add_potion(potion)
        self.ui.show_rewards(stage, potions)

        if stage >= FINAL_STAGE:
            return

        upgrade = Upgrade(self.ui.choose_upgrade(self.player))
        apply_upgrade(self.player, upgrade)

        offer = generate_equipment_offer(self.rng, self.repo.equipment_catalog)
        choice = self.ui.choose_equipment(offer)
        if choice < 1 or choice > len(offer):
            raise ValueError(
                f"Equipment choice must be between 1 and {len(offer)}, got {choice}."
            )
        self.player.add_equipment(offer[choice - 1])

        entries = self.player.battle_log.drain()
        if entries:
            self.ui.show_battle_log(entries)

    def run(self) -> CampaignResult:
        """
        Plays every stage until the player falls or the last boss does.

        Returns:
            CampaignResult: The outcome of the run.

        """
        result = CampaignResult(outcome=CampaignOutcome.WON, stages_cleared=FINAL_STAGE)
        for stage in range(1, FINAL_STAGE + 1):
            if self.run_stage(stage) == BattleState.PLAYER_LOST:
                result = CampaignResult(
                    outcome=CampaignOutcome.LOST,
                    stages_cleared=stage - 1,
                    defeated_at=stage,
                )
                break

        log_info(
            f"Campaign over: {result.outcome}",
            {"stages_cleared": result.stages_cleared, "seed": self.rng.seed},
        )
        self.ui.show_result(result, self.player)
        return result
