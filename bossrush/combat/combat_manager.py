"""
Combat manager module for the game.

Resolves a single battle between the player's hero and a boss: the coin toss
deciding who acts first, the alternation of turns, stun handling, status
ticks and the end-of-battle checks.
"""

from bossrush.core.constants import (
    BattleAction,
    BattleState,
    CoinSide,
    Side,
    StatusKind,
)
from bossrush.core.logging import log_debug, log_info
from bossrush.core.utils import RandomSource
from bossrush.ui.interface import PlayerInterface
from bossrush.units.main import Unit

from .boss_ai import choose_boss_move


class CombatManager:
    """Manages the flow of one battle, from the coin toss to the last blow.

    The manager owns no game data: it asks the interface for the player's
    decisions, asks the random source for the boss's, and lets the units apply
    the results. Once decided, the turn order holds for every round.

    Attributes:
        player (Unit): The player's hero.
        boss (Unit): The boss of the stage.
        ui (PlayerInterface): Where decisions come from and narration goes.
        rng (RandomSource): The coin and the boss's dice.
        stage (int): The stage being fought, for display.
        state (BattleState): Where the battle stands.
        first_side (Side | None): Who acts first, None until decided.
        round_number (int): Number of rounds started so far.

    """

    def __init__(
        self,
        player: Unit,
        boss: Unit,
        ui: PlayerInterface,
        rng: RandomSource | None = None,
        stage: int = 1,
    ) -> None:
        self.player = player
        self.boss = boss
        self.ui = ui
        self.rng = rng or RandomSource()
        self.stage = stage
        self.state = BattleState.AWAITING_TURN_ORDER
        self.first_side: Side | None = None
        self.round_number = 0

        # Both units narrate into the player's log so the story stays in order.
        self.battle_log = player.battle_log
        self.boss.battle_log = self.battle_log

    def unit_for(self, side: Side) -> Unit:
        return self.player if side == Side.PLAYER else self.boss

    # ============================================================================
    # TURN ORDER
    # ============================================================================

    def decide_turn_order(self) -> Side:
        """
        Decides who acts first with a coin toss. Only the first call tosses.

        The player calls a side; if the coin matches the call, the player acts
        first in every round of this battle, otherwise the boss does.

        Returns:
            Side: The side acting first.

        Raises:
            ValueError: If the interface answers something other than 1 or 2.

        """
        if self.first_side is not None:
            return self.first_side

        call = CoinSide(self.ui.choose_coin_side())
        outcome = self.rng.coin_flip()
        self.battle_log.add(
            f"You called {call.display_name}. The coin shows {outcome.display_name}!"
        )
        if call == outcome:
            self.first_side = Side.PLAYER
            self.battle_log.add(f"{self.player.name} goes first!")
        else:
            self.first_side = Side.BOSS
            self.battle_log.add(f"{self.boss.name} goes first!")
        self.state = BattleState.IN_PROGRESS

        log_info(
            f"Stage {self.stage}: {self.first_side.display_name} acts first",
            {"call": call.name, "coin": outcome.name},
        )
        self.flush_battle_log()
        return self.first_side

    # ============================================================================
    # ROUNDS
    # ============================================================================

    def run(self) -> BattleState:
        """
        Fights the battle to its end.

        Returns:
            BattleState: PLAYER_WON or PLAYER_LOST.

        """
        self.decide_turn_order()
        while not self.state.is_over:
            self.run_round()
        return self.state

    def run_round(self) -> BattleState:
        """
        Plays one round: the first side's turn, then the second side's.

        The battle ends as soon as a turn leaves one of the units dead. If the
        acting side killed its opponent it wins, even if its own status ticks
        killed it too.

        Returns:
            BattleState: The state after the round.

        """
        if self.state.is_over:
            return self.state
        if self.first_side is None:
            self.decide_turn_order()
        assert self.first_side is not None

        self.round_number += 1
        log_debug(f"Round {self.round_number} begins", {"stage": self.stage})

        for side in (self.first_side, self.first_side.opponent):
            self.take_turn(side)
            if self._check_battle_over(side):
                break
        return self.state

    def take_turn(self, side: Side) -> None:
        """
        Resolves the turn of one side: its action, then its status ticks.

        A stunned unit loses the stun and skips its action. Its other statuses
        still tick.
        """
        actor = self.unit_for(side)
        self.battle_log.add(f"=== {actor.name}'s TURN ===")

        if actor.has_status(StatusKind.STUN):
            actor.clear_status(StatusKind.STUN)
            self.battle_log.add(f"{actor.name} is stunned and skips the turn!")
        elif side == Side.PLAYER:
            self.player_action()
        else:
            self.boss_action()

        actor.process_status_effects()
        self.flush_battle_log()

    def _check_battle_over(self, side: Side) -> bool:
        actor = self.unit_for(side)
        other = self.unit_for(side.opponent)
        if other.is_dead():
            winner = side
        elif actor.is_dead():
            winner = side.opponent
        else:
            return False

        if winner == Side.PLAYER:
            self.state = BattleState.PLAYER_WON
            self.battle_log.add(f"{self.player.name} defeated {self.boss.name}!")
        else:
            self.state = BattleState.PLAYER_LOST
            self.battle_log.add(f"{self.player.name} was defeated in stage {self.stage}!")
        log_info(
            f"Stage {self.stage} ended: {self.state}",
            {"rounds": self.round_number},
        )
        self.flush_battle_log()
        return True

    # ============================================================================
    # ACTIONS
    # ============================================================================

    def player_action(self) -> BattleAction:
        """
        Asks the player for an action and resolves it.

        Returns:
            BattleAction: The action that was chosen.

        Raises:
            ValueError: If the interface answers outside of the menu ranges.

        """
        self.ui.show_battle_status(self.stage, self.player, self.boss)
        action = BattleAction(self.ui.choose_action(self.player, self.boss))

        if action == BattleAction.ATTACK:
            self.player.attack(self.boss)
        elif action == BattleAction.SKILL:
            slot = self.ui.choose_skill(self.player)
            if slot not in (1, 2, 3):
                raise ValueError(f"Skill choice must be 1, 2 or 3, got {slot}.")
            if not self.player.use_skill(slot, self.boss):
                self.battle_log.add("Using basic attack instead.")
                self.player.attack(self.boss)
        elif action == BattleAction.INVENTORY:
            self._open_inventory()
        else:
            self.battle_log.add(f"{self.player.name} passes the turn.")
        return action

    def _open_inventory(self) -> None:
        """Lets the player drink a potion. Cancelling still spends the turn."""
        if not self.player.potions:
            equipment = self.player.inventory.equipment
            if equipment:
                self.battle_log.add("Equipment:")
                for item in equipment:
                    self.battle_log.add(f"- {item}")
            self.battle_log.add("You have no potions to use.")
            return
        choice = self.ui.choose_potion(self.player)
        if choice < 0 or choice > len(self.player.potions):
            raise ValueError(
                f"Potion choice must be between 0 and {len(self.player.potions)}, "
                f"got {choice}."
            )
        if choice == 0:
            self.battle_log.add(f"{self.player.name} closes the inventory.")
            return
        self.player.use_potion(choice - 1)

    def boss_action(self) -> None:
        """Picks a random move for the boss and resolves it."""
        move = choose_boss_move(self.rng)
        log_debug(f"{self.boss.name} picked {move}", {"stage": self.stage})

        if move.skill_slot is None:
            self.battle_log.add(f"{self.boss.name} chooses to attack!")
            self.boss.attack(self.player)
        elif not self.boss.use_skill(move.skill_slot, self.player):
            self.boss.attack(self.player)

    def flush_battle_log(self) -> None:
        """Hands the pending narration to the interface and clears it."""
        entries = self.battle_log.drain()
        if entries:
            self.ui.show_battle_log(entries)
