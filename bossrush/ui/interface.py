"""
Player interface contract for the game.

The engine never reads input or prints on its own: every decision point is a
call on a PlayerInterface, which answers with a validated integer, and every
piece of narration is handed to it as plain strings.
"""

from typing import Any


class PlayerInterface:
    """
    Base class for the front-ends driving a campaign.

    Input methods return integers from a small enumerated range; the engine
    converts them to enums and rejects anything outside the range with a
    ValueError. Output methods render what the engine hands them.
    """

    # === Decisions ===

    def choose_class(self, templates: list[Any]) -> int:
        """Returns the chosen class, 1 to 3, in the order of `templates`."""
        raise NotImplementedError

    def choose_coin_side(self) -> int:
        """Returns the coin call, 1 for heads or 2 for tails."""
        raise NotImplementedError

    def choose_action(self, player: Any, boss: Any) -> int:
        """Returns the battle action: 1 attack, 2 skills, 3 inventory, 4 pass."""
        raise NotImplementedError

    def choose_skill(self, player: Any) -> int:
        """Returns the skill slot, 1 to 3."""
        raise NotImplementedError

    def choose_potion(self, player: Any) -> int:
        """Returns the 1-based index of the potion to drink, or 0 to cancel."""
        raise NotImplementedError

    def choose_upgrade(self, player: Any) -> int:
        """Returns the upgrade: 1 heal, 2 restore mana, 3 attack, 4 defense."""
        raise NotImplementedError

    def choose_equipment(self, offer: list[Any]) -> int:
        """Returns the 1-based index of the chosen item in `offer`."""
        raise NotImplementedError

    # === Output ===

    def show_battle_log(self, entries: list[str]) -> None:
        """Renders the narration produced since the last call."""
        raise NotImplementedError

    def show_battle_status(self, stage: int, player: Any, boss: Any) -> None:
        """Renders both combatants before a player decision."""
        raise NotImplementedError

    def show_rewards(self, stage: int, potions: list[Any]) -> None:
        """Renders the potions dropped by a defeated boss."""
        raise NotImplementedError

    def show_result(self, result: Any, player: Any) -> None:
        """Renders the end of the campaign."""
        raise NotImplementedError
