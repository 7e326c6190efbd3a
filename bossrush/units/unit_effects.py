"""
Unit effects module for the game.

Manages the status table of a unit: which status effects are active, how many
turns they have left, and what they do on each tick.
"""

from typing import Any

from bossrush.core.constants import (
    BLEED_DAMAGE,
    POISON_DAMAGE,
    STRENGTH_UP_BONUS,
    WEAKNESS_PENALTY,
    StatusKind,
)
from bossrush.core.logging import log_debug


class UnitEffects:
    """
    Tracks the active status effects of a unit.

    The table maps each active StatusKind to its remaining turns. There is at
    most one entry per kind, and the entries are processed in the order they
    were first applied.

    Attributes:
        _owner (Any):
            The unit that owns this status table.
        statuses (dict[StatusKind, int]):
            Active statuses and their remaining turns.

    """

    _owner: Any
    statuses: dict[StatusKind, int]

    def __init__(self, owner: Any) -> None:
        self._owner = owner
        self.statuses = {}

    # === Status Management ===

    def add_status(self, kind: StatusKind, duration: int, source: str) -> bool:
        """
        Applies a status, overwriting the remaining turns if already active.

        Args:
            kind (StatusKind):
                The status to apply.
            duration (int):
                Number of ticks the status lasts.
            source (str):
                Name of whoever applied the status, used in the narration.

        Returns:
            bool:
                True if the status was applied.

        """
        if kind == StatusKind.NONE or duration <= 0:
            log_debug(
                f"Ignoring status {kind} with duration {duration}",
                {"unit": self._owner.name, "source": source},
            )
            return False
        self.statuses[kind] = duration
        self._owner.add_to_battle_log(
            f"{source} applied {kind.display_name} to {self._owner.name}!"
        )
        log_debug(
            f"{kind.display_name} applied to {self._owner.name}",
            {"duration": duration, "source": source},
        )
        return True

    def has_status(self, kind: StatusKind) -> bool:
        return self.statuses.get(kind, 0) > 0

    def clear_status(self, kind: StatusKind) -> bool:
        """
        Removes a status without ticking it.

        Returns:
            bool:
                True if the status was active.

        """
        if self.statuses.pop(kind, None) is None:
            return False
        if kind.is_attack_modifier:
            self._owner.stats.reset_attack()
        return True

    def get_remaining(self, kind: StatusKind) -> int:
        """Returns the remaining turns of a status, 0 if inactive."""
        return self.statuses.get(kind, 0)

    # === Turn Processing ===

    def process(self) -> None:
        """
        Ticks every active status once.

        Damage-over-time statuses deal their damage through the owner's damage
        pipeline, attack statuses rewrite the current attack. Each entry then
        loses one turn; entries reaching zero are removed, and removing an
        attack status restores the base attack.
        """
        owner = self._owner
        expired: list[StatusKind] = []

        for kind in list(self.statuses):
            if kind == StatusKind.POISON:
                if owner.is_alive():
                    owner.take_damage(POISON_DAMAGE, show_block=False, source="Poison")
            elif kind == StatusKind.BLEED:
                if owner.is_alive():
                    owner.take_damage(BLEED_DAMAGE, show_block=False, source="Bleed")
            elif kind == StatusKind.STRENGTH_UP:
                owner.stats.current_attack = owner.base_attack + STRENGTH_UP_BONUS
            elif kind == StatusKind.WEAKNESS:
                owner.stats.current_attack = max(1, owner.base_attack - WEAKNESS_PENALTY)

            self.statuses[kind] -= 1
            if self.statuses[kind] <= 0:
                expired.append(kind)
                owner.add_to_battle_log(f"{owner.name}'s {kind.display_name} wore off!")

        for kind in expired:
            del self.statuses[kind]
            if kind.is_attack_modifier:
                owner.stats.reset_attack()
            log_debug(f"{kind.display_name} expired on {owner.name}")

    def __iter__(self):
        return iter(self.statuses.items())

    def __len__(self) -> int:
        return len(self.statuses)
