"""
Unit display module for the game.

Provides the status lines shown by the console shell: health and mana bars,
attack, defense and the active status effects of a unit.
"""

from typing import Any

from rich.markup import escape

from bossrush.core.utils import make_bar


class UnitDisplay:
    """
    Handles display and formatting for Unit objects.

    Attributes:
        owner (Any):
            The Unit instance that this display is associated with.

    """

    def __init__(self, owner: Any) -> None:
        self.owner = owner

    def get_status_line(
        self,
        show_numbers: bool = True,
        show_bars: bool = False,
    ) -> str:
        """
        Get a formatted status line for the unit.

        Args:
            show_numbers (bool): Whether to show numerical values for HP and MP. Defaults to True.
            show_bars (bool): Whether to show bar representations for HP and MP. Defaults to False.

        Returns:
            str: A rich-markup string with the unit's name, vitals and statuses.

        """
        owner = self.owner
        name_width = min(max(len(owner.name), 8), 16)
        name_style = "bold red" if owner.is_boss else "bold"
        status = f"{owner.unit_class.emoji} [{name_style}]{escape(owner.name):<{name_width}}[/] "

        hp_bar = (
            make_bar(owner.health, owner.max_health, color="green", length=8)
            if show_bars
            else ""
        )
        mp_bar = (
            make_bar(owner.mana, owner.max_mana, color="blue", length=8)
            if show_bars
            else ""
        )
        if show_numbers or not show_bars:
            status += f"| [green]HP:{owner.health:>3}/{owner.max_health}[/]{hp_bar} "
            status += f"| [blue]MP:{owner.mana:>3}/{owner.max_mana}[/]{mp_bar} "
        else:
            status += f"| [green]HP:[/]{hp_bar} | [blue]MP:[/]{mp_bar} "

        status += f"| [red]ATK:{owner.current_attack:>3}[/] "
        status += f"| [yellow]DEF:{owner.defense:>2}[/] "

        effects = self.get_effects_summary()
        if effects:
            status += f"| {effects}"
        return status

    def get_effects_summary(self) -> str:
        """Returns the active statuses as `Name(turns)` entries, or an empty string."""
        return " ".join(
            f"{kind.colored_name}({remaining})"
            for kind, remaining in self.owner.effects
        )

    def get_inventory_lines(self) -> list[str]:
        """Returns one rich-markup line per acquired equipment, for the status screen."""
        return [
            f"{item.slot.emoji} {escape(item.name)} {escape(item.bonus_summary)}"
            for item in self.owner.inventory.equipment
        ]
