"""
User interface module for the game.

Provides the console front-end: rich tables for the menus and the battle
screen, and a prompt_toolkit session for the answers.
"""

from typing import Any

from prompt_toolkit import ANSI, PromptSession
from rich.markup import escape
from rich.table import Table

from bossrush.core.constants import (
    BattleAction,
    CampaignOutcome,
    CoinSide,
    Upgrade,
)
from bossrush.core.utils import ccapture, cprint, crule

from .interface import PlayerInterface

# Narration keywords and the style they are shown with.
_LOG_STYLES: list[tuple[str, str]] = [
    ("===", "bold cyan"),
    ("defeated", "bold magenta"),
    ("stunned", "bold magenta"),
    ("Not enough MP", "bold red"),
    ("wore off", "dim white"),
    ("applied", "yellow"),
    ("healed", "green"),
    ("restored", "blue"),
    ("blocked", "cyan"),
    ("took", "red"),
]


class ConsoleInterface(PlayerInterface):
    """
    Command-line interface for the player.

    Renders menus as rich tables and keeps asking through prompt_toolkit until
    the answer is in range, so the engine only ever receives valid choices.
    """

    def __init__(self, session: PromptSession | None = None) -> None:
        """Initialize the interface, with a session that keeps the history."""
        self._session = session

    @property
    def session(self) -> PromptSession:
        if self._session is None:
            self._session = PromptSession(erase_when_done=True)
        return self._session

    # ============================================================================
    # GENERIC PROMPTS
    # ============================================================================

    def ask_number(self, prompt: str, low: int, high: int) -> int:
        """
        Keeps prompting until the user types an integer in [low, high].

        Args:
            prompt (str): Text shown before the cursor, may include a table.
            low (int): Smallest accepted answer.
            high (int): Largest accepted answer.

        Returns:
            int: The accepted answer.

        """
        while True:
            answer = self.session.prompt(ANSI(prompt))
            value = self.get_number_choice(answer)
            if low <= value <= high:
                return value
            cprint(f"[red]Please enter a number between {low} and {high}.[/]")

    def ask_text(self, prompt: str) -> str:
        """Keeps prompting until the user types something."""
        while True:
            answer = self.session.prompt(ANSI(prompt)).strip()
            if answer:
                return answer

    def choose_from_menu(self, title: str, options: list[str], question: str) -> int:
        """Shows a numbered menu and returns the 1-based choice."""
        table = Table(title=title, pad_edge=False)
        table.add_column("#", style="cyan", no_wrap=True)
        table.add_column("Option", style="bold")
        for i, option in enumerate(options, 1):
            table.add_row(str(i), option)
        prompt = "\n" + ccapture(table) + f"\n{question} > "
        return self.ask_number(prompt, 1, len(options))

    # ============================================================================
    # DECISIONS
    # ============================================================================

    def choose_class(self, templates: list[Any]) -> int:
        table = Table(title="Choose your class", pad_edge=False)
        table.add_column("#", style="cyan", no_wrap=True)
        table.add_column("Class", style="bold")
        table.add_column("HP", justify="right")
        table.add_column("MP", justify="right")
        table.add_column("ATK", justify="right")
        table.add_column("DEF", justify="right")
        table.add_column("Skills")
        for i, template in enumerate(templates, 1):
            table.add_row(
                str(i),
                f"{template.unit_class.emoji} {template.unit_class.colored_name}\n"
                f"[dim]{escape(template.description)}[/]",
                str(template.health),
                str(template.mana),
                str(template.attack),
                str(template.defense),
                "\n".join(escape(str(skill)) for skill in template.skills),
            )
        prompt = "\n" + ccapture(table) + "\nClass > "
        return self.ask_number(prompt, 1, len(templates))

    def choose_coin_side(self) -> int:
        return self.choose_from_menu(
            "Coin toss: call it!",
            [side.display_name for side in CoinSide],
            "Call",
        )

    def choose_action(self, player: Any, boss: Any) -> int:
        return self.choose_from_menu(
            f"{escape(player.name)}'s turn",
            [action.display_name for action in BattleAction],
            "Action",
        )

    def choose_skill(self, player: Any) -> int:
        table = Table(title="Skills", pad_edge=False)
        table.add_column("#", style="cyan", no_wrap=True)
        table.add_column("Name", style="bold")
        table.add_column("Cost", justify="right", style="blue")
        table.add_column("Description")
        for slot, skill in enumerate(player.skills, 1):
            cost_style = "blue" if player.can_use_skill(slot) else "dim red"
            table.add_row(
                str(slot),
                escape(skill.name),
                f"[{cost_style}]{skill.cost} MP[/]",
                escape(skill.description),
            )
        prompt = "\n" + ccapture(table) + f"\nSkill (MP {player.mana}/{player.max_mana}) > "
        return self.ask_number(prompt, 1, len(player.skills))

    def choose_potion(self, player: Any) -> int:
        for line in player.display.get_inventory_lines():
            cprint(f"  {line}")
        table = Table(title="Potions", pad_edge=False)
        table.add_column("#", style="cyan", no_wrap=True)
        table.add_column("Potion", style="bold")
        for i, potion in enumerate(player.potions, 1):
            table.add_row(str(i), escape(str(potion)))
        table.add_row()
        table.add_row("0", "Cancel")
        prompt = "\n" + ccapture(table) + "\nPotion > "
        return self.ask_number(prompt, 0, len(player.potions))

    def choose_upgrade(self, player: Any) -> int:
        return self.choose_from_menu(
            "Choose an upgrade",
            [upgrade.description for upgrade in Upgrade],
            "Upgrade",
        )

    def choose_equipment(self, offer: list[Any]) -> int:
        table = Table(title="Choose your reward", pad_edge=False)
        table.add_column("#", style="cyan", no_wrap=True)
        table.add_column("Item", style="bold")
        table.add_column("Slot", style="magenta")
        table.add_column("Bonus", style="green")
        for i, item in enumerate(offer, 1):
            table.add_row(
                str(i),
                f"{escape(item.name)}\n[dim]{escape(item.description)}[/]",
                f"{item.slot.emoji} {item.slot.display_name}",
                escape(item.bonus_summary),
            )
        prompt = "\n" + ccapture(table) + "\nItem > "
        return self.ask_number(prompt, 1, len(offer))

    # ============================================================================
    # OUTPUT
    # ============================================================================

    def show_battle_log(self, entries: list[str]) -> None:
        for entry in entries:
            cprint(self.colorize_entry(entry), highlight=False)

    def show_battle_status(self, stage: int, player: Any, boss: Any) -> None:
        crule(f"Stage {stage}: {escape(boss.name)}", style="bold yellow")
        cprint(player.display.get_status_line(show_numbers=True, show_bars=True))
        cprint(boss.display.get_status_line(show_numbers=True, show_bars=True))

    def show_rewards(self, stage: int, potions: list[Any]) -> None:
        crule(f"Stage {stage} cleared!", style="bold green")
        for potion in potions:
            cprint(f"  You found a [bold]{escape(potion.name)}[/]!")

    def show_result(self, result: Any, player: Any) -> None:
        if result.outcome == CampaignOutcome.WON:
            crule("VICTORY", style="bold green")
            cprint("[bold green]You defeated every boss. Congratulations![/]")
        else:
            crule("DEFEAT", style="bold red")
            cprint(f"[bold red]You were defeated in stage {result.defeated_at}.[/]")
        cprint(f"Stages cleared: {result.stages_cleared}")
        cprint(player.display.get_status_line(show_numbers=True, show_bars=True))
        for line in player.display.get_inventory_lines():
            cprint(f"  {line}")

    @staticmethod
    def colorize_entry(entry: str) -> str:
        """Wraps a plain narration line in the style of its first matching keyword."""
        for keyword, style in _LOG_STYLES:
            if keyword in entry:
                return f"[{style}]{escape(entry)}[/]"
        return escape(entry)

    @staticmethod
    def get_number_choice(answer: Any) -> int:
        """
        Convert a numeric string input to its integer value.

        Args:
            answer (Any): User input string to parse.

        Returns:
            int: The integer value, or -1 if invalid input.

        """
        if isinstance(answer, str) and answer.strip().isdigit():
            return int(answer.strip())
        return -1
