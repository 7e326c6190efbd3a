"""
Main entry point for Boss Rush.

Shows the main menu, builds the player's hero from the chosen class and runs
the campaign against the five bosses.

The game supports:
- Three playable classes with three skills each
- Five bosses of growing strength
- Status effects (poison, bleed, stun, strength up, weakness)
- Potions, stage-clear upgrades and equipment drafts
"""

import argparse
import logging
from pathlib import Path

from rich.markup import escape

from bossrush.campaign import Campaign
from bossrush.core.constants import PLAYABLE_CLASSES
from bossrush.core.content import ContentRepository
from bossrush.core.logging import log_error, log_info, setup_logging
from bossrush.core.utils import RandomSource, cprint, crule
from bossrush.ui import ConsoleInterface
from bossrush.units import create_player

HOW_TO_PLAY = """\
[bold]Goal[/]: defeat five bosses in a row. Falling once ends the run.

[bold]Turns[/]: a coin toss decides who acts first for the whole battle.
On your turn you can:
  1. [bold]Attack[/]: deal damage equal to your attack.
  2. [bold]Use Skills[/]: spend mana on one of your class skills.
     Without enough mana you attack instead.
  3. [bold]Inventory[/]: drink a potion. This uses your turn.
  4. [bold]Pass[/]: do nothing.

[bold]Damage[/]: defense reduces every hit, but at least 1 damage always lands.

[bold]Status effects[/] tick at the end of their owner's turn:
  Poison deals 5 damage, Bleed deals 3, Stun skips the next action,
  Strength Up grants +10 attack, Weakness removes 5 attack.

[bold]Rewards[/]: each boss drops 1 to 3 potions. After stages 1 to 4 you
also pick an upgrade and one of three pieces of equipment.
"""


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="bossrush",
        description="A turn-based console RPG: five bosses, one hero.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random source, to replay a run.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Verbosity of the diagnostic log (default: WARNING).",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Directory holding classes.json, bosses.json, equipment.json and potions.json.",
    )
    return parser.parse_args(argv)


def play(ui: ConsoleInterface, repo: ContentRepository, rng: RandomSource) -> None:
    """Creates the hero and runs one campaign."""
    name = ui.ask_text("\nEnter your hero's name > ")
    templates = [repo.get_class_template(unit_class) for unit_class in PLAYABLE_CLASSES]
    choice = ui.choose_class(templates)
    player = create_player(name, templates[choice - 1])
    cprint(
        f"\n{player.unit_class.emoji} [bold]{escape(player.name)}[/] the "
        f"{player.unit_class.colored_name} sets out!\n"
    )
    log_info(f"New game: {player!r}", {"seed": rng.seed})
    Campaign(player, ui, rng=rng, repo=repo).run()


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(getattr(logging, args.log_level))

    try:
        repo = ContentRepository(args.data_dir)
    except ValueError as e:
        log_error("Could not load the game content", {"data_dir": args.data_dir})
        cprint(f"[bold red]Could not load the game content:[/] {escape(str(e))}")
        raise SystemExit(1) from e
    rng = RandomSource(args.seed)
    ui = ConsoleInterface()

    crule("Boss Rush", style="bold green")
    cprint("Welcome, adventurer! Five bosses stand between you and glory.\n", style="bold blue")

    try:
        while True:
            choice = ui.choose_from_menu(
                "Main Menu",
                ["Start New Game", "How to Play", "Exit"],
                "Choice",
            )
            if choice == 1:
                play(ui, repo, rng)
            elif choice == 2:
                crule("How to Play", style="bold yellow")
                cprint(HOW_TO_PLAY)
            else:
                cprint("Thanks for playing!", style="bold green")
                break
    except (KeyboardInterrupt, EOFError):
        cprint("\n[bold red]Game interrupted.[/]")


if __name__ == "__main__":
    main()
