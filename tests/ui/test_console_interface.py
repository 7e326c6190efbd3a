"""
Tests for the console front-end and the command-line entry point.

The prompt_toolkit session is replaced by a stub that replays typed answers,
so the rich rendering runs for real.
"""

import pytest

import bossrush.main
from bossrush.campaign import CampaignResult
from bossrush.core.constants import CampaignOutcome
from bossrush.core.utils import RandomSource
from bossrush.main import main, play
from bossrush.ui import ConsoleInterface


class ReplaySession:
    """Answers prompts from a list, then keeps answering `default`."""

    def __init__(self, answers: list[str], default: str = "1") -> None:
        self.answers = list(answers)
        self.default = default
        self.prompts: list[str] = []

    def prompt(self, message) -> str:
        self.prompts.append(str(message.value))
        if self.answers:
            return self.answers.pop(0)
        return self.default


def test_ask_number_reprompts_until_in_range():
    session = ReplaySession(["abc", "7", "2"])
    ui = ConsoleInterface(session=session)

    assert ui.ask_number("> ", 1, 3) == 2
    assert len(session.prompts) == 3


def test_play_with_markup_in_hero_name(repo):
    """
    Test that a hero name made of markup tags is shown as typed and never parsed.
    """
    session = ReplaySession(["[/]", "1"])
    ui = ConsoleInterface(session=session)

    play(ui, repo, RandomSource(0))

    assert any("[/]'s turn" in prompt for prompt in session.prompts)


def test_output_methods_escape_names(warrior, boss, repo):
    """
    Test that the battle screen and the result screen accept names with markup.
    """
    warrior._name = "[bold red]Hero[/][/]"
    boss._name = "[/boss]"
    warrior.add_equipment(repo.equipment["Fire Sword"])
    ui = ConsoleInterface(session=ReplaySession([]))

    ui.show_battle_status(1, warrior, boss)
    ui.show_battle_log([f"{warrior.name} took 5 damage!"])
    ui.show_rewards(1, [repo.potions["Health Potion"]])
    ui.show_result(
        CampaignResult(outcome=CampaignOutcome.LOST, stages_cleared=0, defeated_at=1),
        warrior,
    )
    assert ui.choose_action(warrior, boss) == 1


def test_main_exits_on_missing_content(tmp_path):
    """
    Test that an unusable data directory ends the program with status 1.
    """
    with pytest.raises(SystemExit) as excinfo:
        main(["--data-dir", str(tmp_path)])

    assert excinfo.value.code == 1


def test_main_exit_from_menu(monkeypatch):
    session = ReplaySession(["2", "3"])
    monkeypatch.setattr(bossrush.main, "ConsoleInterface", lambda: ConsoleInterface(session=session))

    main(["--seed", "7"])

    assert len(session.prompts) == 2
