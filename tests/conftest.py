"""
Shared fixtures for the test-suite.

Provides the content repository, ready-made units, a scripted interface that
replays integer answers and a scripted random source that replays coin flips
and boss moves.
"""

from collections.abc import Sequence
from typing import Any

import pytest

from bossrush.core.constants import BossMove, CoinSide, UnitClass
from bossrush.core.content import ContentRepository
from bossrush.core.utils import RandomSource
from bossrush.ui.interface import PlayerInterface
from bossrush.units import Unit, create_boss, create_player


class ScriptedRandom(RandomSource):
    """
    A random source whose coin flips and boss moves are decided in advance.

    Once a queue runs dry, coin flips come up heads and bosses attack. Every
    other draw uses a seeded generator.
    """

    def __init__(
        self,
        coins: list[CoinSide] | None = None,
        boss_moves: list[BossMove] | None = None,
        seed: int = 0,
    ) -> None:
        super().__init__(seed)
        self.coins = list(coins or [])
        self.boss_moves = list(boss_moves or [])

    def coin_flip(self) -> CoinSide:
        if self.coins:
            return self.coins.pop(0)
        return CoinSide.HEADS

    def choice(self, options: Sequence[Any]) -> Any:
        if options and all(isinstance(option, BossMove) for option in options):
            if self.boss_moves:
                return self.boss_moves.pop(0)
            return BossMove.ATTACK
        return super().choice(options)


class ScriptedInterface(PlayerInterface):
    """
    Replays queued answers and records everything the engine shows.

    Defaults once a queue is empty: call heads, attack, skill 1, cancel the
    inventory, heal, take the first item.
    """

    def __init__(
        self,
        coin_calls: list[int] | None = None,
        actions: list[int] | None = None,
        skills: list[int] | None = None,
        potions: list[int] | None = None,
        upgrades: list[int] | None = None,
        equipment: list[int] | None = None,
        classes: list[int] | None = None,
    ) -> None:
        self.answers: dict[str, list[int]] = {
            "coin": list(coin_calls or []),
            "action": list(actions or []),
            "skill": list(skills or []),
            "potion": list(potions or []),
            "upgrade": list(upgrades or []),
            "equipment": list(equipment or []),
            "class": list(classes or []),
        }
        self.defaults = {
            "coin": 1,
            "action": 1,
            "skill": 1,
            "potion": 0,
            "upgrade": 1,
            "equipment": 1,
            "class": 1,
        }
        self.calls: dict[str, int] = {key: 0 for key in self.answers}
        self.log: list[str] = []
        self.statuses: list[int] = []
        self.rewards: list[tuple[int, list[Any]]] = []
        self.results: list[Any] = []
        self.offers: list[list[Any]] = []

    def _next(self, key: str) -> int:
        self.calls[key] += 1
        if self.answers[key]:
            return self.answers[key].pop(0)
        return self.defaults[key]

    def choose_class(self, templates: list[Any]) -> int:
        return self._next("class")

    def choose_coin_side(self) -> int:
        return self._next("coin")

    def choose_action(self, player: Any, boss: Any) -> int:
        return self._next("action")

    def choose_skill(self, player: Any) -> int:
        return self._next("skill")

    def choose_potion(self, player: Any) -> int:
        return self._next("potion")

    def choose_upgrade(self, player: Any) -> int:
        return self._next("upgrade")

    def choose_equipment(self, offer: list[Any]) -> int:
        self.offers.append(list(offer))
        return self._next("equipment")

    def show_battle_log(self, entries: list[str]) -> None:
        self.log.extend(entries)

    def show_battle_status(self, stage: int, player: Any, boss: Any) -> None:
        self.statuses.append(stage)

    def show_rewards(self, stage: int, potions: list[Any]) -> None:
        self.rewards.append((stage, list(potions)))

    def show_result(self, result: Any, player: Any) -> None:
        self.results.append(result)


@pytest.fixture
def repo():
    """The content shipped with the package."""
    return ContentRepository()


@pytest.fixture
def warrior(repo) -> Unit:
    return create_player("Hero", repo.get_class_template(UnitClass.WARRIOR))


@pytest.fixture
def archer(repo) -> Unit:
    return create_player("Robin", repo.get_class_template(UnitClass.ARCHER))


@pytest.fixture
def mage(repo) -> Unit:
    return create_player("Merlin", repo.get_class_template(UnitClass.MAGE))


@pytest.fixture
def boss(repo) -> Unit:
    """The stage 1 boss: Goblin King, 90 HP, 15 ATK, 0 DEF."""
    return create_boss(1, repo.get_boss(1), repo.get_class_template(UnitClass.BOSS))


@pytest.fixture
def ui() -> ScriptedInterface:
    return ScriptedInterface()


@pytest.fixture
def make_ui():
    """Factory for scripted interfaces, e.g. `make_ui(actions=[2], skills=[3])`."""
    return ScriptedInterface


@pytest.fixture
def make_rng():
    """Factory for scripted random sources, e.g. `make_rng(coins=[CoinSide.TAILS])`."""
    return ScriptedRandom
