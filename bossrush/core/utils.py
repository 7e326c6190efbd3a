"""
Utilities module for the game.

Provides console printing with rich formatting, bar rendering, the injectable
random source and the battle log shared by the units of a battle.
"""

import random
from collections.abc import Iterator, Sequence
from typing import Any, TypeVar

from rich.console import Console
from rich.rule import Rule

from .constants import CoinSide

# Initialize the rich console.
_console = Console(markup=True, width=120)


def cprint(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output.

    Args:
        *args: Arguments to pass to the console print function.
        **kwargs: Keyword arguments to pass to the console print function.

    """
    _console.print(*args, **kwargs)


def crule(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output with a rule.

    Args:
        *args: Arguments to pass to the Rule constructor.
        **kwargs: Keyword arguments to pass to the Rule constructor.

    """
    _console.print(Rule(*args, **kwargs))


def ccapture(content: Any) -> str:
    """
    Captures console output as a string.

    Args:
        content (Any): The content to capture.

    Returns:
        str: The captured output as a string.

    """
    with _console.capture() as capture:
        _console.print(content, markup=True, end="")
    return capture.get()


def make_bar(current: int, maximum: int, length: int = 10, color: str = "white") -> str:
    """
    Creates a visual progress bar representation.

    Args:
        current (int): The current value.
        maximum (int): The maximum value.
        length (int): The length of the bar in characters. Defaults to 10.
        color (str): The color for the filled portion. Defaults to "white".

    Returns:
        str: A formatted progress bar string.

    """
    filled = int((current / maximum) * length) if maximum > 0 else 0
    empty = length - filled
    bar = f"[{color}]" + "▮" * filled
    if empty > 0:
        bar += "[dim white]" + "▯" * empty + "[/]"
    bar += "[/]"
    return bar


_T = TypeVar("_T")


class RandomSource:
    """
    The only source of nondeterminism in the engine.

    Wraps a private `random.Random` so that a battle or a whole campaign can be
    replayed from a seed.

    Attributes:
        seed (int | None):
            The seed the generator was created with.

    """

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._random = random.Random(seed)

    def coin_flip(self) -> CoinSide:
        """Flips a fair coin."""
        return CoinSide.HEADS if self._random.random() < 0.5 else CoinSide.TAILS

    def choice(self, options: Sequence[_T]) -> _T:
        """Picks one element uniformly at random."""
        return self._random.choice(options)

    def sample(self, options: Sequence[_T], count: int) -> list[_T]:
        """Picks `count` distinct elements, without replacement."""
        return self._random.sample(list(options), count)

    def randint(self, low: int, high: int) -> int:
        """Returns an integer in the closed range [low, high]."""
        return self._random.randint(low, high)


class BattleLog:
    """
    Ordered narration of what happened since the interface last rendered it.

    The strings are plain text: coloring is up to whoever displays them. The
    log has no effect on the game.
    """

    def __init__(self) -> None:
        self.entries: list[str] = []

    def add(self, message: str) -> None:
        self.entries.append(message)

    def clear(self) -> None:
        self.entries.clear()

    def drain(self) -> list[str]:
        """Returns the current entries and empties the log."""
        entries = list(self.entries)
        self.entries.clear()
        return entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, message: object) -> bool:
        return message in self.entries
