"""
Pure game logic (no HTTP, no storage).
A Code is a fixed-length sequence of colors (ints 0 -> colors - 1).
A Feedback is the rating of a guess against a secret:
- exact: how many slots are exactly correct (right color, right place) -> black pegs
- partial: how many more pegs match by color only -> white pegs

Duplicates are allowed in both secret and guess. No color is credited twice:
the color matches are counted with the per-color minimum, then the exact
matches are taken out.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator

from .config import DEFAULT_CONFIG, GameConfig
from .errors import InvalidArgument
from .types import Color, Pegs


def _is_int(value) -> bool:
    # bool is a subclass of int, but True is not a color or a peg count
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Feedback:
    exact: int
    partial: int

    def __post_init__(self):
        if not _is_int(self.exact) or not _is_int(self.partial):
            raise InvalidArgument("Feedback values must be integers.")
        if self.exact < 0 or self.partial < 0:
            raise InvalidArgument(f"Invalid number of pegs: {self}")

    @classmethod
    def parse(cls, exact: int, partial: int, config: GameConfig = DEFAULT_CONFIG) -> "Feedback":
        """Build a Feedback and check it fits in a code of config.slots pegs."""
        feedback = cls(exact, partial)
        feedback.check(config.slots)
        return feedback

    def check(self, slots: int) -> "Feedback":
        if self.exact + self.partial > slots:
            raise InvalidArgument(f"This is not a valid rating for {slots} slots. {self}")
        return self

    def is_solved(self, slots: int) -> bool:
        return self.exact == slots

    def __str__(self) -> str:
        return f"black: {self.exact} white: {self.partial}"


@dataclass(frozen=True)
class Code:
    pegs: Pegs

    def __post_init__(self):
        # accept any iterable of ints, store a tuple so the code stays hashable
        object.__setattr__(self, "pegs", tuple(self.pegs))
        if len(self.pegs) == 0:
            raise InvalidArgument("A code needs at least one peg.")
        for peg in self.pegs:
            if not _is_int(peg) or peg < 0:
                raise InvalidArgument(f"{peg!r} is not a valid color.")

    @classmethod
    def parse(cls, values: Iterable[int], config: GameConfig = DEFAULT_CONFIG) -> "Code":
        """
        Build a Code and check it against the game settings.

        Raises InvalidArgument if the length is not config.slots or a value
        is outside 0 -> config.colors - 1.
        """
        pegs = tuple(values)
        if len(pegs) != config.slots:
            raise InvalidArgument(f"Code length must be {config.slots}, but got {len(pegs)}.")
        for peg in pegs:
            if not _is_int(peg) or peg < 0 or peg >= config.colors:
                raise InvalidArgument(f"{peg!r} is not a number from 0 to {config.colors - 1}.")
        return cls(pegs)

    def __len__(self) -> int:
        return len(self.pegs)

    def __getitem__(self, i: int) -> Color:
        if i < 0 or i >= len(self.pegs):
            raise InvalidArgument(f"Slot must be between 0 and {len(self.pegs) - 1}.")
        return self.pegs[i]

    def __iter__(self) -> Iterator[Color]:
        return iter(self.pegs)

    def evaluate(self, other: "Code") -> Feedback:
        """Rate `other` taking self as the secret (works the other way round too)."""
        return evaluate(self, other)

    def __str__(self) -> str:
        return " ".join(str(peg) for peg in self.pegs)


def evaluate(secret: Code, guess: Code) -> Feedback:
    """
    Example:
      secret = [0, 1, 2, 3]
      guess  = [0, 1, 3, 2]
      exact   = 2  (0 and 1 are in place)
      partial = 2  (3 and 2 are there, just swapped)
      Returns Feedback(exact=2, partial=2)
    """

    # 0. Validate lengths match
    n = len(secret)
    if len(guess) != n:
        raise InvalidArgument("Secret and guess must be the same length.")

    # 1. Count occurrences of every color on both sides
    colors = max(max(secret.pegs), max(guess.pegs)) + 1
    secret_counts = [0] * colors
    guess_counts = [0] * colors
    for peg in secret.pegs:
        secret_counts[peg] += 1
    for peg in guess.pegs:
        guess_counts[peg] += 1

    # 2. Color matches ignoring position: sum of the smaller count per color
    total = 0
    for color in range(colors):
        total += min(secret_counts[color], guess_counts[color])

    # 3. Exact position matches
    exact = 0
    for i in range(n):
        if secret.pegs[i] == guess.pegs[i]:
            exact += 1

    # 4. Whatever matched by color but not in place
    return Feedback(exact, total - exact)


def is_win(secret: Code, guess: Code) -> bool:
    """
    Win = all pegs match in order.
    """
    return len(secret) == len(guess) and secret.pegs == guess.pegs
