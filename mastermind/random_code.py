"""
Random secret for games where the human is guessing.
Every peg is drawn independently and uniformly with Python's secure random,
so duplicates are possible.
"""

from secrets import randbelow

from .config import DEFAULT_CONFIG, GameConfig
from .engine import Code


def random_code(config: GameConfig = DEFAULT_CONFIG) -> Code:
    # randbelow(colors) gives us a number between 0 and colors - 1
    pegs = []
    for _ in range(config.slots):
        pegs.append(randbelow(config.colors))
    return Code(pegs)
