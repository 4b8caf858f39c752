"""
The space of every possible code, one flag per code.

Index <-> Code mapping is mixed radix with slot 0 as the most significant
digit, so for 6 colors x 4 slots:
  0    -> [0, 0, 0, 0]
  1    -> [0, 0, 0, 1]
  6    -> [0, 0, 1, 0]
  1295 -> [5, 5, 5, 5]

Flags start as "possible" and, once cleared, stay cleared for the rest of the game.
"""

from typing import Iterator, List, Optional

from .config import DEFAULT_CONFIG, GameConfig
from .engine import Code
from .errors import InvalidArgument


class CandidateSpace:
    def __init__(self, config: GameConfig = DEFAULT_CONFIG) -> None:
        self.config = config.validate()
        self._total = config.total_codes
        self._possible = bytearray(b"\x01") * self._total
        # ascending list of indices that may still be possible (compacted lazily)
        self._alive: List[int] = list(range(self._total))
        self._remaining = self._total

    def size(self) -> int:
        return self._total

    def __len__(self) -> int:
        return self._total

    def remaining(self) -> int:
        return self._remaining

    def decode(self, index: int) -> Code:
        self._check_index(index)
        colors = self.config.colors
        pegs = [0] * self.config.slots
        remainder = index
        for slot in range(self.config.slots - 1, -1, -1):
            pegs[slot] = remainder % colors
            remainder //= colors
        return Code(pegs)

    def encode(self, code: Code) -> int:
        if len(code) != self.config.slots:
            raise InvalidArgument(f"Code length must be {self.config.slots}, but got {len(code)}.")
        index = 0
        for peg in code:
            if peg >= self.config.colors:
                raise InvalidArgument(f"{peg} is not a number from 0 to {self.config.colors - 1}.")
            index = index * self.config.colors + peg
        return index

    def is_possible(self, index: int) -> bool:
        self._check_index(index)
        return bool(self._possible[index])

    def eliminate(self, index: int) -> None:
        self._check_index(index)
        if self._possible[index]:
            self._possible[index] = 0
            self._remaining -= 1

    def possible_indices(self) -> Iterator[int]:
        """Surviving indices in ascending order."""
        self._alive = [i for i in self._alive if self._possible[i]]
        return iter(list(self._alive))

    def first_possible(self) -> Optional[int]:
        """Smallest surviving index, or None when nothing is left."""
        for index in self._alive:
            if self._possible[index]:
                return index
        return None

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= self._total:
            raise InvalidArgument(f"Index must be between 0 and {self._total - 1}, got {index}.")
