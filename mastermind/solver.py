"""
The machine codebreaker.

Strategy: always play the first code (lowest index) that is still consistent
with every rating received so far. It never throws away the real secret, but
it is not move-optimal (this is not Knuth's minimax). With 6 colors x 4 slots
it needs 5.77 guesses on average and 9 in the worst case.

Keep the order as is: the guess sequence for a given secret is reproducible
and tests rely on it.
"""

import logging
from typing import Optional

from .candidates import CandidateSpace
from .config import DEFAULT_CONFIG, GameConfig
from .engine import Code, Feedback, evaluate
from .errors import Contradiction, IllegalState, InvalidArgument

log = logging.getLogger(__name__)


class Solver:
    def __init__(self, config: GameConfig = DEFAULT_CONFIG) -> None:
        self.config = config
        self.space = CandidateSpace(config)
        self._pending: Optional[Code] = None
        self._solved = False

    def candidates_left(self) -> int:
        return self.space.remaining()

    def is_contradicted(self) -> bool:
        return self.space.remaining() == 0

    def next_guess(self) -> Code:
        if self._solved:
            raise IllegalState("The code was already found.")
        if self._pending is not None:
            raise IllegalState(f"Guess {self._pending} is still waiting for its rating.")

        index = self.space.first_possible()
        if index is None:
            log.warning("No candidate left, the ratings contradict each other")
            raise Contradiction("No possibilities left - you have been cheating!")

        guess = self.space.decode(index)
        self._pending = guess
        log.debug("next guess %s (index %d, %d candidates)", guess, index, self.space.remaining())
        return guess

    def record_feedback(self, guess: Code, feedback: Feedback) -> None:
        """
        Drop every candidate that would not have produced `feedback` for `guess`.
        Only the last guess returned by next_guess can be rated, exactly once.
        """
        if self._pending is None:
            raise IllegalState("There is no guess waiting for a rating.")
        if guess != self._pending:
            raise InvalidArgument("Only the last move can get evaluated.")
        feedback.check(self.config.slots)

        self._pending = None
        if feedback.is_solved(self.config.slots):
            self._solved = True

        before = self.space.remaining()
        for index in self.space.possible_indices():
            candidate = self.space.decode(index)
            if evaluate(candidate, guess) != feedback:
                self.space.eliminate(index)
        log.debug(
            "rating %s for %s: %d -> %d candidates",
            feedback, guess, before, self.space.remaining(),
        )
