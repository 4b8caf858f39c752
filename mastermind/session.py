"""
One game of Mastermind, either role.

Human guesses: the session holds a random secret and rates every guess right away.
    awaiting_guess --submit_guess--> awaiting_guess | won | exhausted

Machine guesses: the human keeps the secret and rates the solver's moves.
    awaiting_guess --request_solver_move--> awaiting_feedback
    awaiting_feedback --submit_feedback_for_solver_move--> awaiting_guess | won | exhausted | cheated

won, exhausted and cheated are terminal. "New game" and "switch roles" build a
fresh session with new_game().
"""

import logging
from typing import List, Optional, Tuple

from .config import DEFAULT_CONFIG, GameConfig
from .engine import Code, Feedback, evaluate, is_win
from .errors import Contradiction, IllegalState, InvalidArgument
from .random_code import random_code
from .solver import Solver
from .types import TERMINAL_STATUSES, GameStatus

log = logging.getLogger(__name__)


class GameSession:
    def __init__(
        self,
        solver_guessing: bool,
        config: GameConfig = DEFAULT_CONFIG,
        secret: Optional[Code] = None,
    ) -> None:
        self.config = config.validate()
        self._solver_guessing = solver_guessing
        self._moves: List[Code] = []
        self._feedbacks: List[Optional[Feedback]] = []
        self.status: GameStatus = "awaiting_guess"

        if solver_guessing:
            if secret is not None:
                raise InvalidArgument("The machine is guessing, so it cannot be given the secret.")
            self._secret: Optional[Code] = None
            self._solver: Optional[Solver] = Solver(config)
        else:
            if secret is None:
                secret = random_code(config)
            else:
                secret = Code.parse(secret, config)
            self._secret = secret
            self._solver = None

    # --- Queries ---

    def is_solver_guessing(self) -> bool:
        return self._solver_guessing

    @property
    def move_count(self) -> int:
        return len(self._moves)

    def is_over(self) -> bool:
        return self.status in TERMINAL_STATUSES

    def get_move(self, move_no: int) -> Code:
        self._check_move_no(move_no)
        return self._moves[move_no]

    def get_feedback(self, move_no: int) -> Optional[Feedback]:
        """None while the solver's latest move is still unrated."""
        self._check_move_no(move_no)
        return self._feedbacks[move_no]

    def history(self) -> List[Tuple[Code, Optional[Feedback]]]:
        return list(zip(self._moves, self._feedbacks))

    def candidates_left(self) -> Optional[int]:
        if self._solver is None:
            return None
        return self._solver.candidates_left()

    def reveal_secret(self) -> Code:
        if self._solver_guessing:
            raise IllegalState("Computer doesn't know the secret since it is guesser.")
        if not self.is_over():
            raise IllegalState("Game is not over. So the secret is still secret.")
        return self._secret

    # --- Human guesses ---

    def submit_guess(self, code: Code) -> Feedback:
        if self._solver_guessing:
            raise IllegalState("Computer is guesser, so moves are made automatically.")
        self._check_not_over()
        code = Code.parse(code, self.config)

        feedback = evaluate(self._secret, code)
        self._moves.append(code)
        self._feedbacks.append(feedback)
        self._settle(is_win(self._secret, code))
        return feedback

    # --- Machine guesses ---

    def request_solver_move(self) -> Code:
        if not self._solver_guessing:
            raise IllegalState("Human is guesser, so the machine doesn't make moves.")
        if self.status == "cheated":
            raise Contradiction("No possibilities left - you have been cheating!")
        self._check_not_over()
        if self.status == "awaiting_feedback":
            raise IllegalState("The last machine move has not been rated yet.")

        try:
            guess = self._solver.next_guess()
        except Contradiction:
            self.status = "cheated"
            log.warning("Session ended: no candidate fits the ratings")
            raise

        self._moves.append(guess)
        self._feedbacks.append(None)
        self.status = "awaiting_feedback"
        return guess

    def submit_feedback_for_solver_move(self, feedback: Feedback) -> bool:
        """Rate the machine's last move. Returns True if that move found the secret."""
        if not self._solver_guessing:
            raise IllegalState("Human is guesser, so there is nothing to rate.")
        self._check_not_over()
        if self.status != "awaiting_feedback":
            raise IllegalState("There is no machine move waiting for a rating.")
        feedback.check(self.config.slots)

        self._solver.record_feedback(self._moves[-1], feedback)
        self._feedbacks[-1] = feedback
        self._settle(feedback.is_solved(self.config.slots))
        if self.status == "awaiting_guess" and self._solver.is_contradicted():
            self.status = "cheated"
            log.warning("Session ended: no candidate fits the ratings")
        return self.status == "won"

    # --- Helpers ---

    def _settle(self, won: bool) -> None:
        if won:
            self.status = "won"
            log.info("Code found in %d moves", self.move_count)
        elif self.move_count >= self.config.max_moves:
            self.status = "exhausted"
            log.info("No more moves after %d guesses", self.move_count)
        else:
            self.status = "awaiting_guess"

    def _check_not_over(self) -> None:
        if self.is_over():
            raise IllegalState("The game is over.")

    def _check_move_no(self, move_no: int) -> None:
        if move_no < 0 or move_no >= self.move_count:
            raise InvalidArgument(f"The specified move number is not valid: {move_no}.")


def new_game(
    solver_guessing: bool,
    config: GameConfig = DEFAULT_CONFIG,
    secret: Optional[Code] = None,
) -> GameSession:
    session = GameSession(solver_guessing, config, secret)
    log.info(
        "New game: %s guessing, %d colors x %d slots, %d moves",
        "machine" if solver_guessing else "human",
        config.colors, config.slots, config.max_moves,
    )
    return session
