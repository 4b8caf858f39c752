"""
In-memory store
Holds running game sessions for the HTTP adapter, keyed by a generated id.

Sessions are only touched while holding the store lock; callers get back
GameSnapshot copies, never the live session.

Each method returns None when the id is unknown; errors from the session
(InvalidArgument, IllegalState, Contradiction) are passed through untouched.
"""

from dataclasses import dataclass, field
from threading import RLock
from time import time
from typing import Dict, List, Optional, Tuple
from uuid import uuid4

from .config import DEFAULT_CONFIG, GameConfig
from .engine import Code, Feedback
from .errors import Contradiction
from .session import GameSession, new_game
from .types import GameStatus


@dataclass
class Game:
    id: str
    session: GameSession
    created_at: float = field(default_factory=time)
    updated_at: float = field(default_factory=time)


@dataclass
class GameSnapshot:
    """Copy of a session's state taken under the store lock."""
    id: str
    solver_guessing: bool
    status: GameStatus
    move_count: int
    max_moves: int
    candidates_left: Optional[int]
    history: List[Tuple[Code, Optional[Feedback]]]
    # only set once a human-guessing game is over
    secret: Optional[Code] = None

    @property
    def moves_left(self) -> int:
        return self.max_moves - self.move_count


@dataclass
class MoveResult:
    game: GameSnapshot
    guess: Optional[Code] = None
    feedback: Optional[Feedback] = None
    won: bool = False


def _snapshot(game: Game) -> GameSnapshot:
    session = game.session
    secret = None
    if not session.is_solver_guessing() and session.is_over():
        secret = session.reveal_secret()
    return GameSnapshot(
        id=game.id,
        solver_guessing=session.is_solver_guessing(),
        status=session.status,
        move_count=session.move_count,
        max_moves=session.config.max_moves,
        candidates_left=session.candidates_left(),
        history=session.history(),
        secret=secret,
    )


class GameStore:
    def __init__(self, config: GameConfig = DEFAULT_CONFIG) -> None:
        self.config = config
        self._games: Dict[str, Game] = {}
        self._lock = RLock()

    def create(self, solver_guessing: bool, secret: Optional[Code] = None) -> GameSnapshot:
        game = Game(id=str(uuid4()), session=new_game(solver_guessing, self.config, secret))
        with self._lock:
            self._games[game.id] = game
            return _snapshot(game)

    def snapshot(self, game_id: str) -> Optional[GameSnapshot]:
        with self._lock:
            game = self._games.get(game_id)
            if game is None:
                return None
            return _snapshot(game)

    def secret(self, game_id: str) -> Optional[Code]:
        """Raises IllegalState unless the human was guessing and the game is over."""
        with self._lock:
            game = self._games.get(game_id)
            if game is None:
                return None
            return game.session.reveal_secret()

    def restart(self, game_id: str, switch_roles: bool = False) -> Optional[GameSnapshot]:
        """Replace the session behind game_id with a fresh one (same role, or swapped)."""
        with self._lock:
            game = self._games.get(game_id)
            if game is None:
                return None
            solver_guessing = game.session.is_solver_guessing()
            if switch_roles:
                solver_guessing = not solver_guessing
            game.session = new_game(solver_guessing, self.config)
            game.updated_at = time()
            return _snapshot(game)

    def guess(self, game_id: str, attempt: Code) -> Optional[MoveResult]:
        with self._lock:
            game = self._games.get(game_id)
            if game is None:
                return None
            feedback = game.session.submit_guess(attempt)
            game.updated_at = time()
            guess = game.session.get_move(game.session.move_count - 1)
            return MoveResult(game=_snapshot(game), guess=guess, feedback=feedback)

    def solver_move(self, game_id: str) -> Optional[MoveResult]:
        """guess is None when the solver ran out of candidates (the game is now 'cheated')."""
        with self._lock:
            game = self._games.get(game_id)
            if game is None:
                return None
            try:
                guess = game.session.request_solver_move()
            except Contradiction:
                guess = None
            game.updated_at = time()
            return MoveResult(game=_snapshot(game), guess=guess)

    def feedback(self, game_id: str, feedback: Feedback) -> Optional[MoveResult]:
        with self._lock:
            game = self._games.get(game_id)
            if game is None:
                return None
            won = game.session.submit_feedback_for_solver_move(feedback)
            game.updated_at = time()
            return MoveResult(game=_snapshot(game), feedback=feedback, won=won)

    def delete(self, game_id: str) -> bool:
        with self._lock:
            return self._games.pop(game_id, None) is not None
