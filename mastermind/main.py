'''
Mastermind API (in-memory)

Endpoints:
POST   /games                   -> start a game (?solver_guessing=true for machine guesses)
GET    /games/{id}              -> read state & history
POST   /games/{id}/guess        -> human submits a guess
POST   /games/{id}/solver-move  -> machine makes its next guess
POST   /games/{id}/feedback     -> human rates the machine's last guess
GET    /games/{id}/secret       -> secret, once a human-guessing game is over
POST   /games/{id}/new          -> fresh game, same roles
POST   /games/{id}/switch       -> fresh game, roles swapped
DELETE /games/{id}              -> forget a game

Run with: uvicorn mastermind.main:app
'''

import logging

from fastapi import FastAPI, HTTPException, Depends
from fastapi.middleware.cors import CORSMiddleware

from .config import APP_ENV, configure_logging, load_config
from .engine import Code, Feedback
from .errors import IllegalState, InvalidArgument
from .store import GameSnapshot, GameStore

from .schemas import (
    NewGameResponse,
    GuessRequest,
    GuessResponse,
    FeedbackRequest,
    FeedbackResponse,
    SolverMoveResponse,
    GameState,
    MoveOut,
    SecretOut,
)

configure_logging()
log = logging.getLogger(__name__)

app = FastAPI(title="Mastermind API", version="1.0.0")

# Allow everything in dev so the docs and front-end work easily
if APP_ENV == "local":
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"]
    )

_store = GameStore(load_config())


# One store for the whole process; tests override this dependency
def get_store() -> GameStore:
    return _store


# --------------- Helpers ---------------

def _move_out(guess: Code, feedback) -> MoveOut:
    if feedback is None:
        return MoveOut(guess=list(guess))
    return MoveOut(guess=list(guess), exact=feedback.exact, partial=feedback.partial)


def _to_game_state(game: GameSnapshot) -> GameState:
    return GameState(
        game_id=game.id,
        solver_guessing=game.solver_guessing,
        status=game.status,
        move_count=game.move_count,
        moves_left=game.moves_left,
        candidates_left=game.candidates_left,
        history=[_move_out(guess, feedback) for guess, feedback in game.history],
    )


def _to_new_game(game: GameSnapshot, store: GameStore) -> NewGameResponse:
    return NewGameResponse(
        game_id=game.id,
        solver_guessing=game.solver_guessing,
        status=game.status,
        slots=store.config.slots,
        colors=store.config.colors,
        max_moves=game.max_moves,
    )


def _not_found() -> HTTPException:
    return HTTPException(status_code=404, detail="Game not found")


# ---------------- Routes ----------------

@app.post("/games", response_model=NewGameResponse, summary="Start a new game")
def start_game(
    solver_guessing: bool = False,
    store: GameStore = Depends(get_store),
) -> NewGameResponse:
    """
    solver_guessing=false -> the server picks a secret, you guess
    solver_guessing=true  -> you keep a secret, the machine guesses and you rate it
    """
    game = store.create(solver_guessing)
    log.info("Started game %s", game.id)
    return _to_new_game(game, store)


@app.get("/games/{game_id}", response_model=GameState, summary="Get current game state")
def get_game(
    game_id: str,
    store: GameStore = Depends(get_store),
) -> GameState:
    game = store.snapshot(game_id)
    if not game:
        raise _not_found()
    return _to_game_state(game)


@app.post("/games/{game_id}/guess", response_model=GuessResponse, summary="Submit a guess")
def submit_guess(
    game_id: str,
    payload: GuessRequest,
    store: GameStore = Depends(get_store),
) -> GuessResponse:
    # the session checks length/colors, mode and whether the game is still running
    try:
        result = store.guess(game_id, payload.guess)
    except InvalidArgument as err:
        raise HTTPException(status_code=400, detail=str(err))
    except IllegalState as err:
        raise HTTPException(status_code=409, detail=str(err))
    if not result:
        raise _not_found()

    game = result.game
    note = None
    if game.status == "won":
        note = f"Congratulations! You needed {game.move_count} moves."
    elif game.status == "exhausted":
        note = f"No more moves - solution: {game.secret}"

    return GuessResponse(
        status=game.status,
        moves_left=game.moves_left,
        feedback=_move_out(result.guess, result.feedback),
        secret=list(game.secret) if game.secret is not None else None,
        note=note,
    )


@app.post("/games/{game_id}/solver-move", response_model=SolverMoveResponse, summary="Ask the machine for its next guess")
def solver_move(
    game_id: str,
    store: GameStore = Depends(get_store),
) -> SolverMoveResponse:
    try:
        result = store.solver_move(game_id)
    except IllegalState as err:
        raise HTTPException(status_code=409, detail=str(err))
    if not result:
        raise _not_found()

    note = None
    if result.guess is None:
        note = "No possibilities left - you have been cheating!"
    return SolverMoveResponse(
        status=result.game.status,
        moves_left=result.game.moves_left,
        guess=list(result.guess) if result.guess is not None else None,
        note=note,
    )


@app.post("/games/{game_id}/feedback", response_model=FeedbackResponse, summary="Rate the machine's last guess")
def submit_feedback(
    game_id: str,
    payload: FeedbackRequest,
    store: GameStore = Depends(get_store),
) -> FeedbackResponse:
    try:
        result = store.feedback(game_id, Feedback(payload.exact, payload.partial))
    except InvalidArgument as err:
        raise HTTPException(status_code=400, detail=str(err))
    except IllegalState as err:
        raise HTTPException(status_code=409, detail=str(err))
    if not result:
        raise _not_found()

    game = result.game
    notes = {
        "won": "Wow! I did it!",
        "exhausted": "No more moves - I couldn't find solution.",
        "cheated": "No possibilities left - you have been cheating!",
    }
    return FeedbackResponse(
        status=game.status,
        won=result.won,
        moves_left=game.moves_left,
        candidates_left=game.candidates_left,
        note=notes.get(game.status),
    )


@app.get("/games/{game_id}/secret", response_model=SecretOut, summary="Reveal the secret of a finished game")
def reveal_secret(
    game_id: str,
    store: GameStore = Depends(get_store),
) -> SecretOut:
    try:
        secret = store.secret(game_id)
    except IllegalState as err:
        raise HTTPException(status_code=409, detail=str(err))
    if secret is None:
        raise _not_found()
    return SecretOut(secret=list(secret))


@app.post("/games/{game_id}/new", response_model=NewGameResponse, summary="Start over with the same roles")
def restart_game(
    game_id: str,
    store: GameStore = Depends(get_store),
) -> NewGameResponse:
    game = store.restart(game_id)
    if not game:
        raise _not_found()
    return _to_new_game(game, store)


@app.post("/games/{game_id}/switch", response_model=NewGameResponse, summary="Start over with roles swapped")
def switch_roles(
    game_id: str,
    store: GameStore = Depends(get_store),
) -> NewGameResponse:
    game = store.restart(game_id, switch_roles=True)
    if not game:
        raise _not_found()
    return _to_new_game(game, store)


@app.delete("/games/{game_id}", summary="Forget a game")
def delete_game(
    game_id: str,
    store: GameStore = Depends(get_store),
) -> dict:
    if not store.delete(game_id):
        raise _not_found()
    return {"message": "Game deleted."}
