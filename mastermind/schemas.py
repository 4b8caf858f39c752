"""
Explicit validation & Pydantic models
- Defines the structure of API requests and responses.
- Range checks that depend on the game settings (code length, color count,
  slots vs. pegs in a rating) are done by the core; here we only reject
  negative numbers.
"""

from typing import List, Literal, Optional
from pydantic import BaseModel, Field, field_validator

Status = Literal["awaiting_guess", "awaiting_feedback", "won", "exhausted", "cheated"]


# 1. Represents response when a new game is started
class NewGameResponse(BaseModel):
    game_id: str = Field(..., description="Unique ID for the game; the secret is never returned")
    solver_guessing: bool = Field(..., description="True if the machine is the codebreaker")
    status: Status = Field(..., description="Current state of the game")
    slots: int = Field(..., description="Pegs per code")
    colors: int = Field(..., description="Colors per peg, numbered 0 -> colors - 1")
    max_moves: int = Field(..., description="Move budget")


# 2. Validates player's guess
class GuessRequest(BaseModel):
    guess: List[int] = Field(..., description="One color number per slot")

    @field_validator("guess")
    @classmethod
    def validate_colors(cls, guess_list: List[int]) -> List[int]:
        """
        Only check for negative numbers. Length and upper bound depend on the
        game's settings and are checked by the session.
        """
        for color in guess_list:
            if color < 0:
                raise ValueError("Colors are numbered from 0.")
        return guess_list

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"guess": [0, 1, 2, 3]},
            ]
        }
    }


# 3. The human's rating for the machine's last move
class FeedbackRequest(BaseModel):
    exact: int = Field(..., ge=0, description="Black pegs: right color, right place")
    partial: int = Field(..., ge=0, description="White pegs: right color, wrong place")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"exact": 1, "partial": 2},
            ]
        }
    }


# 4. One move with its rating (rating is null while a machine move waits for it)
class MoveOut(BaseModel):
    guess: List[int] = Field(..., description="The guessed code")
    exact: Optional[int] = Field(None, description="Black pegs")
    partial: Optional[int] = Field(None, description="White pegs")


# 5. Represents the overall state of the game
class GameState(BaseModel):
    game_id: str = Field(..., description="Unique ID for the game")
    solver_guessing: bool = Field(..., description="True if the machine is the codebreaker")
    status: Status = Field(..., description="Current state of the game")
    move_count: int = Field(..., description="Moves made so far")
    moves_left: int = Field(..., description="How many moves remain")
    candidates_left: Optional[int] = Field(None, description="Codes the machine still considers (machine games only)")
    history: List[MoveOut] = Field(..., description="All moves so far with their ratings")


# 6. Result of a human guess
class GuessResponse(BaseModel):
    status: Status = Field(..., description="Current state of the game")
    moves_left: int = Field(..., description="How many moves remain")
    feedback: MoveOut = Field(..., description="The guess and its rating")
    secret: Optional[List[int]] = Field(None, description="The secret code (only revealed if game is over)")
    note: Optional[str] = Field(None, description="Extra note (ex. 'Congratulations! You needed 5 moves.')")


# 7. Result of asking the machine for a move
class SolverMoveResponse(BaseModel):
    status: Status = Field(..., description="Current state of the game")
    moves_left: int = Field(..., description="How many moves remain")
    guess: Optional[List[int]] = Field(None, description="The machine's guess; null if no code fits the ratings")
    note: Optional[str] = Field(None, description="Extra note")


# 8. Result of rating the machine's move
class FeedbackResponse(BaseModel):
    status: Status = Field(..., description="Current state of the game")
    won: bool = Field(..., description="True if the rated move was the secret")
    moves_left: int = Field(..., description="How many moves remain")
    candidates_left: int = Field(..., description="Codes the machine still considers")
    note: Optional[str] = Field(None, description="Extra note")


# 9. Secret, once a human-guessing game is over
class SecretOut(BaseModel):
    secret: List[int] = Field(..., description="The secret code")
