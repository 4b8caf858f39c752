"""
Labels for clarity.
"""

from typing import Literal, Tuple

Color = int  # 0 -> colors - 1
Pegs = Tuple[Color, ...]
GameStatus = Literal["awaiting_guess", "awaiting_feedback", "won", "exhausted", "cheated"]
TERMINAL_STATUSES = ("won", "exhausted", "cheated")
