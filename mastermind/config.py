"""
Single place to:
- Read game settings from env (slots, colors, max moves)
- Hold them in a frozen GameConfig that sessions are built with
- Set up logging once for the adapters

Settings are read at construction time only; a running game never changes them.
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .errors import InvalidArgument

# 1) Load env vars from .env if present
load_dotenv()

APP_ENV = os.getenv("APP_ENV", "local")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Upper bound for colors ** slots (one flag per candidate is kept in memory)
MAX_CANDIDATES = 10_000_000


@dataclass(frozen=True)
class GameConfig:
    slots: int = 4
    colors: int = 6
    max_moves: int = 8

    @property
    def total_codes(self) -> int:
        return self.colors ** self.slots

    def validate(self) -> "GameConfig":
        if self.slots < 1:
            raise InvalidArgument(f"Slot count must be at least 1, got {self.slots}.")
        if self.colors < 1:
            raise InvalidArgument(f"Color count must be at least 1, got {self.colors}.")
        if self.max_moves < 1:
            raise InvalidArgument(f"Max moves must be at least 1, got {self.max_moves}.")
        if self.total_codes > MAX_CANDIDATES:
            raise InvalidArgument(
                f"{self.colors} colors x {self.slots} slots gives {self.total_codes} codes; "
                f"the limit is {MAX_CANDIDATES}."
            )
        return self


DEFAULT_CONFIG = GameConfig()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}.")


def load_config() -> GameConfig:
    """
    Build a GameConfig from MASTERMIND_SLOTS / MASTERMIND_COLORS / MASTERMIND_MAX_MOVES.
    Missing values fall back to the classic 4 slots, 6 colors, 8 moves.
    """
    config = GameConfig(
        slots=_env_int("MASTERMIND_SLOTS", DEFAULT_CONFIG.slots),
        colors=_env_int("MASTERMIND_COLORS", DEFAULT_CONFIG.colors),
        max_moves=_env_int("MASTERMIND_MAX_MOVES", DEFAULT_CONFIG.max_moves),
    )
    try:
        return config.validate()
    except InvalidArgument as err:
        raise RuntimeError(f"Invalid game settings in environment: {err}")


def configure_logging(level=None) -> None:
    """basicConfig is a no-op if logging was already configured (e.g. by uvicorn)."""
    logging.basicConfig(
        level=level or LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
