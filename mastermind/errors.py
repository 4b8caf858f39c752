"""
Error kinds raised by the game core.

- InvalidArgument: malformed code/feedback, out-of-range index or move number
- IllegalState: right call, wrong moment (wrong role or finished game)
- Contradiction: the solver has no candidate left, so the ratings it got
  cannot all be true

Adapters turn these into HTTP statuses or console messages.
"""


class MastermindError(Exception):
    """Base class for everything the core raises on purpose."""


class InvalidArgument(MastermindError, ValueError):
    pass


class IllegalState(MastermindError, RuntimeError):
    pass


class Contradiction(MastermindError):
    def __init__(self, message: str = "No possibilities left - the ratings contradict each other."):
        super().__init__(message)
