# Specific exception types for different error conditions
class UrError(Exception):
    """Base exception for Royal Game of Ur errors."""

    pass


class InvalidStepsError(UrError, ValueError):
    """Raised when a step count outside [0, 4] reaches the rules engine."""

    pass


class IllegalMoveError(UrError):
    """An agent picked a start that is not among the legal options.

    The turn sequencer never raises this mid-game; it forfeits the roll instead.
    """

    pass


class InvariantViolation(UrError):
    """Raised when the game state breaks tile conservation or lane exclusivity."""

    pass


class MalformedInputError(UrError):
    """Raised when interactive input cannot be parsed as a position (retryable)."""

    pass


class EndOfInputError(UrError, EOFError):
    """Raised when an interactive agent runs out of input (non-retryable)."""

    pass


class UnknownAgentError(UrError, KeyError):
    """Raised when an agent name is not registered."""

    pass
