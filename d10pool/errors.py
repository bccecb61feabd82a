"""Dice engine exception hierarchy."""


class DiceError(Exception):
    """Base exception for dice operations."""

    pass


class InvalidArgument(DiceError, ValueError):
    """Bad or out-of-range input to a dice operation."""

    pass


class InvariantViolation(DiceError, RuntimeError):
    """Internal state that should be unreachable, e.g. a die with no face."""

    pass


class CascadeDepthExceeded(InvariantViolation):
    """Cascading rerolls went deeper than the configured limit.

    Attributes:
        depth: The depth at which the cascade was stopped.
    """

    def __init__(self, depth: int) -> None:
        super().__init__(f"Reroll cascade exceeded maximum depth of {depth}")
        self.depth = depth
