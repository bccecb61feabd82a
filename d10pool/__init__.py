"""d10pool: d10 dice-pool resolution engine."""

from importlib.metadata import PackageNotFoundError, version

from d10pool.errors import (
    CascadeDepthExceeded,
    DiceError,
    InvalidArgument,
    InvariantViolation,
)
from d10pool.infra.config import settings
from d10pool.models.result import RollResult
from d10pool.modules.dice.roller import count_successes, d10, reroll, roll, roll_dice

try:
    __version__ = version("d10pool")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    "CascadeDepthExceeded",
    "DiceError",
    "InvalidArgument",
    "InvariantViolation",
    "RollResult",
    "count_successes",
    "d10",
    "reroll",
    "roll",
    "roll_dice",
    "settings",
]
