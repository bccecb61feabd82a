"""Roll result schema, the output of the roll orchestrator."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RollResult(BaseModel):
    """Outcome of one pool roll.

    ``result`` holds the pool after rerolls (originals first, then every
    cascade level). ``successes`` and ``botch`` are scored on the pool as
    first rolled. Dumps as ``diceRolled``/``numDice`` with ``by_alias=True``.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    result: list[int]
    dice_rolled: int
    successes: int
    num_dice: int
    botch: bool = False
