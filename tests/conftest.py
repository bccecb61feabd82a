"""Shared test fixtures."""

from unittest.mock import patch

import pytest


@pytest.fixture
def fixed_dice():
    """Make d10() return the given faces in order.

    Usage: ``with fixed_dice(7, 8, 9) as die: ...``; ``die.call_count`` tells
    how many dice were drawn.
    """

    def _fixed(*faces: int):
        return patch("d10pool.modules.dice.roller.d10", side_effect=list(faces))

    return _fixed
