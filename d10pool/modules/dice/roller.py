"""d10 dice-pool roller: successes, cascading rerolls and botches."""

from __future__ import annotations

import logging
import random
from collections.abc import Collection, Iterable

from d10pool.errors import CascadeDepthExceeded, InvalidArgument, InvariantViolation
from d10pool.infra.config import settings
from d10pool.models.result import RollResult

logger = logging.getLogger("d10pool.dice")

MIN_FACE = 1
MAX_FACE = 10
FACES = frozenset(range(MIN_FACE, MAX_FACE + 1))


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _as_pool(roll: object) -> list:
    """Normalise a single die or a sequence of dice to a list."""
    if _is_number(roll):
        return [roll]
    if isinstance(roll, (list, tuple)):
        return list(roll)
    raise InvalidArgument("roll is required (die or sequence of dice)")


def d10() -> int:
    """Roll a single ten-sided die."""
    face = random.randint(MIN_FACE, MAX_FACE)
    if face not in FACES:
        raise InvariantViolation(f"d10 sampled an invalid face: {face!r}")
    return face


def roll_dice(num_dice: int) -> list[int]:
    """Roll a pool of ``num_dice`` d10s, in draw order."""
    if not isinstance(num_dice, int) or isinstance(num_dice, bool) or num_dice < 0:
        raise InvalidArgument(f"num_dice must be a non-negative integer, got {num_dice!r}")
    pool = [d10() for _ in range(num_dice)]
    logger.debug("Rolled %dd10: %s", num_dice, pool)
    return pool


def count_successes(
    roll: int | list[int],
    *,
    target_number: int | None = None,
    double: int | None = None,
    autosuccesses: int = 0,
) -> int:
    """Count the successes in a die or a pool of dice.

    Args:
        roll: A single die face or a sequence of faces.
        target_number: Lowest face that scores a success (default 7).
        double: Lowest face that scores two successes (default 10).
        autosuccesses: Successes added regardless of the dice.

    Returns:
        The total number of successes, never less than ``autosuccesses``.

    Raises:
        InvalidArgument: If the roll or thresholds are not numbers, or a face
            is outside 1-10.
    """
    if target_number is None:
        target_number = settings.default_target_number
    if double is None:
        double = settings.default_double

    pool = _as_pool(roll)
    if not _is_number(target_number):
        raise InvalidArgument("target_number must be a number")
    if not _is_number(double):
        raise InvalidArgument("double must be a number")
    if not _is_number(autosuccesses):
        raise InvalidArgument("autosuccesses must be a number")

    successes = autosuccesses
    for face in pool:
        if not _is_number(face):
            raise InvalidArgument(f"Die face is not a number: {face!r}")
        if face <= 0 or face > MAX_FACE:
            raise InvalidArgument(f"Die face out of 1-{MAX_FACE} range: {face}")
        if face >= target_number:
            successes += 2 if face >= double else 1
    return successes


def _validate_reroll_faces(reroll_faces: object) -> frozenset[int]:
    if not isinstance(reroll_faces, (list, tuple, set, frozenset)):
        raise InvalidArgument("reroll_faces must be a sequence of integers")
    for face in reroll_faces:
        if not isinstance(face, int) or isinstance(face, bool):
            raise InvalidArgument(f"reroll_faces contains a non-integer value: {face!r}")
    faces = frozenset(reroll_faces)
    if FACES <= faces:
        raise InvalidArgument(f"reroll_faces cannot cover every face {MIN_FACE}-{MAX_FACE}")
    return faces


def _compact(pool: Iterable[object]) -> list:
    """Drop empty slots (``None``, 0 or NaN) from a caller-supplied pool."""
    compacted = []
    for face in pool:
        if face is None or face == 0 or face != face:
            continue
        if not _is_number(face):
            raise InvalidArgument(f"Die face is not a number: {face!r}")
        compacted.append(face)
    return compacted


def _reroll(
    pool: list[int],
    faces: frozenset[int],
    append: bool,
    cascade: bool,
) -> list[int]:
    result = list(pool) if append else []
    level = pool
    depth = 0
    while level:
        qualifying = [face for face in level if face in faces]
        if not qualifying:
            break
        if depth >= settings.max_cascade_depth:
            logger.warning(
                "Reroll cascade still rerolling %d dice at depth %d; aborting.",
                len(qualifying),
                depth,
            )
            raise CascadeDepthExceeded(settings.max_cascade_depth)
        fresh = [d10() for _ in qualifying]
        logger.debug("Reroll pass %d: rerolled %s -> %s", depth, qualifying, fresh)
        result.extend(fresh)
        if not cascade:
            break
        level = fresh
        depth += 1
    return result


def reroll(
    roll: int | list[int],
    reroll_faces: Collection[int],
    *,
    append: bool = True,
    cascade: bool = True,
) -> list[int]:
    """Reroll every die showing one of ``reroll_faces``.

    With ``append`` the original dice come first, followed by the rerolled
    dice; otherwise only the rerolled dice are returned. With ``cascade``
    rerolled dice that land on a reroll face are rerolled again, and every
    level is appended after the previous one.

    Raises:
        InvalidArgument: On a malformed roll or face set, or a face set that
            covers all ten faces and could never stop rerolling.
        CascadeDepthExceeded: If the cascade runs past
            ``settings.max_cascade_depth`` levels.
    """
    pool = _compact(_as_pool(roll))
    faces = _validate_reroll_faces(reroll_faces)
    return _reroll(pool, faces, append=append, cascade=cascade)


def roll(
    num_dice: int,
    *,
    target_number: int | None = None,
    double: int | None = None,
    reroll_faces: Collection[int] = (),
    cascade: bool = True,
    autosuccesses: int = 0,
) -> RollResult:
    """Roll a dice pool, apply rerolls and score it.

    Successes and botch are scored on the pool as first rolled; rerolled
    dice only show up in ``result``.

    Args:
        num_dice: Size of the pool.
        target_number: Lowest face that scores a success (default 7).
        double: Lowest face that scores two successes (default 10).
        reroll_faces: Faces that trigger a reroll.
        cascade: Whether rerolled dice can trigger further rerolls.
        autosuccesses: Successes added regardless of the dice.

    Returns:
        A RollResult with the outcome.
    """
    the_roll = roll_dice(num_dice)
    result = reroll(the_roll, reroll_faces, append=True, cascade=cascade)
    successes = count_successes(
        the_roll,
        target_number=target_number,
        double=double,
        autosuccesses=autosuccesses,
    )
    botch = successes == 0 and MIN_FACE in the_roll

    logger.debug(
        "Roll %dd10 -> %s, %d successes%s",
        num_dice,
        result,
        successes,
        " (botch)" if botch else "",
    )
    return RollResult(
        result=result,
        dice_rolled=len(result),
        successes=successes,
        num_dice=num_dice,
        botch=botch,
    )
