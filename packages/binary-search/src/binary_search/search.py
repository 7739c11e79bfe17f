from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Callable, TypeVar

from .direction import Bound, Bracket, Direction, High, Low
from .midpoint import Betweenable, between

logger = logging.getLogger(__name__)

X = TypeVar("X", bound=Betweenable)
A = TypeVar("A")
B = TypeVar("B")


def binary_search(
    low: tuple[X, A],
    high: tuple[X, B],
    f: Callable[[X], Direction[A, B]],
) -> Bracket[X, A, B]:
    """Find the transition point of a monotone classification.

    ``low`` and ``high`` are ``(value, witness)`` pairs with
    ``low[0] < high[0]``. ``f`` is called once per candidate strictly inside
    the bracket and answers ``Low(witness)`` or ``High(witness)``; the answer
    replaces that side of the bracket, value and witness together.

    The loop stops when :func:`between` finds no midpoint, so the returned
    values are adjacent. The low side holds the largest value classified
    ``Low`` with the witness ``f`` gave it (or the initial pair when no
    candidate went low), and the high side holds the smallest value classified
    ``High`` likewise.
    """
    lo = Bound(*low)
    hi = Bound(*high)
    while True:
        mid = between(lo.value, hi.value)
        if mid is None:
            logger.debug("bracket settled at (%r, %r)", lo.value, hi.value)
            return Bracket(lo, hi)
        direction = f(mid)
        if isinstance(direction, Low):
            lo = Bound(mid, direction.witness)
        elif isinstance(direction, High):
            hi = Bound(mid, direction.witness)
        else:
            raise TypeError(f"predicate must return Low or High, got {direction!r} for candidate {mid!r}")
        logger.debug("probe %r -> %s", mid, type(direction).__name__)


@dataclass(slots=True)
class BinarySearchResult:
    best_value: int | None
    attempts: list[int]


# Finds the maximum feasible integer in [low, high] using a monotonic feasibility predicate.
def binary_search_max_feasible(
    *,
    low: int,
    high: int,
    is_feasible: Callable[[int], bool],
    max_attempts: int | None = None,
) -> BinarySearchResult:
    if low > high:
        return BinarySearchResult(best_value=None, attempts=[])

    lo = int(low)
    hi = int(high)
    attempts: list[int] = []

    def classify(x: int) -> Direction[int, int | None]:
        # Past the budget, unprobed candidates go high so the low side stays a confirmed value.
        if max_attempts is not None and len(attempts) >= int(max_attempts):
            return High(None)
        attempts.append(x)
        if is_feasible(x):
            return Low(x)
        return High(x)

    # Sentinels just outside the range are never probed.
    result = binary_search((lo - 1, None), (hi + 1, None), classify)
    best = result.low.witness
    return BinarySearchResult(best_value=best, attempts=attempts)
