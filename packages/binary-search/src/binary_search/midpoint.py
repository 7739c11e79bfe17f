from __future__ import annotations

from functools import singledispatch
from typing import Any, Protocol, TypeVar

import numpy as np


class Betweenable(Protocol):
    """Operator set a search-space value must support."""

    def __lt__(self, other: Any) -> bool: ...

    def __add__(self, other: Any) -> Any: ...

    def __rshift__(self, other: int) -> Any: ...

    def __and__(self, other: Any) -> Any: ...


X = TypeVar("X", bound=Betweenable)


def _strict_midpoint(low: X, high: X, one: X) -> X | None:
    # low + one is only formed once low < high, so it cannot pass the type's maximum.
    if not low < high or low + one == high:
        return None
    return (low >> 1) + (high >> 1) + (low & high & one)


@singledispatch
def between(low: X, high: X) -> X | None:
    """Overflow-safe strict midpoint of two integer-like bounds.

    Returns ``None`` when ``high <= low + 1``, which covers the adjacent, equal
    and inverted cases. Otherwise returns ``(low >> 1) + (high >> 1) + (low & high & 1)``,
    the mean of the two bounds rounded toward ``low``, without ever forming
    ``low + high``.

    Dispatches on the type of ``low``. Register further value types with
    ``between.register(MyType)``.
    """
    return _strict_midpoint(low, high, type(low)(1))


@between.register(np.integer)
def _(low: np.integer, high: Any) -> np.integer | None:
    # Arithmetic stays in low's width; high must be representable there.
    dtype = low.dtype.type
    info = np.iinfo(dtype)
    top = int(high)
    if not info.min <= top <= info.max:
        if top <= int(low) + 1:
            return None
        raise OverflowError(f"upper bound {high!r} is out of range for {low.dtype}")
    return _strict_midpoint(low, dtype(top), dtype(1))
