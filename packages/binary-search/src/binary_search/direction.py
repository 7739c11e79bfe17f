from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, NamedTuple, TypeVar, Union

X = TypeVar("X")
A = TypeVar("A")
B = TypeVar("B")
W = TypeVar("W")


# Candidate is below the transition point.
@dataclass(frozen=True, slots=True)
class Low(Generic[A]):
    witness: A


# Candidate is at or above the transition point.
@dataclass(frozen=True, slots=True)
class High(Generic[B]):
    witness: B


Direction = Union[Low[A], High[B]]


class Bound(NamedTuple, Generic[X, W]):
    value: X
    witness: W


class Bracket(NamedTuple, Generic[X, A, B]):
    low: Bound[X, A]
    high: Bound[X, B]
