"""Witness-carrying binary search over integer-like search spaces."""

from .direction import Bound, Bracket, Direction, High, Low
from .midpoint import Betweenable, between
from .search import BinarySearchResult, binary_search, binary_search_max_feasible

__all__ = [
    "Betweenable",
    "between",
    "Low",
    "High",
    "Direction",
    "Bound",
    "Bracket",
    "binary_search",
    "binary_search_max_feasible",
    "BinarySearchResult",
]
