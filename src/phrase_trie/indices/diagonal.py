# phrase_trie/indices/diagonal.py

"""
diagonal.py.

Does: Enumerate every coordinate of an N-dimensional grid and order the
      coordinates by anti-diagonal: total distance from the origin first,
      then the first differing coordinate.
Returns: cartesian_product(), partial_cartesian(), index_array(), distance(),
         compare_by_distance(), order_by_distance(), iter_diagonals().
Used by: Callers scheduling work over several independent dimensions in
         order of increasing combined magnitude.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from functools import cmp_to_key, reduce
from itertools import groupby
from typing import TypeVar

__all__ = [
    "DuplicateIndexError",
    "cartesian_product",
    "partial_cartesian",
    "index_array",
    "distance",
    "compare_by_distance",
    "order_by_distance",
    "iter_diagonals",
]

T = TypeVar("T")

Index = tuple[int, ...]


class DuplicateIndexError(ValueError):
    """Raise when two indices cannot be told apart by distance or coordinates."""


# ─────────────────────────────────────────────────────────────────────────────
# 1) Cartesian product
# ─────────────────────────────────────────────────────────────────────────────


def partial_cartesian(combos: Sequence[Sequence[T]], items: Sequence[T]) -> list[list[T]]:
    """
    Does: Extend every partial combination with every item, items varying fastest.
    Returns: len(combos) * len(items) new lists.
    """
    return [[*combo, item] for combo in combos for item in items]


def cartesian_product(lists: Sequence[Sequence[T]]) -> list[list[T]]:
    """
    Does: Every combination taking one element from each list, in order.
          Seeds with one single-element combination per element of the first
          list, then extends list by list.
    Returns: [] for zero lists (not [[]]); [[x], [y]] for [[x, y]].
    """
    if not lists:
        return []
    first, *rest = lists
    seed = [[x] for x in first]
    return reduce(partial_cartesian, rest, seed)


def index_array(dims: Sequence[int]) -> list[Index]:
    """
    Does: Cartesian product of range(d) for every d in `dims`,
          last dimension varying fastest.
    Returns: Coordinate tuples; [] for empty `dims`.
    """
    return [tuple(c) for c in cartesian_product([range(d) for d in dims])]


# ─────────────────────────────────────────────────────────────────────────────
# 2) Anti-diagonal ordering
# ─────────────────────────────────────────────────────────────────────────────


def distance(index: Sequence[int]) -> int:
    """Does: Sum of coordinates (distance from the origin along the grid)."""
    return sum(index)


def compare_by_distance(a: Sequence[int], b: Sequence[int]) -> int:
    """
    Does: Three-way comparison: smaller distance first; on equal distance,
          the first differing coordinate decides.
    Returns: -1 or 1 (never 0).
    Raises: DuplicateIndexError when `a` and `b` tie on every key.
    """
    da, db = distance(a), distance(b)
    if da != db:
        return -1 if da < db else 1
    for x, y in zip(a, b):
        if x != y:
            return -1 if x < y else 1
    raise DuplicateIndexError(f"indices {tuple(a)!r} and {tuple(b)!r} are not distinct")


def order_by_distance(indices: Sequence[Sequence[int]]) -> list[Index]:
    """
    Does: Sort `indices` with compare_by_distance. The input is left untouched.
    Returns: New list of tuples.
    """
    return sorted((tuple(i) for i in indices), key=cmp_to_key(compare_by_distance))


def iter_diagonals(dims: Sequence[int]) -> Iterator[tuple[int, list[Index]]]:
    """
    Does: Walk the grid of `dims` one anti-diagonal at a time.
    Returns: (distance, indices on that diagonal) pairs, nearest first.
    """
    for d, group in groupby(order_by_distance(index_array(dims)), key=distance):
        yield d, list(group)
