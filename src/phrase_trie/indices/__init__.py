"""
indices.
=======

Does: Expose the diagonal index enumerator (grid coordinates ordered by
      distance from the origin).
"""

from .diagonal import (
    DuplicateIndexError,
    cartesian_product,
    compare_by_distance,
    distance,
    index_array,
    iter_diagonals,
    order_by_distance,
    partial_cartesian,
)

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
