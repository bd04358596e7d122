"""Partition routines shared by the quicksort family.

Both routines rearrange ``items[lo:hi + 1]`` in place around the pivot
``items[hi]`` and return the pivot's final index.
"""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any

__all__ = ["partition_cormen", "partition_sedgewick", "partition"]


def _check_bounds(lo: int, hi: int) -> None:
    if lo > hi:
        raise ValueError(f"cannot partition an empty range [{lo}, {hi}]")


def partition_cormen(items: MutableSequence[Any], lo: int, hi: int) -> int:
    """Lomuto partition: smaller items to the left, the rest to the right."""
    _check_bounds(lo, hi)
    pivot = items[hi]
    store = lo
    for k in range(lo, hi):
        if items[k] < pivot:
            items[k], items[store] = items[store], items[k]
            store += 1
    items[store], items[hi] = items[hi], items[store]
    return store


def partition_sedgewick(items: MutableSequence[Any], lo: int, hi: int) -> int:
    """Two-pointer partition scanning inward from both ends."""
    _check_bounds(lo, hi)
    if lo == hi:
        return lo
    pivot = items[hi]
    i, j = lo - 1, hi
    while True:
        i += 1
        while items[i] < pivot:
            i += 1
        j -= 1
        while pivot < items[j]:
            if j == lo:
                break
            j -= 1
        if i >= j:
            break
        items[i], items[j] = items[j], items[i]
    items[i], items[hi] = items[hi], items[i]
    return i


partition = partition_cormen