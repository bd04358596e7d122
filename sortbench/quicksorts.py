"""Quicksort variants over the inclusive range ``items[lo..hi]``.

The partitioning work is driven by an explicit stack of pending ranges
rather than recursion, so already-ordered inputs cannot exhaust the
interpreter's recursion limit.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any

from sortbench.elementary import insertionsort
from sortbench.partition import partition

__all__ = [
    "quicksort",
    "quicksort_insertion",
    "quicksort_m3",
    "quicksort_m3_insertion",
]

_INSERTION_CUTOFF = 30
_M3_INSERTION_CUTOFF = 32


def _cmpexch(items: MutableSequence[Any], a: int, b: int) -> None:
    if items[b] < items[a]:
        items[a], items[b] = items[b], items[a]


def _drive(
    items: MutableSequence[Any],
    lo: int,
    hi: int,
    cutoff: int,
    split: Callable[[MutableSequence[Any], int, int], int],
) -> None:
    """Partition ranges wider than ``cutoff`` until none is left."""
    pending = [(lo, hi)]
    while pending:
        left, right = pending.pop()
        if right - left <= cutoff:
            continue
        pivot = split(items, left, right)
        pending.append((pivot + 1, right))
        pending.append((left, pivot - 1))


def _median_of_three_at_end(items: MutableSequence[Any], lo: int, hi: int) -> int:
    mid = (lo + hi) // 2
    _cmpexch(items, mid, hi)
    _cmpexch(items, lo, mid)
    _cmpexch(items, hi, mid)
    return partition(items, lo, hi)


def _median_of_three_inner(items: MutableSequence[Any], lo: int, hi: int) -> int:
    mid = (lo + hi) // 2
    items[mid], items[hi - 1] = items[hi - 1], items[mid]
    _cmpexch(items, lo, hi - 1)
    _cmpexch(items, lo, hi)
    _cmpexch(items, hi - 1, hi)
    return partition(items, lo + 1, hi - 1)


def quicksort(items: MutableSequence[Any], lo: int, hi: int) -> None:
    """Plain quicksort pivoting on the last item of each range."""
    _drive(items, lo, hi, 0, partition)


def quicksort_insertion(items: MutableSequence[Any], lo: int, hi: int) -> None:
    """Quicksort that leaves short ranges to a final insertion sort."""
    _drive(items, lo, hi, _INSERTION_CUTOFF, partition)
    insertionsort(items, lo, hi)


def quicksort_m3(items: MutableSequence[Any], lo: int, hi: int) -> None:
    """Quicksort with a median-of-three pivot moved to the end of the range."""
    _drive(items, lo, hi, 0, _median_of_three_at_end)


def quicksort_m3_insertion(items: MutableSequence[Any], lo: int, hi: int) -> None:
    """Median-of-three quicksort finished by a single insertion sort."""
    _drive(items, lo, hi, _M3_INSERTION_CUTOFF, _median_of_three_inner)
    insertionsort(items, lo, hi)