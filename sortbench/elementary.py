"""Elementary in-place sorts over the inclusive range ``items[lo..hi]``."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any

__all__ = [
    "bubblesort",
    "selectionsort",
    "selectionsort_recursive",
    "insertionsort_slow",
    "insertionsort",
    "shellsort",
]


def _cmpexch(items: MutableSequence[Any], a: int, b: int) -> None:
    if items[b] < items[a]:
        items[a], items[b] = items[b], items[a]


def bubblesort(items: MutableSequence[Any], lo: int, hi: int) -> None:
    """Repeated adjacent compare-exchange passes."""
    for _ in range(lo, hi):
        for j in range(lo + 1, hi + 1):
            _cmpexch(items, j - 1, j)


def _index_of_min(items: MutableSequence[Any], start: int, hi: int) -> int:
    return min(range(start, hi + 1), key=items.__getitem__)


def selectionsort(items: MutableSequence[Any], lo: int, hi: int) -> None:
    """Move the smallest remaining item to the front each pass."""
    for i in range(lo, hi):
        m = _index_of_min(items, i, hi)
        items[i], items[m] = items[m], items[i]


def selectionsort_recursive(items: MutableSequence[Any], lo: int, hi: int) -> None:
    """Selection sort expressed recursively on the shrinking range."""
    if lo >= hi:
        return
    m = _index_of_min(items, lo, hi)
    items[lo], items[m] = items[m], items[lo]
    selectionsort_recursive(items, lo + 1, hi)


def insertionsort_slow(items: MutableSequence[Any], lo: int, hi: int) -> None:
    """Insertion by compare-exchange all the way down to ``lo``."""
    for i in range(lo + 1, hi + 1):
        for j in range(i, lo, -1):
            _cmpexch(items, j - 1, j)


def insertionsort(items: MutableSequence[Any], lo: int, hi: int) -> None:
    """Insertion sort with the minimum moved to ``lo`` as a sentinel."""
    for i in range(hi, lo, -1):
        _cmpexch(items, lo, i)
    for i in range(lo + 2, hi + 1):
        tmp = items[i]
        j = i
        while tmp < items[j - 1]:
            items[j] = items[j - 1]
            j -= 1
        items[j] = tmp


def _insertionsort_gap(items: MutableSequence[Any], lo: int, hi: int, h: int) -> None:
    for i in range(lo + h, hi + 1):
        tmp = items[i]
        j = i
        while j >= lo + h and tmp < items[j - h]:
            items[j] = items[j - h]
            j -= h
        items[j] = tmp


def shellsort(items: MutableSequence[Any], lo: int, hi: int) -> None:
    """Shell sort with the 1, 4, 13, 40, ... gap sequence."""
    size = hi - lo + 1
    h = 1
    while h <= (size - 1) // 9:
        h = 3 * h + 1
    while h > 0:
        _insertionsort_gap(items, lo, hi, h)
        h //= 3