"""Top-down merge sort."""

from __future__ import annotations

import heapq
from collections.abc import MutableSequence
from typing import Any

__all__ = ["merge", "mergesort"]


def merge(items: MutableSequence[Any], lo: int, mid: int, hi: int) -> None:
    """Stably merge the sorted runs ``items[lo..mid]`` and ``items[mid+1..hi]``."""
    left = items[lo : mid + 1]
    right = items[mid + 1 : hi + 1]
    items[lo : hi + 1] = list(heapq.merge(left, right))


def mergesort(items: MutableSequence[Any], lo: int, hi: int) -> None:
    """Sort ``items[lo..hi]`` in place, keeping equal items in order."""
    if lo >= hi:
        return
    mid = (lo + hi) // 2
    mergesort(items, lo, mid)
    mergesort(items, mid + 1, hi)
    merge(items, lo, mid, hi)