"""Least-significant-digit radix sort for non-negative integers."""

from __future__ import annotations

from collections.abc import MutableSequence
from itertools import chain

__all__ = ["radixsort"]

_BASE = 10


def _digit_count(value: int) -> int:
    return len(str(value))


def radixsort(items: MutableSequence[int], lo: int, hi: int) -> None:
    """Sort the non-negative integers ``items[lo..hi]`` one decimal digit at a time."""
    values = list(items[lo : hi + 1])
    if not values:
        return
    for value in values:
        if not isinstance(value, int):
            raise TypeError(f"radix sort needs integers, got {type(value).__name__}")
        if value < 0:
            raise ValueError(f"radix sort needs non-negative integers, got {value}")

    place = 1
    for _ in range(max(map(_digit_count, values))):
        buckets: list[list[int]] = [[] for _ in range(_BASE)]
        for value in values:
            buckets[value // place % _BASE].append(value)
        values = list(chain.from_iterable(buckets))
        place *= _BASE
    items[lo : hi + 1] = values