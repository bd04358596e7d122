"""Introsort variants: median-of-three quicksort with a recursion budget.

Each variant partitions ranges wider than 32 items while the depth budget
lasts. If the budget runs out, ``trap/`` is written to standard error and
the whole range is sorted again by a guaranteed ``n log n`` algorithm;
otherwise a final insertion sort finishes the nearly sorted range.
"""

from __future__ import annotations

import sys
from collections.abc import MutableSequence
from typing import Any

from sortbench.elementary import insertionsort
from sortbench.heapsort import heapsort
from sortbench.mergesort import mergesort
from sortbench.partition import partition

__all__ = [
    "introsort_quick_merge",
    "introsort_quick_merge_jump",
    "introsort_quick_heap_jump",
]

_CUTOFF = 32
_TRAP_MARK = "trap/"


class _DepthExceeded(Exception):
    """Raised to abandon partitioning once the depth budget is spent."""


def _cmpexch(items: MutableSequence[Any], a: int, b: int) -> None:
    if items[b] < items[a]:
        items[a], items[b] = items[b], items[a]


def _depth_budget(size: int) -> int:
    """Twice the integer base-2 logarithm of ``size``."""
    return 2 * (size.bit_length() - 1) if size > 0 else 0


def _split(items: MutableSequence[Any], lo: int, hi: int) -> int:
    mid = (lo + hi) // 2
    items[mid], items[hi - 1] = items[hi - 1], items[mid]
    _cmpexch(items, lo, hi - 1)
    _cmpexch(items, lo, hi)
    _cmpexch(items, hi - 1, hi)
    return partition(items, lo + 1, hi - 1)


def _partition_until_trap(items: MutableSequence[Any], lo: int, hi: int, depth: int) -> bool:
    """Partition recursively; return True as soon as the budget runs out."""
    if hi - lo <= _CUTOFF:
        return False
    if depth == 0:
        return True
    pivot = _split(items, lo, hi)
    return _partition_until_trap(items, lo, pivot - 1, depth - 1) or _partition_until_trap(
        items, pivot + 1, hi, depth - 1
    )


def _partition_or_raise(items: MutableSequence[Any], lo: int, hi: int, depth: int) -> None:
    if hi - lo <= _CUTOFF:
        return
    if depth == 0:
        raise _DepthExceeded
    pivot = _split(items, lo, hi)
    _partition_or_raise(items, lo, pivot - 1, depth - 1)
    _partition_or_raise(items, pivot + 1, hi, depth - 1)


def _report_trap() -> None:
    sys.stderr.write(_TRAP_MARK)


def introsort_quick_merge(items: MutableSequence[Any], lo: int, hi: int) -> None:
    """Introsort that stops partitioning on a flag and falls back to merge sort."""
    if _partition_until_trap(items, lo, hi, _depth_budget(hi - lo + 1)):
        _report_trap()
        mergesort(items, lo, hi)
    else:
        insertionsort(items, lo, hi)


def introsort_quick_merge_jump(items: MutableSequence[Any], lo: int, hi: int) -> None:
    """Introsort that unwinds at once on overflow and falls back to merge sort."""
    try:
        _partition_or_raise(items, lo, hi, _depth_budget(hi - lo + 1))
    except _DepthExceeded:
        _report_trap()
        mergesort(items, lo, hi)
    else:
        insertionsort(items, lo, hi)


def introsort_quick_heap_jump(items: MutableSequence[Any], lo: int, hi: int) -> None:
    """Introsort that unwinds at once on overflow and falls back to heap sort."""
    try:
        _partition_or_raise(items, lo, hi, _depth_budget(hi - lo + 1))
    except _DepthExceeded:
        _report_trap()
        heapsort(items, lo, hi)
    else:
        insertionsort(items, lo, hi)