"""Heap-based sorts built on the 1-based heap helpers."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any

from sortbench.priority_queue import PriorityQueue, fix_down

__all__ = ["heapsort", "pqsort_simple"]


def heapsort(items: MutableSequence[Any], lo: int, hi: int) -> None:
    """Sort ``items[lo..hi]`` with bottom-up heap construction."""
    n = hi - lo + 1
    if n <= 1:
        return
    heap = [None, *items[lo : hi + 1]]
    for k in range(n // 2, 0, -1):
        fix_down(heap, k, n)
    while n > 1:
        heap[1], heap[n] = heap[n], heap[1]
        n -= 1
        fix_down(heap, 1, n)
    items[lo : hi + 1] = heap[1:]


def pqsort_simple(items: MutableSequence[Any], lo: int, hi: int) -> None:
    """Sort ``items[lo..hi]`` by filling and draining a priority queue."""
    size = max(hi - lo + 1, 0)
    pq = PriorityQueue(size)
    for value in items[lo : hi + 1]:
        pq.insert(value)
    descending = [pq.delmax() for _ in range(size)]
    items[lo : hi + 1] = descending[::-1]