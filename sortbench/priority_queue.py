"""Binary max-heap on a 1-based list and a bounded priority queue."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any

__all__ = ["PriorityQueue", "fix_up", "fix_down"]


def fix_up(heap: MutableSequence[Any], k: int) -> None:
    """Swim ``heap[k]`` up until its parent is not smaller."""
    while k > 1 and heap[k // 2] < heap[k]:
        heap[k], heap[k // 2] = heap[k // 2], heap[k]
        k //= 2


def fix_down(heap: MutableSequence[Any], k: int, n: int) -> None:
    """Sink ``heap[k]`` within ``heap[1..n]`` until no child is larger."""
    while 2 * k <= n:
        j = 2 * k
        if j < n and heap[j] < heap[j + 1]:
            j += 1
        if not heap[k] < heap[j]:
            break
        heap[k], heap[j] = heap[j], heap[k]
        k = j


class PriorityQueue:
    """Max priority queue holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._heap: list[Any] = [None]

    def __len__(self) -> int:
        return len(self._heap) - 1

    def is_empty(self) -> bool:
        return len(self) == 0

    def insert(self, item: Any) -> None:
        if len(self) >= self.capacity:
            raise IndexError("priority queue is full")
        self._heap.append(item)
        fix_up(self._heap, len(self))

    def delmax(self) -> Any:
        """Remove and return the largest item."""
        n = len(self)
        if n == 0:
            raise IndexError("delmax from an empty priority queue")
        heap = self._heap
        heap[1], heap[n] = heap[n], heap[1]
        fix_down(heap, 1, n - 1)
        return heap.pop()