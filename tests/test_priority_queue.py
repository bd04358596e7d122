import pytest
from hypothesis import given
from hypothesis import strategies as st

from sortbench.priority_queue import PriorityQueue, fix_down, fix_up

values_strategy = st.lists(st.integers(-500, 500), max_size=80)


def _is_max_heap(heap, n):
    return all(not heap[k // 2] < heap[k] for k in range(2, n + 1))


@given(values_strategy)
def test_fix_up_builds_heap(values):
    heap = [None]
    for v in values:
        heap.append(v)
        fix_up(heap, len(heap) - 1)
    assert _is_max_heap(heap, len(values))
    assert sorted(heap[1:]) == sorted(values)


@given(values_strategy)
def test_fix_down_heapify(values):
    heap = [None, *values]
    n = len(values)
    for k in range(n // 2, 0, -1):
        fix_down(heap, k, n)
    assert _is_max_heap(heap, n)
    assert sorted(heap[1:]) == sorted(values)


def test_fix_down_respects_bound():
    heap = [None, 1, 2, 9]
    fix_down(heap, 1, 2)
    assert heap == [None, 2, 1, 9]


@given(values_strategy)
def test_delmax_yields_descending(values):
    pq = PriorityQueue(len(values))
    for v in values:
        pq.insert(v)
    assert len(pq) == len(values)
    out = [pq.delmax() for _ in values]
    assert out == sorted(values, reverse=True)
    assert pq.is_empty()


def test_is_empty_tracks_contents():
    pq = PriorityQueue(2)
    assert pq.is_empty()
    pq.insert(4)
    assert not pq.is_empty()
    assert pq.delmax() == 4
    assert pq.is_empty()


def test_delmax_on_empty_raises():
    with pytest.raises(IndexError):
        PriorityQueue(3).delmax()


def test_insert_beyond_capacity_raises():
    pq = PriorityQueue(1)
    pq.insert(1)
    with pytest.raises(IndexError):
        pq.insert(2)
    assert len(pq) == 1


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        PriorityQueue(-1)