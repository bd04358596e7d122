from collections import Counter

from hypothesis import given
from hypothesis import strategies as st

from sortbench.elementary import (
    bubblesort,
    insertionsort,
    insertionsort_slow,
    selectionsort,
    selectionsort_recursive,
    shellsort,
)

values_strategy = st.lists(st.integers(-1000, 1000), max_size=60)


def _copies(values, count=6):
    return [list(values) for _ in range(count)]


def _check_subrange(items, values, lo, hi):
    assert items[:lo] == values[:lo]
    assert items[hi + 1 :] == values[hi + 1 :]
    assert items[lo : hi + 1] == sorted(values[lo : hi + 1])


@given(values=values_strategy)
def test_sorts_whole_list(values):
    a, b, c, d, e, f = _copies(values)
    hi = len(values) - 1
    assert bubblesort(a, 0, hi) is None
    assert selectionsort(b, 0, hi) is None
    assert selectionsort_recursive(c, 0, hi) is None
    assert insertionsort_slow(d, 0, hi) is None
    assert insertionsort(e, 0, hi) is None
    assert shellsort(f, 0, hi) is None
    expected = sorted(values)
    for items in (a, b, c, d, e, f):
        assert items == expected


@given(values=st.lists(st.integers(-100, 100), min_size=1, max_size=60), data=st.data())
def test_sorts_sub_range_only(values, data):
    lo = data.draw(st.integers(0, len(values) - 1))
    hi = data.draw(st.integers(lo, len(values) - 1))
    a, b, c, d, e = _copies(values, 5)
    bubblesort(a, lo, hi)
    selectionsort(b, lo, hi)
    selectionsort_recursive(c, lo, hi)
    insertionsort_slow(d, lo, hi)
    insertionsort(e, lo, hi)
    for items in (a, b, c, d, e):
        _check_subrange(items, values, lo, hi)


@given(values=st.lists(st.integers(-100, 100), min_size=1, max_size=60))
def test_shellsort_sorts_prefix_range(values):
    hi = len(values) - 1
    items = list(values)
    shellsort(items, 0, hi)
    _check_subrange(items, values, 0, hi)


def test_empty_list():
    a, b, c, d, e, f = _copies([])
    bubblesort(a, 0, -1)
    selectionsort(b, 0, -1)
    selectionsort_recursive(c, 0, -1)
    insertionsort_slow(d, 0, -1)
    insertionsort(e, 0, -1)
    shellsort(f, 0, -1)
    for items in (a, b, c, d, e, f):
        assert items == []


def test_reverse_input():
    a, b, c, d, e, f = _copies(range(200, 0, -1))
    bubblesort(a, 0, 199)
    selectionsort(b, 0, 199)
    selectionsort_recursive(c, 0, 199)
    insertionsort_slow(d, 0, 199)
    insertionsort(e, 0, 199)
    shellsort(f, 0, 199)
    for items in (a, b, c, d, e, f):
        assert items == list(range(1, 201))


def test_many_duplicates():
    values = [5, 1, 5, 1, 5, 1, 3, 3]
    a, b, c, d, e, f = _copies(values)
    hi = len(values) - 1
    bubblesort(a, 0, hi)
    selectionsort(b, 0, hi)
    selectionsort_recursive(c, 0, hi)
    insertionsort_slow(d, 0, hi)
    insertionsort(e, 0, hi)
    shellsort(f, 0, hi)
    for items in (a, b, c, d, e, f):
        assert items == [1, 1, 1, 3, 3, 5, 5, 5]
        assert Counter(items) == Counter(values)


def test_sorts_strings():
    values = ["pear", "apple", "fig", "banana"]
    a, b, c, d, e, f = _copies(values)
    bubblesort(a, 0, 3)
    selectionsort(b, 0, 3)
    selectionsort_recursive(c, 0, 3)
    insertionsort_slow(d, 0, 3)
    insertionsort(e, 0, 3)
    shellsort(f, 0, 3)
    for items in (a, b, c, d, e, f):
        assert items == ["apple", "banana", "fig", "pear"]