"""Command-line driver: read integers, sort them with a chosen algorithm, print them.

The input is a count followed by that many whitespace-separated integers.
The sorted values are written one per line.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, MutableSequence, Sequence
from functools import cmp_to_key
from typing import Any, TextIO

from sortbench.elementary import (
    bubblesort,
    insertionsort,
    insertionsort_slow,
    selectionsort,
    selectionsort_recursive,
    shellsort,
)
from sortbench.heapsort import heapsort, pqsort_simple
from sortbench.introsort import (
    introsort_quick_heap_jump,
    introsort_quick_merge,
    introsort_quick_merge_jump,
)
from sortbench.mergesort import mergesort
from sortbench.quicksorts import (
    quicksort,
    quicksort_insertion,
    quicksort_m3,
    quicksort_m3_insertion,
)
from sortbench.radixsort import radixsort

__all__ = [
    "compare",
    "system_sort",
    "library_sort",
    "dummy_sort",
    "sort_with",
    "read_input",
    "main",
]

_DEFAULT_ALGORITHM = "systemqsort"


def compare(a: Any, b: Any) -> int:
    """Three-way comparison: -1 if ``a < b``, 0 if equal, 1 otherwise."""
    if a < b:
        return -1
    if a <= b:
        return 0
    return 1


def system_sort(items: MutableSequence[Any], lo: int, hi: int) -> None:
    """Sort ``items[lo..hi]`` with the built-in sort driven by :func:`compare`."""
    items[lo : hi + 1] = sorted(items[lo : hi + 1], key=cmp_to_key(compare))


def library_sort(items: MutableSequence[Any], lo: int, hi: int) -> None:
    """Sort ``items[lo..hi]`` with the built-in sort and natural ordering."""
    items[lo : hi + 1] = sorted(items[lo : hi + 1])


def dummy_sort(items: MutableSequence[Any], lo: int, hi: int) -> None:
    """Leave the items as they are; a baseline for timing input and output."""


_Sorter = Callable[[MutableSequence[Any], int, int], None]

_ALGORITHMS: dict[str, _Sorter] = {
    "dummy": dummy_sort,
    "bubblesort": bubblesort,
    "selectionsort": selectionsort,
    "selectionsortR": selectionsort_recursive,
    "insertionsortslow": insertionsort_slow,
    "insertionsort": insertionsort,
    "shellsort": shellsort,
    "quicksort": quicksort,
    "quicksortinsertion": quicksort_insertion,
    "quicksortM3": quicksort_m3,
    "quicksortM3insertion": quicksort_m3_insertion,
    "mergesort": mergesort,
    "systemqsort": system_sort,
    "introsortquickmerge": introsort_quick_merge,
    "introsortquickmergelongjmp": introsort_quick_merge_jump,
    "introsortquickheaplongjmp": introsort_quick_heap_jump,
    "radixsort": radixsort,
    "cppsort": library_sort,
    "pqsortsimple": pqsort_simple,
    "heapsort": heapsort,
}


def sort_with(name: str, items: MutableSequence[Any]) -> MutableSequence[Any]:
    """Sort the whole of ``items`` in place with the named algorithm and return it."""
    try:
        sorter = _ALGORITHMS[name]
    except KeyError:
        raise ValueError(f"unknown sorting algorithm: {name!r}") from None
    if items:
        sorter(items, 0, len(items) - 1)
    return items


def read_input(stream: TextIO) -> list[int]:
    """Read a count and then that many integers from ``stream``."""
    tokens = stream.read().split()
    if not tokens:
        raise ValueError("missing item count")
    try:
        count = int(tokens[0])
    except ValueError:
        raise ValueError(f"invalid item count: {tokens[0]!r}") from None
    if count < 0:
        raise ValueError(f"item count must not be negative, got {count}")
    values = tokens[1 : count + 1]
    if len(values) < count:
        raise ValueError(f"expected {count} items, got {len(values)}")
    try:
        return [int(token) for token in values]
    except ValueError as exc:
        raise ValueError(f"invalid item: {exc}") from None


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sortbench",
        description="Sort integers read from standard input with a chosen algorithm.",
    )
    parser.add_argument(
        "algorithm",
        nargs="?",
        default=_DEFAULT_ALGORITHM,
        choices=sorted(_ALGORITHMS),
        help=f"sorting algorithm to use (default: {_DEFAULT_ALGORITHM})",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the sorter on standard input and print the result to standard output."""
    args = _parser().parse_args(argv)
    try:
        items = read_input(sys.stdin)
    except ValueError as exc:
        sys.stderr.write(f"sortbench: {exc}\n")
        return 1
    sort_with(args.algorithm, items)
    sys.stdout.write("".join(f"{value}\n" for value in items))
    return 0


if __name__ == "__main__":
    sys.exit(main())