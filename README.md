# sortbench

A collection of classic sorting algorithms over lists of integers, written so
that each one can be studied, compared and timed against the others.

Every algorithm sorts a list in place between two inclusive indices,
`lo` and `hi`, and returns `None`:

```python
from sortbench.quicksorts import quicksort_m3_insertion

data = [5, 3, 9, 1, 7]
quicksort_m3_insertion(data, 0, len(data) - 1)
print(data)  # [1, 3, 5, 7, 9]
```

## Algorithms

| Module | Functions |
| --- | --- |
| `sortbench.elementary` | `bubblesort`, `selectionsort`, `selectionsort_recursive`, `insertionsort_slow`, `insertionsort`, `shellsort` |
| `sortbench.mergesort` | `merge`, `mergesort` |
| `sortbench.heapsort` | `heapsort`, `pqsort_simple` |
| `sortbench.quicksorts` | `quicksort`, `quicksort_insertion`, `quicksort_m3`, `quicksort_m3_insertion` |
| `sortbench.introsort` | `introsort_quick_merge`, `introsort_quick_merge_jump`, `introsort_quick_heap_jump` |
| `sortbench.radixsort` | `radixsort` |
| `sortbench.cli` | `system_sort`, `library_sort`, `dummy_sort` |

Notes on particular algorithms:

- The quicksort variants work through an explicit stack of pending ranges, so
  already sorted input does not run into Python's recursion limit.
- `quicksort_insertion` and `quicksort_m3_insertion` leave short ranges
  unpartitioned and finish with a single `insertionsort` pass.
- The introsort variants partition with a median-of-three pivot while a depth
  budget of twice the base-2 logarithm of the range size lasts. If the budget
  runs out they write `trap/` to standard error and sort the range again with
  `mergesort` or `heapsort`; otherwise they finish with `insertionsort`.
- `mergesort` is stable.
- `radixsort` sorts non-negative integers only: it raises `TypeError` for a
  value that is not an integer and `ValueError` for a negative one.
- `system_sort` uses the built-in sort with the three-way `compare` function;
  `library_sort` uses the built-in sort with natural ordering; `dummy_sort`
  leaves the items untouched.

Supporting pieces are available too: the partition routines in
`sortbench.partition` (`partition_cormen`, `partition_sedgewick` and the
default `partition`, which is `partition_cormen`), and a binary max-heap in
`sortbench.priority_queue` (`PriorityQueue` with `insert`, `delmax`,
`is_empty` and `len()`, plus the 1-based heap helpers `fix_up` and
`fix_down`). `PriorityQueue` raises `IndexError` when inserting past its
capacity or removing from an empty queue.

To sort a whole list by algorithm name, use `sortbench.cli.sort_with`:

```python
from sortbench.cli import sort_with

print(sort_with("heapsort", [4, 2, 8, 6]))  # [2, 4, 6, 8]
```

An unknown name raises `ValueError`.

## Command line

The `sortbench` command reads a count followed by that many
whitespace-separated integers from standard input, sorts them with the chosen
algorithm, and prints one number per line:

```sh
printf '5\n5 3 9 1 7\n' | sortbench quicksort
```

The algorithm names are `dummy`, `bubblesort`, `selectionsort`,
`selectionsortR`, `insertionsortslow`, `insertionsort`, `shellsort`,
`quicksort`, `quicksortinsertion`, `quicksortM3`, `quicksortM3insertion`,
`mergesort`, `systemqsort`, `introsortquickmerge`,
`introsortquickmergelongjmp`, `introsortquickheaplongjmp`, `radixsort`,
`cppsort`, `pqsortsimple` and `heapsort`. Without a name, `systemqsort` is
used. Run `sortbench --help` for the list.

The `dummy` algorithm leaves the input in its original order, which is useful
for measuring the cost of reading and writing alone. A missing or invalid
count, too few numbers, or a token that is not an integer makes the command
print an error to standard error and exit with status 1; numbers after the
given count are ignored.

## What it does not do

The package sorts and prints; it does not generate test input files, and it
does not time runs or compare algorithms by itself. Use your own shell tools
or a benchmarking harness around the `sortbench` command for that.

## Tests

```sh
pip install -e '.[test]'
pytest
```