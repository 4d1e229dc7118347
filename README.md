# listcraft

A collection of small algorithms that work on singly linked lists, plus a few
routines for integer arrays and spiral matrices. It is pure Python and has no
runtime dependencies.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Linked lists (`listcraft.nodes`)

Lists are chains of `ListNode` objects, each with a `val` and a `next`.
`build_list` makes a chain from any iterable (an empty one gives `None`), and
`to_values` turns a chain back into a Python list. Iterating over a node yields
the values from that node to the end. `reverse_list(head)` reverses a chain in
place and returns the new head.

```python
from listcraft.nodes import build_list, to_values, reverse_list

head = build_list([1, 2, 3, 4])
print(to_values(reverse_list(head)))  # [4, 3, 2, 1]
```

Most functions relink the nodes they are given instead of copying them, so the
list passed in should not be used afterwards except through the returned head.
Where an argument is out of range, the functions raise `ValueError`.

### Inspecting a list (`listcraft.inspection`)

- `has_cycle(head)`: tells whether the list loops back on itself.
- `detect_cycle(head)`: returns the node where a cycle starts, or `None`.
- `get_intersection_node(head_a, head_b)`: returns the first node that two lists share, or `None`.
- `nodes_between_critical_points(head)`: returns a `(minimum, maximum)` tuple of distances between local maxima or minima, or `(-1, -1)` when there are fewer than two.
- `is_palindrome(head)`: tells whether the values read the same in both directions.

### Merging and sorting (`listcraft.merging`)

- `merge_two_lists(list1, list2)` splices two sorted lists; on equal values the node from `list1` comes first.
- `merge_k_lists(lists)` merges any number of sorted lists; an empty input gives `None`.
- `sort_list(head)` runs a merge sort on a list.
- `merge_in_between(list1, a, b, list2)` replaces nodes `a` to `b` (0-based) of `list1` with `list2`. It needs `1 <= a <= b < len(list1)` and a non-empty `list2`.
- `merge_nodes(head)` takes a list that starts and ends with zero and returns a new list holding the sum of each run between zeros.

```python
from listcraft.merging import merge_k_lists
from listcraft.nodes import build_list, to_values

lists = [build_list([1, 4, 5]), build_list([1, 3, 4]), build_list([2, 6])]
print(to_values(merge_k_lists(lists)))  # [1, 1, 2, 3, 4, 4, 5, 6]
```

### Reordering (`listcraft.reordering`)

- `reorder_list(head)`: relinks L0, L1, …, Ln into L0, Ln, L1, Ln-1, … in place and returns `None`.
- `reverse_between(head, left, right)`: reverses the nodes at 1-based positions `left` to `right`.
- `reverse_even_length_groups(head)`: splits the list into groups of 1, 2, 3, … nodes and reverses each group whose actual length is even.
- `swap_pairs(head)`: swaps the values of each adjacent pair.
- `odd_even_list(head)`: puts odd-positioned nodes before even-positioned ones.
- `rotate_right(head, k)`: rotates the list right by `k` places (`k` wraps around the length).
- `swap_nodes(head, k)`: swaps the values of the k-th node from the start and from the end.
- `partition(head, x)`: puts nodes below `x` before the rest, keeping their order.
- `remove_nth_from_end(head, n)`: unlinks the n-th node from the end.
- `delete_duplicates(head)`: keeps one node of each run of equal values.

```python
from listcraft.reordering import rotate_right
from listcraft.nodes import build_list, to_values

print(to_values(rotate_right(build_list([1, 2, 3, 4, 5]), 2)))  # [4, 5, 1, 2, 3]
```

## Matrices (`listcraft.matrices`)

- `generate_matrix(n)` fills an `n` by `n` matrix with 1 to n² in clockwise spiral order.
- `spiral_matrix(m, n, head)` fills an `m` by `n` matrix with a list's values in spiral order. Cells that are left over hold `-1`.

```python
from listcraft.matrices import generate_matrix

print(generate_matrix(3))  # [[1, 2, 3], [8, 9, 4], [7, 6, 5]]
```

## Arrays and numbers (`listcraft.arrays`)

- `sum_four_divisors(nums)`: sums the divisors of each number that has exactly four.
- `maximum_gap(nums)`: largest difference between neighbours once sorted, or 0.
- `count_good_triplets(arr, a, b, c)`: counts triplets in index order whose pairwise differences stay within `a`, `b` and `c`.
- `count_pairs(nums, k)`: counts pairs `i < j` with equal values and `i * j` divisible by `k`.
- `max_consecutive(bottom, top, special)`: longest run of floors in `[bottom, top]` with no special floor; needs at least one special floor.
- `get_sum(a, b)`: returns `a + b`.
- `count_and_say(n)`: the n-th term of the count-and-say sequence, starting at 1.
- `sort_array(nums)`: returns a new sorted list (stable merge sort).

```python
from listcraft.arrays import count_and_say, sort_array

print(count_and_say(4))          # "1211"
print(sort_array([5, 2, 3, 1]))  # [1, 2, 3, 5]
```

## What it does not do

listcraft is a library only: it has no command-line tool, and it does not
read or write files. Lists are built and inspected from Python code.