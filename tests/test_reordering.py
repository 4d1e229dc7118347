import pytest
from hypothesis import given
from hypothesis import strategies as st

from listcraft.nodes import build_list, to_values
from listcraft.reordering import (
    delete_duplicates,
    odd_even_list,
    partition,
    remove_nth_from_end,
    reorder_list,
    reverse_between,
    reverse_even_length_groups,
    rotate_right,
    swap_nodes,
    swap_pairs,
)

small_lists = st.lists(st.integers(-50, 50), max_size=30)
nonempty_lists = st.lists(st.integers(-50, 50), min_size=1, max_size=30)


def test_reorder_list_example():
    head = build_list([1, 2, 3, 4, 5])
    reorder_list(head)
    assert to_values(head) == [1, 5, 2, 4, 3]


@given(nonempty_lists)
def test_reorder_list_interleaves_front_and_back(values):
    head = build_list(values)
    reorder_list(head)
    result = to_values(head)
    n = len(values)
    assert len(result) == n
    assert result[::2] == values[: (n + 1) // 2]
    assert result[1::2] == values[::-1][: n // 2]


def test_reorder_list_empty_is_noop():
    assert reorder_list(None) is None


@given(nonempty_lists)
def test_reverse_between_full_range_reverses(values):
    head = reverse_between(build_list(values), 1, len(values))
    assert to_values(head) == values[::-1]


@given(st.data())
def test_reverse_between_segment(data):
    values = data.draw(nonempty_lists)
    left = data.draw(st.integers(1, len(values)))
    right = data.draw(st.integers(left, len(values)))
    result = to_values(reverse_between(build_list(values), left, right))
    assert result[: left - 1] == values[: left - 1]
    assert result[right:] == values[right:]
    assert result[left - 1 : right] == values[left - 1 : right][::-1]


@pytest.mark.parametrize("left, right", [(0, 2), (3, 2), (2, 9)])
def test_reverse_between_rejects_bad_range(left, right):
    with pytest.raises(ValueError):
        reverse_between(build_list([1, 2, 3]), left, right)


def test_reverse_even_length_groups_example():
    head = build_list([5, 2, 6, 3, 9, 1, 7, 3, 8, 4])
    assert to_values(reverse_even_length_groups(head)) == [
        5, 6, 2, 3, 9, 1, 4, 8, 3, 7
    ]


@given(small_lists)
def test_reverse_even_length_groups_is_involution(values):
    once = reverse_even_length_groups(build_list(values))
    twice = reverse_even_length_groups(once)
    assert to_values(twice) == values


@given(nonempty_lists)
def test_reverse_even_length_groups_keeps_head_and_values(values):
    result = to_values(reverse_even_length_groups(build_list(values)))
    assert result[0] == values[0]
    assert sorted(result) == sorted(values)


@given(small_lists)
def test_swap_pairs_is_involution(values):
    assert to_values(swap_pairs(swap_pairs(build_list(values)))) == values


@given(st.lists(st.integers(), min_size=2, max_size=20))
def test_swap_pairs_swaps_neighbours(values):
    result = to_values(swap_pairs(build_list(values)))
    assert result[0] == values[1]
    assert result[1] == values[0]


@given(small_lists)
def test_odd_even_list_groups_positions(values):
    head = build_list(values)
    result = odd_even_list(head)
    assert result is head
    assert to_values(result) == values[::2] + values[1::2]


@given(nonempty_lists)
def test_rotate_by_length_is_identity(values):
    assert to_values(rotate_right(build_list(values), len(values))) == values


@given(st.data())
def test_rotate_round_trip(data):
    values = data.draw(nonempty_lists)
    k = data.draw(st.integers(0, 3 * len(values)))
    rotated = rotate_right(build_list(values), k)
    back = rotate_right(rotated, len(values) - k % len(values))
    assert to_values(back) == values


@given(st.data())
def test_rotate_moves_tail_to_front(data):
    values = data.draw(st.lists(st.integers(), min_size=2, max_size=20))
    k = data.draw(st.integers(1, len(values) - 1))
    result = to_values(rotate_right(build_list(values), k))
    assert result == values[-k:] + values[:-k]


def test_rotate_rejects_negative():
    with pytest.raises(ValueError):
        rotate_right(build_list([1, 2]), -1)


def test_rotate_empty():
    assert rotate_right(None, 4) is None


@given(st.data())
def test_swap_nodes_symmetric_and_involution(data):
    values = data.draw(nonempty_lists)
    k = data.draw(st.integers(1, len(values)))
    mirror = len(values) - k + 1
    a = to_values(swap_nodes(build_list(values), k))
    b = to_values(swap_nodes(build_list(values), mirror))
    assert a == b
    assert a[k - 1] == values[-k]
    assert to_values(swap_nodes(build_list(a), k)) == values


@pytest.mark.parametrize("k", [0, 4])
def test_swap_nodes_rejects_bad_k(k):
    with pytest.raises(ValueError):
        swap_nodes(build_list([1, 2, 3]), k)


def test_partition_example():
    head = build_list([1, 4, 3, 2, 5, 2])
    assert to_values(partition(head, 3)) == [1, 2, 2, 4, 3, 5]


@given(small_lists, st.integers(-50, 50))
def test_partition_invariants(values, x):
    result = to_values(partition(build_list(values), x))
    assert sorted(result) == sorted(values)
    cut = sum(1 for v in values if v < x)
    assert all(v < x for v in result[:cut])
    assert all(v >= x for v in result[cut:])


@given(st.data())
def test_remove_nth_from_end(data):
    values = data.draw(nonempty_lists)
    n = data.draw(st.integers(1, len(values)))
    cut = len(values) - n
    result = to_values(remove_nth_from_end(build_list(values), n))
    assert result == values[:cut] + values[cut + 1 :]


def test_remove_only_node_gives_empty():
    assert remove_nth_from_end(build_list([7]), 1) is None


@pytest.mark.parametrize("n", [0, 3])
def test_remove_nth_rejects_bad_n(n):
    with pytest.raises(ValueError):
        remove_nth_from_end(build_list([1, 2]), n)


@given(small_lists)
def test_delete_duplicates_on_sorted(values):
    values.sort()
    assert to_values(delete_duplicates(build_list(values))) == sorted(set(values))


def test_delete_duplicates_empty():
    assert delete_duplicates(None) is None