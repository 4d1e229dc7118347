"""Merging and sorting of linked lists."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from listcraft.nodes import ListNode, build_list


def merge_two_lists(
    list1: ListNode | None, list2: ListNode | None
) -> ListNode | None:
    """Splice two sorted lists into one sorted list; ties favour ``list1``."""
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val <= list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def merge_k_lists(lists: Iterable[ListNode | None]) -> ListNode | None:
    """Merge any number of sorted lists, pairing them off from the front."""
    queue = deque(lists)
    if not queue:
        return None
    while len(queue) > 1:
        first = queue.popleft()
        second = queue.popleft()
        queue.append(merge_two_lists(first, second))
    return queue[0]


def sort_list(head: ListNode | None) -> ListNode | None:
    """Sort the list by merge sort and return its new head."""
    if head is None or head.next is None:
        return head
    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next
        fast = fast.next.next
    second = slow.next
    slow.next = None
    return merge_two_lists(sort_list(head), sort_list(second))


def merge_in_between(
    list1: ListNode | None, a: int, b: int, list2: ListNode | None
) -> ListNode | None:
    """Replace nodes ``a`` to ``b`` (0-based) of ``list1`` with ``list2``."""
    if list2 is None:
        raise ValueError("list2 must not be empty")
    nodes = []
    node = list1
    while node is not None:
        nodes.append(node)
        node = node.next
    if not 1 <= a <= b < len(nodes):
        raise ValueError(f"invalid range a={a}, b={b} for list of {len(nodes)}")
    tail = list2
    while tail.next is not None:
        tail = tail.next
    tail.next = nodes[b + 1] if b + 1 < len(nodes) else None
    nodes[a - 1].next = list2
    return list1


def merge_nodes(head: ListNode | None) -> ListNode | None:
    """Collapse each run between zeros into one node holding its sum."""
    if head is None:
        raise ValueError("list must not be empty")
    values = list(head)[1:]
    if values and values[-1] != 0:
        raise ValueError("list must end with a zero")
    sums = []
    total = 0
    for value in values:
        if value == 0:
            sums.append(total)
            total = 0
        else:
            total += value
    return build_list(sums)