"""Read-only queries on linked lists: cycles, intersections, shape."""

from __future__ import annotations

from itertools import pairwise

from listcraft.nodes import ListNode


def _meeting_point(head: ListNode | None) -> ListNode | None:
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return slow
    return None


def has_cycle(head: ListNode | None) -> bool:
    """Tell whether following ``next`` from ``head`` loops forever."""
    return _meeting_point(head) is not None


def detect_cycle(head: ListNode | None) -> ListNode | None:
    """Return the node where the cycle begins, or None if there is none."""
    meet = _meeting_point(head)
    if meet is None:
        return None
    start = head
    while start is not meet:
        start = start.next
        meet = meet.next
    return start


def _length(head: ListNode | None) -> int:
    count = 0
    while head is not None:
        count += 1
        head = head.next
    return count


def _advance(head: ListNode | None, steps: int) -> ListNode | None:
    for _ in range(steps):
        head = head.next
    return head


def get_intersection_node(
    head_a: ListNode | None, head_b: ListNode | None
) -> ListNode | None:
    """Return the first node shared by both lists, or None."""
    len_a, len_b = _length(head_a), _length(head_b)
    a = _advance(head_a, max(len_a - len_b, 0))
    b = _advance(head_b, max(len_b - len_a, 0))
    while a is not b:
        a = a.next
        b = b.next
    return a


def nodes_between_critical_points(head: ListNode | None) -> tuple[int, int]:
    """Return (minimum, maximum) distance between local extrema, or (-1, -1)."""
    values = [] if head is None else list(head)
    critical = [
        index
        for index, (prev, cur, nxt) in enumerate(
            zip(values, values[1:], values[2:]), start=1
        )
        if prev < cur > nxt or prev > cur < nxt
    ]
    if len(critical) < 2:
        return (-1, -1)
    smallest = min(b - a for a, b in pairwise(critical))
    return (smallest, critical[-1] - critical[0])


def is_palindrome(head: ListNode | None) -> bool:
    """Tell whether the list reads the same forwards and backwards."""
    values = [] if head is None else list(head)
    return values == values[::-1]