"""In-place rearrangements of linked lists."""

from __future__ import annotations

from listcraft.nodes import ListNode, reverse_list


def _nodes(head: ListNode | None) -> list[ListNode]:
    nodes = []
    while head is not None:
        nodes.append(head)
        head = head.next
    return nodes


def reorder_list(head: ListNode | None) -> None:
    """Relink L0, L1, ..., Ln into L0, Ln, L1, Ln-1, ... in place."""
    if head is None:
        return
    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next
        fast = fast.next.next
    second = reverse_list(slow.next)
    slow.next = None
    first = head
    while second is not None:
        first_next = first.next
        second_next = second.next
        first.next = second
        second.next = first_next
        first = first_next
        second = second_next


def reverse_between(
    head: ListNode | None, left: int, right: int
) -> ListNode | None:
    """Reverse the nodes at 1-based positions ``left`` to ``right``."""
    length = len(_nodes(head))
    if not 1 <= left <= right <= length:
        raise ValueError(
            f"invalid range left={left}, right={right} for list of {length}"
        )
    if left == right:
        return head
    dummy = ListNode(next=head)
    before = dummy
    for _ in range(left - 1):
        before = before.next
    first = before.next
    end = first
    for _ in range(right - left):
        end = end.next
    after = end.next
    end.next = None
    before.next = reverse_list(first)
    first.next = after
    return dummy.next


def reverse_even_length_groups(head: ListNode | None) -> ListNode | None:
    """Reverse every group (sizes 1, 2, 3, ...) whose actual length is even."""
    if head is None:
        return None
    prev = head
    size = 2
    while prev.next is not None:
        node = prev.next
        count = 0
        while node is not None and count < size:
            node = node.next
            count += 1
        if count % 2 == 0:
            first = prev.next
            cur, new_prev = first, node
            for _ in range(count):
                cur.next, new_prev, cur = new_prev, cur, cur.next
            prev.next = new_prev
            prev = first
        else:
            for _ in range(count):
                prev = prev.next
        size += 1
    return head


def swap_pairs(head: ListNode | None) -> ListNode | None:
    """Swap the values of each adjacent pair of nodes."""
    node = head
    while node is not None and node.next is not None:
        node.val, node.next.val = node.next.val, node.val
        node = node.next.next
    return head


def odd_even_list(head: ListNode | None) -> ListNode | None:
    """Group odd-positioned nodes before even-positioned ones, keeping order."""
    if head is None:
        return None
    odd = head
    even = even_head = head.next
    while even is not None and even.next is not None:
        odd.next = even.next
        odd = odd.next
        even.next = odd.next
        even = even.next
    odd.next = even_head
    return head


def rotate_right(head: ListNode | None, k: int) -> ListNode | None:
    """Rotate the list to the right by ``k`` places."""
    if k < 0:
        raise ValueError("k must not be negative")
    nodes = _nodes(head)
    if not nodes:
        return head
    size = len(nodes)
    k %= size
    if k == 0:
        return head
    nodes[-1].next = head
    nodes[size - k - 1].next = None
    return nodes[size - k]


def swap_nodes(head: ListNode | None, k: int) -> ListNode | None:
    """Swap the values of the k-th node from the start and from the end."""
    nodes = _nodes(head)
    if not 1 <= k <= len(nodes):
        raise ValueError(f"k={k} out of range for list of {len(nodes)}")
    front, back = nodes[k - 1], nodes[-k]
    front.val, back.val = back.val, front.val
    return head


def partition(head: ListNode | None, x) -> ListNode | None:
    """Put nodes with values below ``x`` before the rest, keeping order."""
    low = low_tail = ListNode()
    high = high_tail = ListNode()
    while head is not None:
        if head.val < x:
            low_tail.next = head
            low_tail = head
        else:
            high_tail.next = head
            high_tail = head
        head = head.next
    high_tail.next = None
    low_tail.next = high.next
    return low.next


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Unlink the n-th node from the end and return the head."""
    length = len(_nodes(head))
    if not 1 <= n <= length:
        raise ValueError(f"n={n} out of range for list of {length}")
    dummy = ListNode(next=head)
    fast = slow = dummy
    for _ in range(n + 1):
        fast = fast.next
    while fast is not None:
        slow = slow.next
        fast = fast.next
    slow.next = slow.next.next
    return dummy.next


def delete_duplicates(head: ListNode | None) -> ListNode | None:
    """Drop consecutive repeated values so each run keeps one node."""
    node = head
    while node is not None:
        run = node.next
        while run is not None and run.val == node.val:
            run = run.next
        node.next = run
        node = run
    return head