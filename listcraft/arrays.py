"""Small numeric and sequence routines."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from itertools import combinations, groupby, pairwise
from math import isqrt


def _four_divisor_sum(x: int) -> int:
    root = isqrt(x)
    if root * root == x:
        return 0
    divisors = [d for i in range(1, root + 1) if x % i == 0 for d in (i, x // i)]
    return sum(divisors) if len(divisors) == 4 else 0


def sum_four_divisors(nums: Iterable[int]) -> int:
    """Sum the divisors of every number that has exactly four of them."""
    return sum(_four_divisor_sum(x) for x in nums)


def maximum_gap(nums: Iterable[int]) -> int:
    """Return the largest difference between neighbours once sorted."""
    return max((b - a for a, b in pairwise(sorted(nums))), default=0)


def count_good_triplets(arr: Sequence[int], a: int, b: int, c: int) -> int:
    """Count index-ordered triplets whose pairwise differences are in bounds."""
    return sum(
        1
        for x, y, z in combinations(arr, 3)
        if abs(x - y) <= a and abs(y - z) <= b and abs(x - z) <= c
    )


def count_pairs(nums: Sequence[int], k: int) -> int:
    """Count pairs i < j with equal values and i * j divisible by ``k``."""
    return sum(
        1
        for (i, x), (j, y) in combinations(enumerate(nums), 2)
        if x == y and (i * j) % k == 0
    )


def max_consecutive(bottom: int, top: int, special: Iterable[int]) -> int:
    """Longest run of floors in [bottom, top] free of special floors."""
    floors = sorted(special)
    if not floors:
        raise ValueError("at least one special floor is required")
    gaps = (hi - lo - 1 for lo, hi in pairwise(floors))
    return max(floors[0] - bottom, top - floors[-1], *gaps)


def get_sum(a: int, b: int) -> int:
    """Return ``a + b``."""
    return a + b


def count_and_say(n: int) -> str:
    """Return the n-th term of the count-and-say sequence (1-based)."""
    if n < 1:
        raise ValueError("n must be at least 1")
    term = "1"
    for _ in range(n - 1):
        term = "".join(f"{len(list(run))}{digit}" for digit, run in groupby(term))
    return term


def sort_array(nums: Iterable[int]) -> list[int]:
    """Return a new list with the numbers in ascending order (stable merge sort)."""
    items = list(nums)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return list(heapq.merge(sort_array(items[:mid]), sort_array(items[mid:])))