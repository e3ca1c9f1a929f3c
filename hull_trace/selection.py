"""Pairing and order-statistic helpers for the bridge finder."""
from collections import deque
from typing import Callable, List, Optional, Sequence, Tuple

from .geometry import Point


def pop_arbitrary(items: deque):
    """Remove and return one element; the first in insertion order, so runs are repeatable."""
    return items.popleft()


def pair_up(points: Sequence[Point]) -> Tuple[List[Tuple[Point, Point]], Optional[Point]]:
    """
    Pair points off in insertion order.

    Each pair is sorted lexicographically. Returns the pairs and the odd point
    out (or None when the count is even).
    """
    remaining = deque(points)
    pairs = []
    while len(remaining) >= 2:
        a = pop_arbitrary(remaining)
        b = pop_arbitrary(remaining)
        pairs.append((a, b) if a <= b else (b, a))
    leftover = pop_arbitrary(remaining) if remaining else None
    return pairs, leftover


def kth_smallest(items: Sequence, k: int, key: Optional[Callable] = None):
    # a full sort is enough here, only the k-th order statistic matters
    if not items:
        raise ValueError("kth_smallest() of an empty sequence")
    return sorted(items, key=key)[k]


def kth_smallest_point(points: Sequence[Point], k: int) -> Point:
    return kth_smallest(points, k)


def kth_smallest_slope(slopes: Sequence, k: int):
    return kth_smallest(slopes, k)


def lower_median_index(n: int) -> int:
    """Index of the lower median among n sorted values."""
    return n // 2 - (1 if n % 2 == 0 else 0)
