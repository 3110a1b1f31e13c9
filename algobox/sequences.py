"""Algorithms over sequences of integers."""

from __future__ import annotations

import heapq
from collections import deque
from typing import Iterable, Optional, Sequence


def longest_increasing_subsequence(values: Sequence[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    lengths: list[int] = []
    for i, value in enumerate(values):
        best = 1
        for earlier, length in zip(values[:i], lengths):
            if value > earlier and best < length + 1:
                best = length + 1
        lengths.append(best)
    return max(lengths, default=0)


def min_max(values: Iterable[int]) -> tuple[int, int]:
    """Return the smallest and the largest value."""
    iterator = iter(values)
    try:
        smallest = largest = next(iterator)
    except StopIteration:
        raise ValueError("min_max() of an empty sequence") from None
    for value in iterator:
        if value > largest:
            largest = value
        elif value < smallest:
            smallest = value
    return smallest, largest


def sliding_window_max(values: Sequence[int], k: int) -> list[int]:
    """Return the maximum of every contiguous window of length ``k``."""
    if not 1 <= k <= len(values):
        raise ValueError("window length must be between 1 and the sequence length")
    window: deque[int] = deque()
    maxima: list[int] = []
    for i, value in enumerate(values):
        if window and window[0] <= i - k:
            window.popleft()
        while window and value >= values[window[-1]]:
            window.pop()
        window.append(i)
        if i >= k - 1:
            maxima.append(values[window[0]])
    return maxima


def count_triplets_below(values: Iterable[int], total: int) -> int:
    """Count index triplets whose values sum to less than ``total``."""
    items = sorted(values)
    count = 0
    for i in range(len(items) - 2):
        j, k = i + 1, len(items) - 1
        while j < k:
            if items[i] + items[j] + items[k] < total:
                count += k - j
                j += 1
            else:
                k -= 1
    return count


def min_refuels(
    stations: Iterable[tuple[int, int]], distance: int, fuel: int
) -> Optional[int]:
    """Return the fewest stops needed to reach the town, or None if impossible.

    ``stations`` holds ``(distance_to_town, fuel_available)`` pairs; the truck
    starts ``distance`` units from the town with ``fuel`` units, burning one
    unit per unit travelled.
    """
    positions = sorted(
        ((distance - to_town, amount) for to_town, amount in stations),
        key=lambda station: station[0],
    )
    available: list[int] = []
    refuels = 0
    previous = 0

    def cover(leg: int) -> bool:
        nonlocal fuel, refuels
        while fuel < leg:
            if not available:
                return False
            fuel -= heapq.heappop(available)
            refuels += 1
        fuel -= leg
        return True

    for position, amount in positions:
        if not cover(position - previous):
            return None
        heapq.heappush(available, -amount)
        previous = position
    if not cover(distance - previous):
        return None
    return refuels


def are_equal(a: int, b: int) -> bool:
    """Return whether two integers are equal, using exclusive or."""
    return not (a ^ b)